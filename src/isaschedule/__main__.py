import sys

from isaschedule.main import main

sys.exit(main())
