"""
Type aliases for isaschedule.

Schedule columns are exposed as NumPy arrays by
:meth:`isaschedule.results.ScheduleResult.get_array`.
"""

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

Float1D: TypeAlias = NDArray[np.float64]
Int1D: TypeAlias = NDArray[np.int64]

__all__ = [
    "Float1D",
    "Int1D",
]
