"""Command-line runner for isaschedule."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from typing import Any

from isaschedule import __version__
from isaschedule.projection import Projection

ENV_PREFIX = "ISASCHEDULE_"

# (flag, input name, parser, help)
_INPUT_FLAGS: tuple[tuple[str, str, Callable[[str], Any], str], ...] = (
    ("--borrowed-sum", "borrowed_sum", float, "Sum borrowed under the agreement"),
    ("--borrowed-year", "borrowed_year", int, "Year the agreement was signed"),
    (
        "--repayment-start-year",
        "repayment_start_year",
        int,
        "Year repayments started",
    ),
    (
        "--sharing-percentage",
        "sharing_percentage",
        float,
        "Percentage of gross salary repaid every year",
    ),
    (
        "--starting-salary",
        "starting_salary",
        float,
        "Gross salary in the repayment start year",
    ),
    (
        "--expected-salary-increase-percentage",
        "expected_salary_increase_percentage",
        float,
        "Average expected annual salary increase (percent)",
    ),
    (
        "--expected-cpi-increase-percentage",
        "expected_cpi_increase_percentage",
        float,
        "Average predicted CPI rate for future years (percent)",
    ),
    (
        "--number-of-repayment-years",
        "repayment_years",
        int,
        "Number of years the income is shared",
    ),
)


def _number(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    def _parse(text: str) -> Any:
        try:
            return parse(text)
        except ValueError:
            raise argparse.ArgumentTypeError("invalid number") from None

    _parse.__name__ = parse.__name__
    return _parse


def env_var(flag: str) -> str:
    """``--borrowed-sum`` → ``ISASCHEDULE_BORROWED_SUM``."""
    return ENV_PREFIX + flag.lstrip("-").replace("-", "_").upper()


def _cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="isaschedule",
        description="Generate the payment schedule of an income sharing agreement.",
        epilog=f"Every input flag can also be set as an {ENV_PREFIX}* "
        "environment variable, e.g. "
        f"{env_var('--borrowed-sum')}=10000.",
    )
    for flag, dest, parse, help_text in _INPUT_FLAGS:
        p.add_argument(flag, dest=dest, type=_number(parse), help=help_text)
    p.add_argument("--config", help="YAML file with input parameters")
    p.add_argument("--output", help="Write the report here instead of stdout")
    p.add_argument(
        "--log-level",
        choices=["DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for isaschedule loggers",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    # Environment fills in whatever the flags left unset
    for flag, dest, parse, _ in _INPUT_FLAGS:
        if getattr(args, dest) is not None:
            continue
        raw = os.environ.get(env_var(flag))
        if raw is None:
            continue
        try:
            setattr(args, dest, parse(raw))
        except ValueError:
            p.error(f"{env_var(flag)}: invalid number: {raw!r}")

    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _cli(argv)

    overrides: dict[str, Any] = {
        dest: getattr(args, dest)
        for _, dest, _, _ in _INPUT_FLAGS
        if getattr(args, dest) is not None
    }
    if args.log_level is not None:
        overrides["logging"] = {"default_level": args.log_level}

    try:
        proj = Projection.init(config=args.config, **overrides)
    except (ValueError, TypeError, OSError) as exc:
        print(f"isaschedule: error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        proj.write_report(sys.stdout)
    else:
        with open(args.output, "w", encoding="utf-8") as fh:
            proj.write_report(fh)

    return 0


if __name__ == "__main__":
    sys.exit(main())
