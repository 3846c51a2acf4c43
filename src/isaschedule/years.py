# src/isaschedule/years.py
"""Selectable year ranges for the borrowing and repayment-start years."""

from __future__ import annotations

import datetime as _dt

START_YEAR = 2019
FUTURE_YEARS = 10


def _current_year() -> int:
    return _dt.date.today().year


def past_years() -> list[int]:
    """Years an agreement can have been signed in: 2019 through this year."""
    return list(range(START_YEAR, _current_year() + 1))


def all_years() -> list[int]:
    """`past_years` followed by the next ten years."""
    current = _current_year()
    return past_years() + list(range(current + 1, current + FUTURE_YEARS + 1))
