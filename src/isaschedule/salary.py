# src/isaschedule/salary.py
"""Salary projection from the repayment start year onwards."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.config import SimulationInputs


def project_salary(inputs: SimulationInputs, year: int) -> float:
    """
    salary(start) = S₀
    salary(t)     = salary(t-1) · (1 + g/100)

    Compounded one year at a time so the rounding matches the iterative
    threshold and schedule computations.
    """
    growth = 1 + inputs.expected_salary_increase_percentage / 100
    salary = inputs.starting_salary
    for _ in range(inputs.repayment_start_year, year):
        salary *= growth
    return salary

