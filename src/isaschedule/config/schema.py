"""
Immutable input snapshot for one projection run.

This module defines the SimulationInputs dataclass, which groups the
eight agreement and forecast parameters in one immutable object. Every
engine function receives it explicitly; nothing in the engine reads
module-level state.

Design Notes
------------
- Immutable (frozen=True) so a run can never alter its own inputs
- Memory-efficient (slots=True)
- No defaults: Projection.init() merges defaults.yml, user config and
  overrides before construction
- Simple dataclass, no validation - that happens in InputValidator

See Also
--------
InputValidator : Centralized validation for input parameters
isaschedule.projection.Projection.init : Creates SimulationInputs
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class SimulationInputs:
    """
    Immutable parameters of an income-sharing agreement projection.

    Parameters
    ----------
    borrowed_sum : float
        Principal borrowed under the agreement (positive).
    borrowed_year : int
        Year the agreement was signed (>= 2019, the first year with
        CPI data).
    repayment_start_year : int
        First year of repayment (>= borrowed_year).
    sharing_percentage : float
        Percentage of gross salary repaid every year.
    starting_salary : float
        Gross salary in the repayment start year (non-negative).
    expected_salary_increase_percentage : float
        Average annual salary growth in percent. May be negative.
    expected_cpi_increase_percentage : float
        Average annual inflation in percent for years without
        historical data. May be negative.
    repayment_years : int
        Number of years simulated after the repayment start year.

    Examples
    --------
    >>> from isaschedule.config import SimulationInputs
    >>> inputs = SimulationInputs(
    ...     borrowed_sum=10_000.0,
    ...     borrowed_year=2020,
    ...     repayment_start_year=2021,
    ...     sharing_percentage=10.0,
    ...     starting_salary=30_000.0,
    ...     expected_salary_increase_percentage=2.0,
    ...     expected_cpi_increase_percentage=2.0,
    ...     repayment_years=10,
    ... )
    >>> inputs.final_year
    2031
    """

    borrowed_sum: float
    borrowed_year: int
    repayment_start_year: int
    sharing_percentage: float
    starting_salary: float
    expected_salary_increase_percentage: float
    expected_cpi_increase_percentage: float
    repayment_years: int

    @property
    def final_year(self) -> int:
        """Last year simulated when the cap is never reached."""
        return self.repayment_start_year + self.repayment_years

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict copy of the inputs (for reports and YAML dumps)."""
        return asdict(self)
