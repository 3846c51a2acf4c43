# src/isaschedule/cpi.py
"""
Annual CPI rates used to compound the repayment threshold.

Historical rates are the German consumer price index published by
Destatis (table 61111-0001); 2024, 2025 and 2026 are the Bundesbank
forecast. Later years use the caller's expected CPI increase.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.config import SimulationInputs

HISTORICAL_CPI_RATES: dict[int, float] = {
    2019: 1.4,
    2020: 0.5,
    2021: 3.1,
    2022: 6.9,
    2023: 6.0,
    2024: 2.8,
    2025: 2.7,
    2026: 2.2,
}

EARLIEST_CPI_YEAR = min(HISTORICAL_CPI_RATES)
LAST_HISTORICAL_YEAR = max(HISTORICAL_CPI_RATES)


def cpi_rates(inputs: SimulationInputs, through_year: int) -> dict[int, float]:
    """
    Return a fresh ``year -> percent`` table covering 2019 to *through_year*.

    Every year after the last historical one is filled with
    ``inputs.expected_cpi_increase_percentage``. The historical entries are
    always present, even when *through_year* precedes them.
    """
    rates = dict(HISTORICAL_CPI_RATES)
    for year in range(LAST_HISTORICAL_YEAR + 1, through_year + 1):
        rates[year] = inputs.expected_cpi_increase_percentage
    return rates
