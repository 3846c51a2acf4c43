# src/isaschedule/threshold.py
"""
Repayment cap ("threshold") of the agreement.

The cap is twice the borrowed sum, compounded by the CPI rate of every
year from the borrowing year through the requested year inclusive.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from isaschedule.cpi import cpi_rates
from isaschedule.logging import DEEP_DEBUG, getLogger

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.config import SimulationInputs

THRESHOLD_MULTIPLE = 2

log = getLogger(__name__)


def threshold_value(inputs: SimulationInputs, year: int) -> float:
    """
    T(year) = 2 · B · Π_{i=borrowed_year}^{year} (1 + cpi_i / 100)

    *year* must not precede ``inputs.borrowed_year``.
    """
    threshold = inputs.borrowed_sum * THRESHOLD_MULTIPLE
    rates = cpi_rates(inputs, year)
    for i in range(inputs.borrowed_year, year + 1):
        threshold *= 1 + rates[i] / 100
        if log.isEnabledFor(DEEP_DEBUG):
            log.deep(f"  CPI {i}: {rates[i]:.2f}% -> threshold {threshold:,.2f}")
    return threshold
