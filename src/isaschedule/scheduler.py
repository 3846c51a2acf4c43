# src/isaschedule/scheduler.py
"""
Year-by-year repayment schedule.

Walks from the repayment start year through ``repayment_years`` further
years, adding each year's share of salary to the running total. The first
year the total exceeds that year's threshold is paid only up to the
threshold and ends the schedule.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isaschedule.logging import getLogger
from isaschedule.results import ScheduleResult, ScheduleRow
from isaschedule.salary import project_salary
from isaschedule.threshold import threshold_value

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.config import SimulationInputs

log = getLogger(__name__)


def build_schedule(inputs: SimulationInputs) -> ScheduleResult:
    """
    repayment_t = salary_t · s / 100
    total       += repayment_t
    if total > T(t):  repayment_t −= total − T(t);  total = T(t);  stop

    Returns
    -------
    ScheduleResult
        One row per visited year; the row of the year the cap is reached
        is the last one.
    """
    log.info("--- Building Repayment Schedule ---")
    log.info(
        f"  Borrowed {inputs.borrowed_sum:,.2f} in {inputs.borrowed_year}, "
        f"repaying {inputs.sharing_percentage:.2f}% of salary "
        f"from {inputs.repayment_start_year} to {inputs.final_year}"
    )

    rows: list[ScheduleRow] = []
    total_repaid = 0.0
    final_year = inputs.final_year
    threshold = 0.0

    for year in range(inputs.repayment_start_year, inputs.final_year + 1):
        salary = project_salary(inputs, year)
        repaid = salary * inputs.sharing_percentage / 100
        total_repaid += repaid
        threshold = threshold_value(inputs, year)

        if total_repaid > threshold:
            delta = total_repaid - threshold
            total_repaid = threshold
            final_year = year
            rows.append(ScheduleRow(year, salary, repaid - delta, threshold, True))
            log.info(
                f"  Threshold {threshold:,.2f} reached in {year}: "
                f"repayment reduced by {delta:,.2f}"
            )
            break

        rows.append(ScheduleRow(year, salary, repaid, threshold))
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                f"  {year}: salary={salary:,.2f} repaid={repaid:,.2f} "
                f"total={total_repaid:,.2f} threshold={threshold:,.2f}"
            )

    log.info(
        f"  Schedule finished in {final_year} after {len(rows)} year(s), "
        f"total repaid {total_repaid:,.2f}"
    )

    return ScheduleResult(
        rows=tuple(rows),
        total_repaid=total_repaid,
        final_year=final_year,
        total_years_simulated=len(rows),
        principal=inputs.borrowed_sum,
        final_threshold=threshold,
    )
