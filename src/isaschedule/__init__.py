"""
isaschedule - Income Sharing Agreement repayment projections
============================================================

Projects the repayment schedule of an income sharing agreement (ISA):
the borrower repays a fixed share of their salary every year until either
the agreed number of years has passed or the cumulative repayment reaches
a cap of twice the borrowed sum, compounded by inflation (CPI) since the
year the agreement was signed.

Quick Start
-----------
>>> import sys
>>> import isaschedule as isa
>>> proj = isa.Projection.init(
...     borrowed_sum=10_000.0,
...     borrowed_year=2020,
...     repayment_start_year=2021,
...     sharing_percentage=10.0,
...     starting_salary=30_000.0,
...     repayment_years=10,
... )
>>> result = proj.run()
>>> result.summary().equivalent_rate
>>> proj.write_report(sys.stdout)

Inputs can also come from a YAML file:

>>> proj = isa.Projection.init(config="contract.yml")

Public API
----------
Projection
    Facade: merges defaults, config file and overrides, validates, runs.
SimulationInputs
    Immutable input snapshot threaded through every engine function.
build_schedule
    Year-by-year schedule with the cap applied.
cpi_rates, project_salary, threshold_value
    Building blocks of the schedule.
equivalent_interest_rate
    Newton-Raphson solution for the equivalent fixed rate.
ScheduleResult, ScheduleRow, ScheduleSummary
    Result records.
write_report, render_report
    Plain-text report of a schedule.
"""

from isaschedule.config import InputValidator, SimulationInputs
from isaschedule.cpi import HISTORICAL_CPI_RATES, cpi_rates
from isaschedule.projection import Projection
from isaschedule.report import render_report, write_report
from isaschedule.results import ScheduleResult, ScheduleRow, ScheduleSummary
from isaschedule.salary import project_salary
from isaschedule.scheduler import build_schedule
from isaschedule.solver import equivalent_interest_rate, newton_raphson
from isaschedule.threshold import threshold_value

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Projection",
    "SimulationInputs",
    "InputValidator",
    "HISTORICAL_CPI_RATES",
    "cpi_rates",
    "project_salary",
    "threshold_value",
    "build_schedule",
    "equivalent_interest_rate",
    "newton_raphson",
    "ScheduleResult",
    "ScheduleRow",
    "ScheduleSummary",
    "write_report",
    "render_report",
]
