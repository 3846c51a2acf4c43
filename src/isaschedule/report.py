# src/isaschedule/report.py
"""Plain-text rendering of a repayment schedule."""
from __future__ import annotations

import io
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.results import ScheduleResult, ScheduleSummary

TITLE = "Income Sharing Agreement - payment schedule"
HEADER = ("Year", "Salary", "Repayment", "Threshold Sum")


def write_report(
    result: ScheduleResult,
    sink: TextIO,
    summary: ScheduleSummary | None = None,
) -> None:
    """
    Write the schedule table and its summary lines to *sink*.

    Rows are tab-separated; money values use two decimals and the
    equivalent rate is printed as a percentage.
    """
    summary = summary if summary is not None else result.summary()

    sink.write(f"{TITLE}\n\n")
    sink.write("\t".join(HEADER) + "\n")
    for row in result.rows:
        sink.write(
            f"{row.year:d}\t{row.salary:.2f}\t"
            f"{row.repayment:.2f}\t{row.threshold:.2f}\n"
        )

    sink.write(f"\nTotal repaid: {summary.total_repaid:.2f}\n")
    sink.write(f"Multiples of borrowed sum repaid: {summary.repaid_fraction:.2f}\n")
    sink.write(
        "Equivalent to an education loan with interest rate of "
        f"{summary.equivalent_rate * 100:.2f}%\n"
    )


def render_report(
    result: ScheduleResult, summary: ScheduleSummary | None = None
) -> str:
    """Return the text `write_report` would produce."""
    buf = io.StringIO()
    write_report(result, buf, summary)
    return buf.getvalue()
