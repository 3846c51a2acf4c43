"""Tests for the plain-text report."""

import io

from isaschedule.report import HEADER, TITLE, render_report, write_report
from isaschedule.results import ScheduleResult, ScheduleRow, ScheduleSummary
from isaschedule.scheduler import build_schedule
from tests.helpers.factories import scenario_b_inputs


def _result() -> ScheduleResult:
    return ScheduleResult(
        rows=(
            ScheduleRow(2021, 30_000.0, 3_000.0, 20_723.1),
            ScheduleRow(2022, 30_600.0, 3_060.0, 22_152.9939),
        ),
        total_repaid=6_060.0,
        final_year=2022,
        total_years_simulated=2,
        principal=10_000.0,
        final_threshold=22_152.9939,
    )


def test_layout():
    summary = ScheduleSummary(
        total_repaid=6_060.0, repaid_fraction=0.606, equivalent_rate=0.48837
    )
    lines = render_report(_result(), summary).splitlines()

    assert lines[0] == TITLE
    assert lines[1] == ""
    assert lines[2] == "\t".join(HEADER)
    assert lines[3] == "2021\t30000.00\t3000.00\t20723.10"
    assert lines[4] == "2022\t30600.00\t3060.00\t22152.99"
    assert lines[5] == ""
    assert lines[6] == "Total repaid: 6060.00"
    assert lines[7] == "Multiples of borrowed sum repaid: 0.61"
    assert lines[8] == "Equivalent to an education loan with interest rate of 48.84%"


def test_summary_computed_when_omitted():
    result = _result()
    text = render_report(result)

    rate = result.summary().equivalent_rate * 100
    assert f"interest rate of {rate:.2f}%" in text


def test_write_report_to_sink():
    sink = io.StringIO()
    result = build_schedule(scenario_b_inputs())
    write_report(result, sink)

    text = sink.getvalue()
    assert text == render_report(result)
    assert text.count("\n2021\t") == 1
    assert f"Total repaid: {result.final_threshold:.2f}" in text
