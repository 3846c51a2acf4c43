"""Unit tests for the schedule result records."""

import sys
from unittest import mock

import numpy as np
import pandas as pd
import pytest

from isaschedule.results import (
    ScheduleResult,
    ScheduleRow,
    ScheduleSummary,
    _import_pandas,
)
from isaschedule.scheduler import build_schedule
from tests.helpers.factories import make_inputs


@pytest.fixture
def two_year_result() -> ScheduleResult:
    return ScheduleResult(
        rows=(
            ScheduleRow(2021, 30_000.0, 3_000.0, 20_000.0),
            ScheduleRow(2022, 30_600.0, 3_060.0, 20_400.0),
        ),
        total_repaid=6_060.0,
        final_year=2022,
        total_years_simulated=2,
        principal=10_000.0,
        final_threshold=20_400.0,
    )


class TestScheduleRecords:
    def test_rows_are_immutable(self):
        row = ScheduleRow(2021, 1.0, 1.0, 1.0)
        with pytest.raises(AttributeError):
            row.salary = 2.0  # type: ignore[misc]

    def test_row_not_capped_by_default(self):
        assert ScheduleRow(2021, 1.0, 1.0, 1.0).capped is False

    def test_breached_follows_last_row(self, two_year_result):
        assert not two_year_result.breached

        capped = build_schedule(make_inputs(sharing_percentage=100.0))
        assert capped.breached

    def test_repr(self, two_year_result):
        text = repr(two_year_result)
        assert "years=2" in text
        assert "final_year=2022" in text
        assert "breached=False" in text


class TestGetArray:
    def test_year_column_is_int(self, two_year_result):
        years = two_year_result.get_array("year")
        assert years.dtype == np.int64
        np.testing.assert_array_equal(years, [2021, 2022])

    def test_money_columns(self, two_year_result):
        np.testing.assert_allclose(
            two_year_result.get_array("salary"), [30_000.0, 30_600.0]
        )
        np.testing.assert_allclose(
            two_year_result.get_array("repayment"), [3_000.0, 3_060.0]
        )
        np.testing.assert_allclose(
            two_year_result.get_array("threshold"), [20_000.0, 20_400.0]
        )

    @pytest.mark.parametrize(
        "name", ["salary", "repayment", "threshold", "cumulative_repaid"]
    )
    def test_money_columns_are_float(self, two_year_result, name):
        assert two_year_result.get_array(name).dtype == np.float64

    def test_cumulative_repaid(self, two_year_result):
        np.testing.assert_allclose(
            two_year_result.get_array("cumulative_repaid"), [3_000.0, 6_060.0]
        )

    def test_unknown_column(self, two_year_result):
        with pytest.raises(KeyError, match="Unknown column 'interest'"):
            two_year_result.get_array("interest")

    def test_cumulative_ends_at_cap_after_breach(self):
        result = build_schedule(make_inputs(sharing_percentage=40.0))
        assert result.get_array("cumulative_repaid")[-1] == pytest.approx(
            result.final_threshold
        )


class TestSummary:
    def test_summary_values(self, two_year_result):
        summary = two_year_result.summary()

        assert isinstance(summary, ScheduleSummary)
        assert summary.total_repaid == 6_060.0
        assert summary.repaid_fraction == pytest.approx(0.606)
        assert 10_000.0 * (1 + summary.equivalent_rate) ** 2 == pytest.approx(
            20_400.0, rel=1e-5
        )

    def test_zero_rate_when_cap_not_above_principal(self):
        result = ScheduleResult(
            rows=(ScheduleRow(2021, 0.0, 0.0, 9_000.0),),
            total_repaid=0.0,
            final_year=2021,
            total_years_simulated=1,
            principal=10_000.0,
            final_threshold=9_000.0,
        )
        assert result.summary().equivalent_rate == 0.0


class TestToDataFrame:
    def test_columns_and_index(self, two_year_result):
        df = two_year_result.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert df.index.name == "year"
        assert list(df.index) == [2021, 2022]
        assert list(df.columns) == [
            "salary",
            "repayment",
            "threshold",
            "cumulative_repaid",
            "capped",
        ]
        assert df.loc[2022, "cumulative_repaid"] == pytest.approx(6_060.0)

    def test_import_pandas_error_message(self):
        with mock.patch.dict(sys.modules, {"pandas": None}):
            with pytest.raises(ImportError, match="pandas is required"):
                _import_pandas()
