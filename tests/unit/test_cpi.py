"""Tests for the CPI rate table."""

import pytest

from isaschedule.cpi import (
    EARLIEST_CPI_YEAR,
    HISTORICAL_CPI_RATES,
    LAST_HISTORICAL_YEAR,
    cpi_rates,
)
from tests.helpers.factories import make_inputs


def test_historical_rates_are_reproduced():
    assert HISTORICAL_CPI_RATES == {
        2019: 1.4,
        2020: 0.5,
        2021: 3.1,
        2022: 6.9,
        2023: 6.0,
        2024: 2.8,
        2025: 2.7,
        2026: 2.2,
    }
    assert EARLIEST_CPI_YEAR == 2019
    assert LAST_HISTORICAL_YEAR == 2026


def test_future_years_use_expected_cpi():
    rates = cpi_rates(make_inputs(expected_cpi_increase_percentage=3.5), 2030)

    for year in range(2027, 2031):
        assert rates[year] == 3.5
    assert rates[2026] == 2.2


def test_domain_is_contiguous_through_requested_year():
    rates = cpi_rates(make_inputs(), 2040)
    assert sorted(rates) == list(range(2019, 2041))


@pytest.mark.parametrize("through_year", [2000, 2019, 2022, 2026])
def test_early_through_year_keeps_historical_entries(through_year):
    rates = cpi_rates(make_inputs(), through_year)
    assert rates == HISTORICAL_CPI_RATES


def test_negative_expected_cpi_allowed():
    rates = cpi_rates(make_inputs(expected_cpi_increase_percentage=-1.0), 2028)
    assert rates[2027] == rates[2028] == -1.0


def test_returns_fresh_mapping():
    inputs = make_inputs()
    rates = cpi_rates(inputs, 2030)
    rates[2019] = 99.0
    rates[2031] = 99.0

    assert HISTORICAL_CPI_RATES[2019] == 1.4
    assert cpi_rates(inputs, 2030)[2019] == 1.4
    assert 2031 not in cpi_rates(inputs, 2030)
