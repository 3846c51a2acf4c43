"""Tests for the salary projector."""

import pytest

from isaschedule.salary import project_salary
from tests.helpers.factories import make_inputs


def test_start_year_returns_starting_salary_exactly():
    inputs = make_inputs(starting_salary=31_234.56)
    assert project_salary(inputs, inputs.repayment_start_year) == 31_234.56


def test_compounds_once_per_year():
    inputs = make_inputs(starting_salary=30_000.0)

    assert project_salary(inputs, 2022) == pytest.approx(30_600.0)
    assert project_salary(inputs, 2023) == pytest.approx(31_212.0)


def test_iterative_compounding_matches_repeated_multiplication():
    inputs = make_inputs(
        starting_salary=45_000.0, expected_salary_increase_percentage=3.3
    )
    expected = 45_000.0
    for _ in range(15):
        expected *= 1 + 3.3 / 100

    assert project_salary(inputs, inputs.repayment_start_year + 15) == expected


def test_negative_growth_shrinks_salary():
    inputs = make_inputs(expected_salary_increase_percentage=-5.0)
    assert project_salary(inputs, 2022) == pytest.approx(28_500.0)
    assert project_salary(inputs, 2023) < project_salary(inputs, 2022)


def test_zero_salary_stays_zero():
    inputs = make_inputs(starting_salary=0.0)
    assert project_salary(inputs, 2030) == 0.0
