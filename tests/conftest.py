"""Pytest configuration and fixtures for isaschedule tests."""

import os

import pytest

from isaschedule import logging
from isaschedule.config import SimulationInputs
from tests.helpers.factories import scenario_a_inputs, scenario_b_inputs


@pytest.fixture
def scenario_a() -> SimulationInputs:
    """10 000 borrowed in 2020, 10 % of 30 000 from 2021 for ten more years."""
    return scenario_a_inputs()


@pytest.fixture
def scenario_b() -> SimulationInputs:
    """The first repayment alone breaks through the cap."""
    return scenario_b_inputs()


@pytest.fixture
def contract_yaml(tmp_path):
    """A complete contract written to a YAML file."""
    path = tmp_path / "contract.yml"
    path.write_text(
        "borrowed_sum: 10000\n"
        "borrowed_year: 2020\n"
        "repayment_start_year: 2021\n"
        "sharing_percentage: 10\n"
        "starting_salary: 30000\n"
        "repayment_years: 10\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def mute_isaschedule_logs(caplog):
    # CI coverage run executes every log statement; everything else stays quiet
    if os.environ.get("COVERAGE_RUN") == "true":
        level = logging.DEBUG
    else:
        level = logging.ERROR

    caplog.set_level(level, logger="isaschedule")
    logging.getLogger("isaschedule").setLevel(level)
