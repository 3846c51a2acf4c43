# tests/helpers/__init__.py

from tests.helpers.factories import (
    input_dict,
    make_inputs,
    scenario_a_inputs,
    scenario_b_inputs,
)

__all__ = ["input_dict", "make_inputs", "scenario_a_inputs", "scenario_b_inputs"]
