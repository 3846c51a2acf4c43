"""Configuration module for isaschedule."""

from isaschedule.config.schema import SimulationInputs
from isaschedule.config.validator import InputValidator

__all__ = ["SimulationInputs", "InputValidator"]
