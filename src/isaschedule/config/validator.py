"""Centralized input validation for isaschedule."""

from __future__ import annotations

import math
import warnings
from dataclasses import fields
from typing import Any

from isaschedule.config.schema import SimulationInputs
from isaschedule.cpi import EARLIEST_CPI_YEAR
from isaschedule.years import all_years, past_years


class InputValidator:
    """
    Centralized validation for projection inputs.

    The engine itself performs no validation; everything is checked once
    at Projection.init() to ensure:
    - All required parameters are present
    - Type correctness
    - Valid parameter ranges
    - Relationship constraints between parameters
    - Clear error messages with actionable feedback
    """

    # Parameters without a package default
    REQUIRED_PARAMS = (
        "borrowed_sum",
        "borrowed_year",
        "repayment_start_year",
        "sharing_percentage",
        "starting_salary",
        "repayment_years",
    )

    INT_PARAMS = (
        "borrowed_year",
        "repayment_start_year",
        "repayment_years",
    )

    FLOAT_PARAMS = (
        "borrowed_sum",
        "sharing_percentage",
        "starting_salary",
        "expected_salary_increase_percentage",
        "expected_cpi_increase_percentage",
    )

    # Valid log levels for logging configuration
    VALID_LOG_LEVELS = {"DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    @staticmethod
    def validate_inputs(cfg: dict[str, Any]) -> None:
        """
        Validate all input parameters.

        Parameters
        ----------
        cfg : dict
            Merged configuration dictionary to validate.

        Raises
        ------
        ValueError
            If any validation check fails.
        """
        InputValidator._validate_known(cfg)
        InputValidator._validate_required(cfg)
        InputValidator._validate_types(cfg)
        InputValidator._validate_ranges(cfg)
        InputValidator._validate_relationships(cfg)

        if "logging" in cfg:
            InputValidator._validate_logging(cfg["logging"])

    @staticmethod
    def _validate_known(cfg: dict[str, Any]) -> None:
        known = {f.name for f in fields(SimulationInputs)} | {"logging"}
        unknown = sorted(str(key) for key in cfg if key not in known)
        if unknown:
            warnings.warn(
                f"Ignoring unknown input parameter(s): {unknown}. "
                f"Known parameters: {sorted(known)}",
                UserWarning,
                stacklevel=3,
            )

    @staticmethod
    def _validate_required(cfg: dict[str, Any]) -> None:
        missing = [
            key
            for key in InputValidator.REQUIRED_PARAMS
            if key not in cfg or cfg[key] is None
        ]
        if missing:
            raise ValueError(f"Missing required input parameter(s): {missing}")

    @staticmethod
    def _validate_types(cfg: dict[str, Any]) -> None:
        """
        Ensure correct types for input parameters.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ValueError
            If any parameter has incorrect type.
        """
        # bool is an int subclass, but True is not a year
        for key in InputValidator.INT_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(
                    f"Input parameter '{key}' must be int, got {type(val).__name__}"
                )

        # Accept int or float
        for key in InputValidator.FLOAT_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Input parameter '{key}' must be float, got {type(val).__name__}"
                )
            # nan compares false against every bound checked below
            if not math.isfinite(val):
                raise ValueError(f"Input parameter '{key}' must be finite, got {val}")

    @staticmethod
    def _validate_ranges(cfg: dict[str, Any]) -> None:
        """
        Ensure parameters are in valid ranges.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ValueError
            If any parameter is out of valid range.
        """
        # The threshold and the repaid fraction both divide by it
        if "borrowed_sum" in cfg and cfg["borrowed_sum"] <= 0:
            raise ValueError(
                f"Input parameter 'borrowed_sum' must be > 0, got {cfg['borrowed_sum']}"
            )

        # (min_val, max_val) tuples, None means unbounded
        constraints = {
            "borrowed_year": (EARLIEST_CPI_YEAR, None),
            "repayment_start_year": (EARLIEST_CPI_YEAR, None),
            "starting_salary": (0.0, None),
            "repayment_years": (0, None),
        }

        for key, (min_val, max_val) in constraints.items():
            if key not in cfg:
                continue

            val = cfg[key]

            if min_val is not None and val < min_val:
                raise ValueError(
                    f"Input parameter '{key}' must be >= {min_val}, got {val}"
                )

            if max_val is not None and val > max_val:
                raise ValueError(
                    f"Input parameter '{key}' must be <= {max_val}, got {val}"
                )

    @staticmethod
    def _validate_relationships(cfg: dict[str, Any]) -> None:
        """
        Validate cross-parameter constraints.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ValueError
            If the repayment start year precedes the borrowed year.
        """
        borrowed_year = cfg.get("borrowed_year")
        start_year = cfg.get("repayment_start_year")

        if (
            borrowed_year is not None
            and start_year is not None
            and start_year < borrowed_year
        ):
            raise ValueError("repayment start year cannot be before the borrowed year")

        sharing = cfg.get("sharing_percentage")
        if sharing is not None and not 0.0 <= sharing <= 100.0:
            warnings.warn(
                f"sharing_percentage ({sharing}) is outside 0-100. "
                "Repayments will not be a share of the salary.",
                UserWarning,
                stacklevel=3,
            )

        if borrowed_year is not None and borrowed_year not in past_years():
            warnings.warn(
                f"borrowed_year ({borrowed_year}) is in the future. "
                "Its CPI rates are forecasts, not historical figures.",
                UserWarning,
                stacklevel=3,
            )

        if start_year is not None and start_year not in all_years():
            warnings.warn(
                f"repayment_start_year ({start_year}) is more than "
                f"{len(all_years()) - len(past_years())} years ahead.",
                UserWarning,
                stacklevel=3,
            )

    @staticmethod
    def _validate_logging(log_config: dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Parameters
        ----------
        log_config : dict
            Logging configuration dictionary with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - modules: dict[str, str] (per-module overrides)

        Raises
        ------
        ValueError
            If logging configuration is invalid.
        """
        if not isinstance(log_config, dict):
            raise ValueError(
                f"Logging config must be dict, got {type(log_config).__name__}"
            )

        if "default_level" in log_config:
            level = log_config["default_level"]
            if not isinstance(level, str):
                raise ValueError(
                    f"Logging default_level must be str, got {type(level).__name__}"
                )

            if level.upper() not in InputValidator.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}'. "
                    f"Must be one of {InputValidator.VALID_LOG_LEVELS}"
                )

        modules = log_config.get("modules")
        if modules is None:
            return

        if not isinstance(modules, dict):
            raise ValueError(
                f"Logging modules must be dict, got {type(modules).__name__}"
            )

        for module_name, level in modules.items():
            if not isinstance(module_name, str):
                raise ValueError(
                    f"Module name must be str, got {type(module_name).__name__}"
                )

            if not isinstance(level, str):
                raise ValueError(
                    f"Log level for module '{module_name}' must be str, "
                    f"got {type(level).__name__}"
                )

            if level.upper() not in InputValidator.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}' for module '{module_name}'. "
                    f"Must be one of {InputValidator.VALID_LOG_LEVELS}"
                )
