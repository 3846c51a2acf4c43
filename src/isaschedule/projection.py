# src/isaschedule/projection.py
from __future__ import annotations

from dataclasses import dataclass, fields
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, TextIO

# noinspection PyPackageRequirements
import yaml

from isaschedule import logging as isa_logging
from isaschedule.config import InputValidator, SimulationInputs
from isaschedule.logging import getLogger
from isaschedule.report import write_report
from isaschedule.results import ScheduleResult, ScheduleSummary
from isaschedule.scheduler import build_schedule

__all__ = ["Projection"]

log = getLogger(__name__)

_INPUT_FIELDS = tuple(f.name for f in fields(SimulationInputs))


# helpers
# ---------------------------------------------------------------------------
def _read_yaml(obj: str | Path | Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return a plain dict – {} if *obj* is None."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    p = Path(obj)
    with p.open("rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"config root must be mapping, got {type(data)!r}")
    return dict(data)


def _package_defaults() -> Dict[str, Any]:
    """Load isaschedule/defaults.yml"""
    txt = resources.files("isaschedule").joinpath("defaults.yml").read_text()
    return yaml.safe_load(txt) or {}


def _merge_logging(base: Dict[str, Any], override: Mapping[str, Any]) -> None:
    """Merge a logging section key by key so partial overrides keep defaults."""
    if "logging" in override and isinstance(override["logging"], Mapping):
        merged = dict(base.get("logging") or {})
        merged.update(override["logging"])
        base.update(override)
        base["logging"] = merged
    else:
        base.update(override)


# Projection
# ---------------------------------------------------------------------
@dataclass(slots=True)
class Projection:
    """
    Facade that runs the repayment engine once for one set of inputs.

    Examples
    --------
    >>> import sys
    >>> from isaschedule import Projection
    >>> proj = Projection.init(
    ...     borrowed_sum=10_000.0,
    ...     borrowed_year=2020,
    ...     repayment_start_year=2021,
    ...     sharing_percentage=10.0,
    ...     starting_salary=30_000.0,
    ...     repayment_years=10,
    ... )
    >>> proj.run().final_year  # cap reached before 2031
    2029
    >>> proj.write_report(sys.stdout)
    """

    inputs: SimulationInputs
    _result: ScheduleResult | None = None

    # Constructor
    # ---------------------------------------------------------------------
    @classmethod
    def init(
        cls,
        config: str | Path | Mapping[str, Any] | None = None,
        **overrides: Any,  # anything here wins last
    ) -> "Projection":
        """
        Build a Projection.

        Order of precedence (later overrides earlier):

            1. package defaults  (isaschedule/defaults.yml)
            2. *config*  (Path / str / Mapping / None)
            3. explicit keyword arguments (**overrides)

        Raises
        ------
        ValueError
            If an input is missing, mistyped or out of range.
        TypeError
            If the config file root is not a mapping.
        """
        # 1 + 2 + 3 → one merged dict
        cfg_dict: Dict[str, Any] = _package_defaults()
        _merge_logging(cfg_dict, _read_yaml(config))
        _merge_logging(cfg_dict, overrides)

        InputValidator.validate_inputs(cfg_dict)

        if "logging" in cfg_dict:
            isa_logging.configure(cfg_dict["logging"])

        params = {name: cfg_dict[name] for name in _INPUT_FIELDS}
        for name in InputValidator.FLOAT_PARAMS:
            params[name] = float(params[name])
        inputs = SimulationInputs(**params)
        log.debug(f"Projection inputs: {inputs}")
        return cls(inputs=inputs)

    # public API
    # ---------------------------------------------------------------------
    def run(self) -> ScheduleResult:
        """Build the schedule (once) and return it."""
        if self._result is None:
            self._result = build_schedule(self.inputs)
        return self._result

    def summary(self) -> ScheduleSummary:
        """Total repaid, multiple of the borrowed sum and equivalent rate."""
        return self.run().summary()

    def write_report(self, sink: TextIO) -> None:
        """Write the schedule report to *sink*."""
        write_report(self.run(), sink)
