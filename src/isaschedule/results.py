"""
Schedule results container for isaschedule.

This module provides the ScheduleRow, ScheduleResult and ScheduleSummary
records produced by the scheduler, with convenience methods for NumPy
array access and export to pandas DataFrames.

Note: pandas is an optional dependency. It is only required when using
:meth:`ScheduleResult.to_dataframe`.
Install with: pip install isaschedule[pandas] or pip install pandas
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from isaschedule.solver import equivalent_rate_for

if TYPE_CHECKING:  # pragma: no cover
    from pandas import DataFrame

    from isaschedule.typing import Float1D, Int1D


def _import_pandas() -> Any:
    """
    Lazily import pandas with helpful error message if not installed.

    Returns
    -------
    module
        The pandas module.

    Raises
    ------
    ImportError
        If pandas is not installed.
    """
    try:
        import pandas as pd

        return pd
    except ImportError:  # pragma: no cover
        raise ImportError(
            "pandas is required for DataFrame export. "
            "Install it with: pip install pandas"
        ) from None


@dataclass(slots=True, frozen=True)
class ScheduleRow:
    """
    One simulated repayment year.

    Attributes
    ----------
    year : int
        Calendar year.
    salary : float
        Projected gross salary.
    repayment : float
        Amount repaid that year; reduced on the year the cap is reached.
    threshold : float
        Repayment cap for the year.
    capped : bool
        True on the year the cumulative repayment hit the cap.
    """

    year: int
    salary: float
    repayment: float
    threshold: float
    capped: bool = False


@dataclass(slots=True, frozen=True)
class ScheduleSummary:
    """Headline figures of a schedule."""

    total_repaid: float
    repaid_fraction: float
    equivalent_rate: float


@dataclass(slots=True, frozen=True)
class ScheduleResult:
    """
    Outcome of one schedule run.

    Attributes
    ----------
    rows : tuple[ScheduleRow, ...]
        One row per simulated year, ascending.
    total_repaid : float
        Cumulative repayment, never above ``final_threshold``.
    final_year : int
        Year the cap was reached, or the last scheduled year.
    total_years_simulated : int
        Number of rows, including the year the cap was reached.
    principal : float
        Borrowed sum.
    final_threshold : float
        Threshold of ``final_year``.

    Examples
    --------
    >>> from isaschedule import Projection
    >>> result = Projection.init("contract.yml").run()
    >>> result.get_array("salary")
    >>> result.summary().equivalent_rate
    """

    # column name -> ScheduleRow attribute
    COLUMNS = ("year", "salary", "repayment", "threshold")

    rows: tuple[ScheduleRow, ...]
    total_repaid: float
    final_year: int
    total_years_simulated: int
    principal: float
    final_threshold: float

    @property
    def breached(self) -> bool:
        """Whether the schedule stopped early because the cap was reached."""
        return bool(self.rows) and self.rows[-1].capped

    def get_array(self, name: str) -> Float1D | Int1D:
        """
        Return one schedule column as a NumPy array.

        Parameters
        ----------
        name : str
            One of ``"year"``, ``"salary"``, ``"repayment"``,
            ``"threshold"`` or ``"cumulative_repaid"``.

        Returns
        -------
        NDArray
            Integer array for ``"year"``, float array otherwise.

        Raises
        ------
        KeyError
            If *name* is not a schedule column.
        """
        if name == "cumulative_repaid":
            return np.cumsum(self.get_array("repayment"))

        if name not in self.COLUMNS:
            available = [*self.COLUMNS, "cumulative_repaid"]
            raise KeyError(f"Unknown column '{name}'. Available columns: {available}")

        dtype = np.int64 if name == "year" else np.float64
        return np.fromiter(
            (getattr(row, name) for row in self.rows), dtype=dtype, count=len(self.rows)
        )

    def summary(self) -> ScheduleSummary:
        """Total repaid, multiple of the principal and equivalent rate."""
        return ScheduleSummary(
            total_repaid=self.total_repaid,
            repaid_fraction=self.total_repaid / self.principal,
            equivalent_rate=equivalent_rate_for(self),
        )

    def to_dataframe(self) -> DataFrame:
        """
        Export the schedule to a pandas DataFrame indexed by year.

        Returns
        -------
        pandas.DataFrame
            Columns ``salary``, ``repayment``, ``threshold``,
            ``cumulative_repaid`` and ``capped``.

        Raises
        ------
        ImportError
            If pandas is not installed.
        """
        pd = _import_pandas()

        df = pd.DataFrame(
            {
                "salary": self.get_array("salary"),
                "repayment": self.get_array("repayment"),
                "threshold": self.get_array("threshold"),
                "cumulative_repaid": self.get_array("cumulative_repaid"),
                "capped": [row.capped for row in self.rows],
            },
            index=pd.Index(self.get_array("year"), name="year"),
        )
        return df

    def __repr__(self) -> str:
        return (
            f"ScheduleResult(years={self.total_years_simulated}, "
            f"final_year={self.final_year}, total_repaid={self.total_repaid:,.2f}, "
            f"breached={self.breached})"
        )
