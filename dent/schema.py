"""Define standardized column labels for output tables."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class _Columns:
    def labels(self) -> Tuple[str, ...]:
        """Column labels in display order."""
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class SummaryColumns(_Columns):
    """Labels for descriptive-statistics tables.

    ``sample`` is only used in exported tables and is not part of
    :meth:`labels`.
    """

    size: str = "N"
    min: str = "Min"
    max: str = "Max"
    median: str = "Median"
    mean: str = "Mean"
    standard_deviation: str = "StdDev"
    standard_error: str = "StdErr"

    @property
    def sample(self) -> str:
        return "Sample"


@dataclass(frozen=True)
class TTestColumns(_Columns):
    t: str = "T"
    df: str = "DF"
    alpha: str = "Alpha"
    crit: str = "Crit"
    reject: str = "RejectNull"
    p_value: str = "P"


@dataclass(frozen=True)
class RegressionColumns(_Columns):
    size: str = "N"
    intercept: str = "Intercept"
    slope: str = "Slope"
    r: str = "R"
    standard_error: str = "StdErr"


SUMMARY_COLUMNS = SummaryColumns()
TTEST_COLUMNS = TTestColumns()
REGRESSION_COLUMNS = RegressionColumns()
