"""Format summaries, test verdicts and regression fits for output.

Text tables are tab-separated with a header line followed by a value line.
Summaries can also be collected into a pandas table for CSV export.
"""

from __future__ import annotations

import math
import os
from typing import Sequence

import pandas as pd

from .schema import REGRESSION_COLUMNS, SUMMARY_COLUMNS, TTEST_COLUMNS
from .stats.regression import LinearRegressionModel
from .stats.summary import Summary
from .stats.ttest import TTestResult


def _fmt(value: float, ndigits: int) -> str:
    """Fixed-point formatting that prints ``nan``/``inf`` plainly."""
    if not math.isfinite(value):
        return str(value)
    return f"{value:.{ndigits}f}"


def _table(header: Sequence[str], values: Sequence[str]) -> str:
    return "\t".join(header) + "\n" + "\t".join(values)


def format_summary(summary: Summary) -> str:
    """Two-line table of a summary; floats at two decimals."""
    return _table(
        SUMMARY_COLUMNS.labels(),
        [
            str(summary.size),
            _fmt(summary.min, 2),
            _fmt(summary.max, 2),
            _fmt(summary.median, 2),
            _fmt(summary.mean, 2),
            _fmt(summary.standard_deviation, 2),
            _fmt(summary.standard_error, 2),
        ],
    )


def format_t_test(result: TTestResult) -> str:
    """Two-line table of a test verdict; t, alpha and crit at three decimals."""
    return _table(
        TTEST_COLUMNS.labels(),
        [
            _fmt(result.t, 3),
            _fmt(result.df, 2),
            _fmt(result.alpha, 3),
            _fmt(result.crit, 3),
            str(result.reject).lower(),
            f"{result.p_value:.4g}",
        ],
    )


def format_regression(model: LinearRegressionModel) -> str:
    """Two-line table of a fitted line."""
    return _table(
        REGRESSION_COLUMNS.labels(),
        [
            str(model.size),
            _fmt(model.intercept, 4),
            _fmt(model.slope, 4),
            _fmt(model.r, 4),
            _fmt(model.standard_error, 4),
        ],
    )


def summaries_to_frame(
    summaries: Sequence[Summary], labels: Sequence[str] | None = None
) -> pd.DataFrame:
    """Collect summaries into one table, one row per sample.

    Args:
        summaries: Summaries in display order.
        labels: Sample names for the ``Sample`` column. Defaults to
            ``"1"``, ``"2"``, ...

    Raises:
        ValueError: If ``labels`` does not match ``summaries`` in length.
    """
    if labels is None:
        labels = [str(i) for i in range(1, len(summaries) + 1)]
    if len(labels) != len(summaries):
        raise ValueError(f"Got {len(labels)} labels for {len(summaries)} summaries.")

    cols = SUMMARY_COLUMNS
    rows = [
        {
            cols.sample: label,
            cols.size: s.size,
            cols.min: s.min,
            cols.max: s.max,
            cols.median: s.median,
            cols.mean: s.mean,
            cols.standard_deviation: s.standard_deviation,
            cols.standard_error: s.standard_error,
        }
        for label, s in zip(labels, summaries)
    ]
    return pd.DataFrame(rows, columns=[cols.sample, *cols.labels()])


def save_summaries_csv(
    summaries: Sequence[Summary],
    output_path: str,
    labels: Sequence[str] | None = None,
) -> str:
    """Write :func:`summaries_to_frame` to ``output_path`` and return the path."""
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    summaries_to_frame(summaries, labels).to_csv(output_path, index=False)
    return output_path
