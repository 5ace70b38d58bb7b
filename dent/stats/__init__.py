"""
Statistical core for sample comparison.

This subpackage provides the numerical routines behind the command line:
descriptive summaries, Welch's two-sample t-test and least-squares regression.
All functions operate on in-memory sequences; no I/O is performed here.

Modules:
    summary:
        Immutable descriptive statistics (size, min, max, median, mean,
        standard deviation, standard error) of one sample.

    significance:
        Accepted significance levels and the fixed table of two-tailed
        critical t values.

    ttest:
        Welch's unequal-variances t-test over two summaries.

    regression:
        Ordinary least-squares line fit for paired samples.

Design Principle:
    This subpackage has no dependencies on plotting/ or the CLI. It provides
    pure numerical utilities that can be independently tested.
"""

from .regression import LinearRegression, LinearRegressionModel, linear_regression
from .significance import SIGNIFICANCE_TABLE, SigLevel, critical_value, table_row
from .summary import Summary, summarize
from .ttest import DEFAULT_ALPHA, TTestResult, welch_t_test

__all__ = [
    "Summary",
    "summarize",
    "SigLevel",
    "SIGNIFICANCE_TABLE",
    "critical_value",
    "table_row",
    "DEFAULT_ALPHA",
    "TTestResult",
    "welch_t_test",
    "LinearRegression",
    "LinearRegressionModel",
    "linear_regression",
]
