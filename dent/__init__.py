"""
A small package for comparing numeric samples from the command line.

Computes descriptive statistics, Welch's two-sample t-test and least-squares
line fits, and draws fixed-width text boxplots.

Modules:
    - stats: Summary, significance table, t-test and regression.
    - plotting: Text boxplots and range-plot figures.
    - data_processing: Reads samples and paired samples from files or stdin.
    - reporting: Formats results as tables and exports CSV.
    - cli: The ``dent`` command line.
"""

__version__ = "1.0.0"

from .data_processing import parse_pairs, parse_values, read_pairs, read_sample
from .errors import (
    DegenerateSampleError,
    EmptySampleError,
    InsufficientDataError,
    InvalidSignificanceLevelError,
    InvalidWidthError,
)
from .plotting import comparison_plot, plot_summaries, render, summary_plot
from .reporting import (
    format_regression,
    format_summary,
    format_t_test,
    save_summaries_csv,
    summaries_to_frame,
)
from .stats import (
    LinearRegression,
    LinearRegressionModel,
    SigLevel,
    Summary,
    TTestResult,
    critical_value,
    welch_t_test,
)

__all__ = [
    # Statistics
    "Summary",
    "SigLevel",
    "critical_value",
    "TTestResult",
    "welch_t_test",
    "LinearRegression",
    "LinearRegressionModel",
    # Plotting
    "render",
    "summary_plot",
    "comparison_plot",
    "plot_summaries",
    # Input and output
    "parse_values",
    "parse_pairs",
    "read_sample",
    "read_pairs",
    "format_summary",
    "format_t_test",
    "format_regression",
    "summaries_to_frame",
    "save_summaries_csv",
    # Errors
    "EmptySampleError",
    "InsufficientDataError",
    "DegenerateSampleError",
    "InvalidSignificanceLevelError",
    "InvalidWidthError",
]
