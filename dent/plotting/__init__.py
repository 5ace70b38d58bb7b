"""
Plotting utilities for sample summaries.

Modules:
    boxplot:
        Fixed-width text boxplots (min/max whiskers, median and mean
        markers) drawn on a shared column scale.

    figures:
        The same range plot rendered to an image file with matplotlib.

    style:
        Glyph sets for text rendering and the black-and-white serif figure
        style.

Design Principles:
    No statistics are computed here. Functions receive precomputed
    :class:`~dent.stats.summary.Summary` values and simply render them.
"""

from .boxplot import (
    Scale,
    axis_rows,
    comparison_plot,
    compute_scale,
    render,
    render_row,
    summary_plot,
)
from .figures import plot_summaries
from .style import ASCII_GLYPHS, UNICODE_GLYPHS, GlyphSet, setup_plot_style

__all__ = [
    "Scale",
    "axis_rows",
    "comparison_plot",
    "compute_scale",
    "render",
    "render_row",
    "summary_plot",
    "plot_summaries",
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "GlyphSet",
    "setup_plot_style",
]
