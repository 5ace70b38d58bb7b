"""Fixed-width text boxplots of one or more summaries.

Rendering happens in two phases: :func:`compute_scale` maps the combined range
of every summary onto ``width`` character columns, then :func:`render_row`
draws each summary against that shared scale. Rows rendered together are
therefore directly comparable column by column.

Summaries carry no quartiles, so a row shows the whisker from min to max with
caps at both ends, a median marker and a mean marker. When median and mean
fall on the same column a single combined marker is drawn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..errors import EmptySampleError, InvalidWidthError
from ..stats.summary import Summary
from .style import GlyphSet, glyphs_for


@dataclass(frozen=True)
class Scale:
    """Linear map from data values onto ``width`` character columns."""

    low: float
    high: float
    width: int

    def column(self, value: float) -> int:
        last = self.width - 1
        # Halved so the span of a range like [-1e308, 1e308] stays finite.
        span = self.high / 2.0 - self.low / 2.0
        if span <= 0:
            return last // 2
        pos = (float(value) / 2.0 - self.low / 2.0) / span * last
        col = int(math.floor(pos + 0.5))
        return min(max(col, 0), last)


def _check_width(width: int) -> int:
    if width < 1:
        raise InvalidWidthError(f"Plot width must be at least 1, got {width}.")
    return int(width)


def compute_scale(summaries: Sequence[Summary], width: int) -> Scale:
    """Build the shared scale spanning every summary's min and max."""
    width = _check_width(width)
    if not summaries:
        raise EmptySampleError("No summaries to plot.")
    return Scale(
        low=min(s.min for s in summaries),
        high=max(s.max for s in summaries),
        width=width,
    )


def render_row(summary: Summary, scale: Scale, glyphs: GlyphSet) -> str:
    """Draw one summary as a row of exactly ``scale.width`` characters."""
    cells = [glyphs.blank] * scale.width

    lo = scale.column(summary.min)
    hi = scale.column(summary.max)
    for col in range(lo, hi + 1):
        cells[col] = glyphs.line
    if lo == hi:
        cells[lo] = glyphs.single_cap
    else:
        cells[lo] = glyphs.left_cap
        cells[hi] = glyphs.right_cap

    med = scale.column(summary.median)
    avg = scale.column(summary.mean)
    if med == avg:
        cells[med] = glyphs.median_mean
    else:
        cells[med] = glyphs.median
        cells[avg] = glyphs.mean

    return "".join(cells)


def axis_rows(scale: Scale, glyphs: GlyphSet, precision: int = 2) -> List[str]:
    """Return an axis line and a label line for ``scale``.

    The label line carries the scale bounds flush left and right; it is left
    blank when both labels do not fit in the width.
    """
    width = scale.width
    axis = [glyphs.axis] * width
    axis[0] = glyphs.tick
    axis[-1] = glyphs.tick

    left = f"{scale.low:.{precision}f}"
    right = f"{scale.high:.{precision}f}"
    if width == 1:
        labels = " "
    elif len(left) + len(right) + 1 <= width:
        labels = left + right.rjust(width - len(left))
    else:
        labels = " " * width
    return ["".join(axis), labels]


def render(summaries: Sequence[Summary], width: int, ascii: bool = False) -> List[str]:
    """Render one row per summary on a shared scale.

    Raises:
        InvalidWidthError: If ``width < 1``.
        EmptySampleError: If ``summaries`` is empty.
    """
    scale = compute_scale(summaries, width)
    glyphs = glyphs_for(ascii)
    return [render_row(s, scale, glyphs) for s in summaries]


def summary_plot(summary: Summary, width: int, ascii: bool = False) -> str:
    """Compact plot of a single summary, scaled to its own range."""
    scale = compute_scale([summary], width)
    glyphs = glyphs_for(ascii)
    return "\n".join([render_row(summary, scale, glyphs)] + axis_rows(scale, glyphs))


def comparison_plot(
    summaries: Sequence[Summary],
    width: int,
    ascii: bool = False,
    axis: bool = True,
) -> str:
    """Stack several summaries on one shared scale, optionally with an axis."""
    scale = compute_scale(summaries, width)
    glyphs = glyphs_for(ascii)
    rows = [render_row(s, scale, glyphs) for s in summaries]
    if axis:
        rows.extend(axis_rows(scale, glyphs))
    return "\n".join(rows)
