"""Image rendering of summaries for reports.

The figure mirrors the text boxplot: a horizontal whisker from min to max, a
vertical median tick and a mean marker, one row per summary on a shared axis.
"""

from __future__ import annotations

import os
from typing import Sequence

import matplotlib.pyplot as plt

from ..errors import EmptySampleError
from ..stats.summary import Summary
from .style import STYLE, setup_plot_style


def plot_summaries(
    summaries: Sequence[Summary],
    output_path: str,
    labels: Sequence[str] | None = None,
    xlabel: str = "Value",
) -> str:
    """Save a range plot of ``summaries`` to ``output_path``.

    Args:
        summaries (Sequence[Summary]): Samples to draw, top to bottom.
        output_path (str): Destination file; the format follows the
            extension (``.png``, ``.pdf``, ``.svg``).
        labels (Sequence[str], optional): Row labels. Defaults to
            ``"Sample 1"``, ``"Sample 2"``, ...
        xlabel (str, optional): Label for the value axis.

    Returns:
        str: ``output_path``.

    Raises:
        EmptySampleError: If ``summaries`` is empty.
        ValueError: If ``labels`` does not match ``summaries`` in length.
    """
    if not summaries:
        raise EmptySampleError("No summaries to plot.")
    if labels is None:
        labels = [f"Sample {i}" for i in range(1, len(summaries) + 1)]
    if len(labels) != len(summaries):
        raise ValueError(
            f"Got {len(labels)} labels for {len(summaries)} summaries."
        )

    setup_plot_style()
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    height = max(STYLE.MIN_FIG_HEIGHT_IN, STYLE.ROW_HEIGHT_IN * (len(summaries) + 1))
    fig, ax = plt.subplots(figsize=(STYLE.FIG_WIDTH_IN, height))

    # Top-to-bottom in the same order as the text rows.
    positions = list(range(len(summaries), 0, -1))
    for y, s in zip(positions, summaries):
        ax.hlines(y, s.min, s.max, colors="black", linewidth=STYLE.LINEWIDTH)
        ax.vlines(
            [s.min, s.max],
            y - STYLE.CAP_HEIGHT,
            y + STYLE.CAP_HEIGHT,
            colors="black",
            linewidth=STYLE.LINEWIDTH,
        )
        ax.vlines(
            s.median,
            y - STYLE.MEDIAN_HEIGHT,
            y + STYLE.MEDIAN_HEIGHT,
            colors="black",
            linewidth=STYLE.LINEWIDTH * 1.5,
            label="Median" if y == positions[0] else None,
        )
        ax.plot(
            s.mean,
            y,
            marker="D",
            markersize=STYLE.MARKERSIZE,
            markerfacecolor="white",
            markeredgecolor="black",
            linestyle="none",
            label="Mean" if y == positions[0] else None,
        )

    ax.set_yticks(positions)
    ax.set_yticklabels(list(labels))
    ax.set_ylim(0.4, len(summaries) + 0.6)
    ax.set_xlabel(xlabel)
    ax.grid(axis="x", alpha=0.2)
    ax.legend(loc="upper right", frameon=False)

    fig.savefig(output_path)
    plt.close(fig)
    return output_path
