"""Centralized glyph sets and figure style for summary plots."""

from __future__ import annotations

from dataclasses import dataclass

import matplotlib.pyplot as plt

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class GlyphSet:
    """Characters used to draw one text boxplot row."""

    blank: str
    line: str
    left_cap: str
    right_cap: str
    single_cap: str
    median: str
    mean: str
    median_mean: str
    axis: str
    tick: str


ASCII_GLYPHS = GlyphSet(
    blank=" ",
    line="-",
    left_cap="|",
    right_cap="|",
    single_cap="|",
    median="#",
    mean="*",
    median_mean="@",
    axis="-",
    tick="+",
)

UNICODE_GLYPHS = GlyphSet(
    blank=" ",
    line="─",
    left_cap="├",
    right_cap="┤",
    single_cap="│",
    median="┃",
    mean="◆",
    median_mean="◈",
    axis="─",
    tick="┴",
)


def glyphs_for(ascii: bool) -> GlyphSet:
    return ASCII_GLYPHS if ascii else UNICODE_GLYPHS


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 11.0
    LABEL_FONTSIZE: float = 11.0
    TICK_FONTSIZE: float = 10.0
    LEGEND_FONTSIZE: float = 9.0
    LINEWIDTH: float = 1.6
    CAP_HEIGHT: float = 0.18
    MEDIAN_HEIGHT: float = 0.32
    MARKERSIZE: float = 6.5
    ROW_HEIGHT_IN: float = 0.55
    MIN_FIG_HEIGHT_IN: float = 2.2
    FIG_WIDTH_IN: float = 7.0


STYLE = StyleConfig()


def setup_plot_style() -> None:
    """Apply the black-and-white serif style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "Times", "DejaVu Serif"],
            "font.size": STYLE.BASE_FONTSIZE,
            "axes.labelsize": STYLE.LABEL_FONTSIZE,
            "xtick.labelsize": STYLE.TICK_FONTSIZE,
            "ytick.labelsize": STYLE.TICK_FONTSIZE,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
        }
    )
    _STYLE_STATE["initialized"] = True
