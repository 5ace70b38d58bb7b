"""
Two-tailed critical values of Student's t distribution.

Rows are tabulated degrees of freedom (1-30, then 40, 60, 120 and infinity);
columns are the accepted significance levels. A real-valued df is floored to
the largest tabulated row that does not exceed it, which never understates
the critical value.
"""

from __future__ import annotations

import bisect
import math
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..errors import InvalidSignificanceLevelError


class SigLevel(Enum):
    """Accepted two-tailed significance levels."""

    ALPHA_001 = 0.001
    ALPHA_005 = 0.005
    ALPHA_010 = 0.01
    ALPHA_025 = 0.025
    ALPHA_050 = 0.05
    ALPHA_100 = 0.1

    @property
    def alpha(self) -> float:
        return float(self.value)

    @classmethod
    def parse(cls, value) -> "SigLevel":
        """Resolve ``value`` (``".05"``, ``"0.05"``, ``0.05`` or a member).

        Raises:
            InvalidSignificanceLevelError: If ``value`` is not one of the
                tabulated levels.
        """
        if isinstance(value, cls):
            return value
        try:
            alpha = float(str(value).strip())
        except ValueError:
            alpha = math.nan
        for level in cls:
            if math.isclose(alpha, level.value, rel_tol=0.0, abs_tol=1e-12):
                return level
        accepted = ", ".join(f"{level.value:g}" for level in cls)
        raise InvalidSignificanceLevelError(
            f"Unsupported significance level {value!r}; expected one of {accepted}."
        )


_COLUMNS: Tuple[SigLevel, ...] = (
    SigLevel.ALPHA_001,
    SigLevel.ALPHA_005,
    SigLevel.ALPHA_010,
    SigLevel.ALPHA_025,
    SigLevel.ALPHA_050,
    SigLevel.ALPHA_100,
)

# df -> critical values in _COLUMNS order.
_ROWS: Dict[float, Tuple[float, ...]] = {
    1: (636.619, 127.321, 63.657, 25.452, 12.706, 6.314),
    2: (31.599, 14.089, 9.925, 6.205, 4.303, 2.920),
    3: (12.924, 7.453, 5.841, 4.177, 3.182, 2.353),
    4: (8.610, 5.598, 4.604, 3.495, 2.776, 2.132),
    5: (6.869, 4.773, 4.032, 3.163, 2.571, 2.015),
    6: (5.959, 4.317, 3.707, 2.969, 2.447, 1.943),
    7: (5.408, 4.029, 3.499, 2.841, 2.365, 1.895),
    8: (5.041, 3.833, 3.355, 2.752, 2.306, 1.860),
    9: (4.781, 3.690, 3.250, 2.685, 2.262, 1.833),
    10: (4.587, 3.581, 3.169, 2.634, 2.228, 1.812),
    11: (4.437, 3.497, 3.106, 2.593, 2.201, 1.796),
    12: (4.318, 3.428, 3.055, 2.560, 2.179, 1.782),
    13: (4.221, 3.372, 3.012, 2.533, 2.160, 1.771),
    14: (4.140, 3.326, 2.977, 2.510, 2.145, 1.761),
    15: (4.073, 3.286, 2.947, 2.490, 2.131, 1.753),
    16: (4.015, 3.252, 2.921, 2.473, 2.120, 1.746),
    17: (3.965, 3.222, 2.898, 2.458, 2.110, 1.740),
    18: (3.922, 3.197, 2.878, 2.445, 2.101, 1.734),
    19: (3.883, 3.174, 2.861, 2.433, 2.093, 1.729),
    20: (3.850, 3.153, 2.845, 2.423, 2.086, 1.725),
    21: (3.819, 3.135, 2.831, 2.414, 2.080, 1.721),
    22: (3.792, 3.119, 2.819, 2.405, 2.074, 1.717),
    23: (3.768, 3.104, 2.807, 2.398, 2.069, 1.714),
    24: (3.745, 3.091, 2.797, 2.391, 2.064, 1.711),
    25: (3.725, 3.078, 2.787, 2.385, 2.060, 1.708),
    26: (3.707, 3.067, 2.779, 2.379, 2.056, 1.706),
    27: (3.690, 3.057, 2.771, 2.373, 2.052, 1.703),
    28: (3.674, 3.047, 2.763, 2.368, 2.048, 1.701),
    29: (3.659, 3.038, 2.756, 2.364, 2.045, 1.699),
    30: (3.646, 3.030, 2.750, 2.360, 2.042, 1.697),
    40: (3.551, 2.971, 2.704, 2.329, 2.021, 1.684),
    60: (3.460, 2.915, 2.660, 2.299, 2.000, 1.671),
    120: (3.373, 2.860, 2.617, 2.270, 1.980, 1.658),
    math.inf: (3.291, 2.807, 2.576, 2.241, 1.960, 1.645),
}

SIGNIFICANCE_TABLE: Mapping[Tuple[float, SigLevel], float] = MappingProxyType(
    {
        (df, level): crit
        for df, row in _ROWS.items()
        for level, crit in zip(_COLUMNS, row)
    }
)

TABULATED_DF: Tuple[float, ...] = tuple(sorted(_ROWS))


def table_row(df: float) -> float:
    """Return the tabulated df row used for a computed ``df``.

    Floors to the largest row <= ``df``; anything below 1 uses row 1 and only
    an infinite ``df`` reaches the infinity row.

    Raises:
        ValueError: If ``df`` is NaN.
    """
    df = float(df)
    if math.isnan(df):
        raise ValueError("Degrees of freedom must be a number, got NaN.")
    idx = bisect.bisect_right(TABULATED_DF, df) - 1
    return TABULATED_DF[max(idx, 0)]


def critical_value(df: float, alpha) -> float:
    """Look up the two-tailed critical t value for ``df`` and ``alpha``."""
    level = SigLevel.parse(alpha)
    return SIGNIFICANCE_TABLE[(table_row(df), level)]
