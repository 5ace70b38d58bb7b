"""Welch's unequal-variances two-sample t-test."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy.stats import t as student_t

from ..errors import DegenerateSampleError, InsufficientDataError
from .significance import SigLevel, critical_value
from .summary import Summary

DEFAULT_ALPHA = SigLevel.ALPHA_050


@dataclass(frozen=True)
class TTestResult:
    """Verdict of a two-tailed Welch t-test.

    ``reject`` is decided from the tabulated critical value ``crit``;
    ``p_value`` is the exact two-tailed probability at the real-valued ``df``
    and is reported for information only.
    """

    t: float
    df: float
    alpha: float
    crit: float
    reject: bool
    p_value: float


def welch_t_test(a: Summary, b: Summary, alpha=DEFAULT_ALPHA) -> TTestResult:
    """Compare the means of two independent samples.

    Args:
        a (Summary): First sample; ``t`` is positive when its mean is larger.
        b (Summary): Second sample.
        alpha (SigLevel | str | float, optional): Two-tailed significance
            level. Defaults to ``0.05``.

    Returns:
        TTestResult: Statistic, Welch-Satterthwaite df, tabulated critical
        value and the reject decision ``|t| > crit``.

    Raises:
        InsufficientDataError: If either sample has fewer than two values.
        DegenerateSampleError: If both samples have zero variance.
        InvalidSignificanceLevelError: If ``alpha`` is not tabulated.
    """
    level = SigLevel.parse(alpha)
    for label, summary in (("first", a), ("second", b)):
        if not summary.has_spread:
            raise InsufficientDataError(
                f"The {label} sample has {summary.size} value(s); "
                "a t-test needs at least 2 per sample."
            )

    largest = max(a.standard_error, b.standard_error)
    if largest <= 0:
        raise DegenerateSampleError(
            "Both samples have zero variance; the t statistic is undefined."
        )

    # Squared standard errors relative to the larger one, so neither the
    # pooled error nor the df terms under- or overflow at extreme scales.
    ra = (a.standard_error / largest) ** 2
    rb = (b.standard_error / largest) ** 2
    wa = ra / (ra + rb)
    wb = rb / (ra + rb)
    se = largest * math.sqrt(ra + rb)

    t = (a.mean / 2.0 - b.mean / 2.0) / se * 2.0
    df = 1.0 / (wa**2 / (a.size - 1) + wb**2 / (b.size - 1))
    crit = critical_value(df, level)
    p_value = float(2.0 * student_t.sf(abs(t), df))

    return TTestResult(
        t=float(t),
        df=float(df),
        alpha=level.alpha,
        crit=crit,
        reject=bool(abs(t) > crit),
        p_value=p_value,
    )
