"""Descriptive statistics for a single fully materialized sample."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..errors import EmptySampleError


def _as_sample_array(sample: Iterable[float]) -> np.ndarray:
    arr = np.asarray(list(sample), dtype=float)
    if arr.size == 0:
        raise EmptySampleError("Sample is empty; at least one value is required.")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Sample contains non-finite values (NaN or inf).")
    return arr


@dataclass(frozen=True)
class Summary:
    """Immutable descriptive statistics of one sample.

    Attributes:
        size: Number of observations (>= 1).
        min: Smallest observation.
        max: Largest observation.
        median: Middle value of the sorted sample; mean of the two middle
            values when ``size`` is even.
        mean: Arithmetic mean.
        standard_deviation: Sample standard deviation with Bessel's
            correction (``n - 1`` denominator).
        standard_error: ``standard_deviation / sqrt(size)``.

    Note:
        For a single observation the ``n - 1`` denominator is zero, so
        ``standard_deviation`` and ``standard_error`` are ``NaN``. Check
        :attr:`has_spread` before relying on them; the t-test and the
        regression reject such summaries explicitly.
    """

    size: int
    min: float
    max: float
    median: float
    mean: float
    standard_deviation: float
    standard_error: float

    @classmethod
    def from_sample(cls, sample: Iterable[float]) -> "Summary":
        """Compute every statistic of ``sample`` in one pass plus one sort.

        Raises:
            EmptySampleError: If ``sample`` has no values.
            ValueError: If ``sample`` contains NaN or infinite values.
        """
        arr = _as_sample_array(sample)
        n = int(arr.size)

        ordered = np.sort(arr)
        mid = n // 2
        if n % 2:
            median = float(ordered[mid])
        else:
            median = float(ordered[mid - 1] / 2.0 + ordered[mid] / 2.0)

        # Work on values scaled by a power of two so sums and squares stay
        # finite near the float limits; the scaling itself is exact.
        _, exponent = math.frexp(max(abs(float(ordered[0])), abs(float(ordered[-1]))))
        scale = math.ldexp(1.0, exponent - 1)
        scaled = arr / scale

        scaled_mean = float(np.mean(scaled))
        mean = scaled_mean * scale
        # Rounding in the mean can drift a hair outside [min, max] for
        # constant samples.
        mean = min(max(mean, float(ordered[0])), float(ordered[-1]))

        if n > 1:
            variance = float(np.sum((scaled - scaled_mean) ** 2)) / (n - 1)
            sd = math.sqrt(variance) * scale
        else:
            sd = math.nan

        return cls(
            size=n,
            min=float(ordered[0]),
            max=float(ordered[-1]),
            median=median,
            mean=mean,
            standard_deviation=sd,
            standard_error=sd / math.sqrt(n),
        )

    @property
    def variance(self) -> float:
        return self.standard_deviation**2

    @property
    def has_spread(self) -> bool:
        """True when the spread statistics are defined (``size >= 2``)."""
        return self.size >= 2 and math.isfinite(self.standard_deviation)


def summarize(sample: Iterable[float]) -> Summary:
    """Shorthand for :meth:`Summary.from_sample`."""
    return Summary.from_sample(sample)
