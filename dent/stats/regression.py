"""Provide ordinary least-squares fitting for paired samples.

The fit uses the correlation identity: the slope is ``r * s_y / s_x`` where
``s_x`` and ``s_y`` come from the :class:`~dent.stats.summary.Summary` of each
coordinate, so mean and spread are computed in exactly one place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from ..errors import DegenerateSampleError, EmptySampleError, InsufficientDataError
from .summary import Summary


@dataclass(frozen=True)
class LinearRegressionModel:
    """Fitted straight line ``y = intercept + slope * x``.

    Attributes:
        intercept: Estimated ``y`` at ``x = 0``.
        slope: Estimated change in ``y`` per unit ``x``.
        r: Pearson correlation coefficient, within ``[-1, 1]``.
        standard_error: Standard error of the slope estimate, always
            non-negative: ``sqrt((1 - r**2) / df) * s_y / s_x``, which equals
            ``|slope| / sqrt(df) * sqrt(1 / r**2 - 1)`` and stays defined at
            ``r == 0``. ``NaN`` when ``df <= 0``.
        size: Number of finite pairs used in the fit.
        df: Residual degrees of freedom, ``size - 2``.
    """

    intercept: float
    slope: float
    r: float
    standard_error: float
    size: int
    df: int

    def predict(self, x):
        """Evaluate the fitted line at ``x`` (scalar or array-like)."""
        if np.ndim(x) == 0:
            return self.intercept + self.slope * float(x)
        return self.intercept + self.slope * np.asarray(x, dtype=float)


class LinearRegression:
    """Factory for :class:`LinearRegressionModel` fits."""

    @staticmethod
    def fit(pairs: Iterable[Tuple[float, float]]) -> LinearRegressionModel:
        """Fit a least-squares line to ``(x, y)`` pairs.

        Args:
            pairs (Iterable[tuple[float, float]]): Paired observations.

        Returns:
            LinearRegressionModel: Intercept, slope, correlation and slope
            standard error.

        Raises:
            EmptySampleError: If ``pairs`` is empty.
            ValueError: If any element is not a pair.
        """
        data = np.asarray(list(pairs), dtype=float)
        if data.size == 0:
            raise EmptySampleError("No (x, y) pairs to fit.")
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError("Regression input must be a sequence of (x, y) pairs.")
        return LinearRegression.fit_xy(data[:, 0], data[:, 1])

    @staticmethod
    def fit_xy(x, y) -> LinearRegressionModel:
        """Fit a least-squares line to separate ``x`` and ``y`` arrays.

        Args:
            x (array-like): Independent variable.
            y (array-like): Dependent variable, same length as ``x``.

        Returns:
            LinearRegressionModel: The fitted model.

        Raises:
            ValueError: If ``x`` and ``y`` differ in length.
            EmptySampleError: If no finite pairs remain.
            InsufficientDataError: If fewer than two finite pairs remain.
            DegenerateSampleError: If ``x`` or ``y`` has zero variance.

        Note:
            Pairs with a non-finite coordinate are dropped before fitting.
            With exactly two pairs ``df`` is zero and ``standard_error`` is
            ``NaN``; the line itself is still well defined.
        """
        x_arr = np.asarray(x, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        if x_arr.shape != y_arr.shape:
            raise ValueError(
                f"x and y must have the same length, got {x_arr.size} and {y_arr.size}."
            )
        mask = np.isfinite(x_arr) & np.isfinite(y_arr)
        x_arr = x_arr[mask]
        y_arr = y_arr[mask]
        n = int(x_arr.size)
        if n == 0:
            raise EmptySampleError("No finite (x, y) pairs to fit.")
        if n < 2:
            raise InsufficientDataError("Regression needs at least 2 pairs.")

        summ_x = Summary.from_sample(x_arr)
        summ_y = Summary.from_sample(y_arr)
        std_x = summ_x.standard_deviation
        std_y = summ_y.standard_deviation
        if std_x == 0:
            raise DegenerateSampleError("Insufficient x variance for regression.")
        if std_y == 0:
            raise DegenerateSampleError("Insufficient y variance for regression.")

        r_num = float(np.sum((x_arr - summ_x.mean) * (y_arr - summ_y.mean)))
        r = r_num / ((n - 1) * std_x * std_y)
        r = min(1.0, max(-1.0, r))

        slope = r * (std_y / std_x)
        intercept = summ_y.mean - slope * summ_x.mean

        dof = n - 2
        if dof > 0:
            # Same as |slope| / sqrt(dof) * sqrt(1/r^2 - 1), but defined at r == 0.
            standard_error = math.sqrt((1.0 - r**2) / dof) * (std_y / std_x)
        else:
            standard_error = math.nan

        return LinearRegressionModel(
            intercept=float(intercept),
            slope=float(slope),
            r=float(r),
            standard_error=float(standard_error),
            size=n,
            df=dof,
        )


def linear_regression(x, y) -> LinearRegressionModel:
    """Shorthand for :meth:`LinearRegression.fit_xy`."""
    return LinearRegression.fit_xy(x, y)
