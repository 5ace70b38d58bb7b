"""Exception types raised by the statistics and rendering core.

All of them derive from :class:`ValueError`, so callers that only care about
"bad numeric input" can keep catching ``ValueError``.
"""

from __future__ import annotations


class EmptySampleError(ValueError):
    """No data points were available to summarize, fit or render."""


class InsufficientDataError(ValueError):
    """A sample is too small for the requested statistic."""


class DegenerateSampleError(ValueError):
    """A sample has zero spread where a non-zero spread is required."""


class InvalidSignificanceLevelError(ValueError):
    """Requested alpha is not one of the tabulated significance levels."""


class InvalidWidthError(ValueError):
    """Rendering width is smaller than one character column."""
