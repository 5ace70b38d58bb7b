import math

import numpy as np
import pytest

from dent.errors import EmptySampleError
from dent.stats.summary import Summary


def test_summary_of_one_to_five():
    s = Summary.from_sample([1, 2, 3, 4, 5])
    assert s.size == 5
    assert s.min == 1.0
    assert s.max == 5.0
    assert s.median == 3.0
    assert s.mean == 3.0
    assert math.isclose(s.standard_deviation, math.sqrt(2.5))
    assert math.isclose(s.variance, 2.5)
    assert math.isclose(s.standard_error, 0.7071, abs_tol=1e-4)


def test_summary_uses_bessel_correction():
    s = Summary.from_sample([2, 4, 4, 4, 5, 5, 7, 9])
    assert s.mean == 5.0
    # Even size: median is the mean of the two middle values.
    assert s.median == 4.5
    assert math.isclose(s.standard_deviation, math.sqrt(32.0 / 7.0))
    assert round(s.standard_deviation, 3) == 2.138


def test_single_value_has_undefined_spread():
    s = Summary.from_sample([42])
    assert s.size == 1
    assert s.min == s.max == s.median == s.mean == 42.0
    assert math.isnan(s.standard_deviation)
    assert math.isnan(s.standard_error)
    assert not s.has_spread


def test_constant_sample_has_zero_spread():
    s = Summary.from_sample([5.0, 5.0, 5.0])
    assert s.standard_deviation == 0.0
    assert s.standard_error == 0.0
    assert s.has_spread


def test_empty_sample_raises():
    with pytest.raises(EmptySampleError):
        Summary.from_sample([])
    # Still a ValueError for callers that catch broadly.
    with pytest.raises(ValueError):
        Summary.from_sample(iter(()))


def test_non_finite_values_raise():
    with pytest.raises(ValueError, match="non-finite"):
        Summary.from_sample([1.0, float("nan"), 2.0])
    with pytest.raises(ValueError, match="non-finite"):
        Summary.from_sample([1.0, float("inf")])


def test_summary_is_order_invariant():
    values = [3.5, 1.25, 9.0, -2.0, 4.75, 0.5, 4.75, 2.25]
    forward = Summary.from_sample(values)
    assert Summary.from_sample(list(reversed(values))) == forward
    assert Summary.from_sample(sorted(values)) == forward


def test_summary_invariants_on_random_samples():
    rng = np.random.default_rng(1234)
    for size in (1, 2, 3, 10, 101):
        sample = rng.normal(loc=10.0, scale=3.0, size=size)
        s = Summary.from_sample(sample)
        assert s.min <= s.median <= s.max
        assert s.min <= s.mean <= s.max
        if s.has_spread:
            assert s.standard_error == s.standard_deviation / math.sqrt(s.size)
            assert math.isclose(s.standard_deviation, float(np.std(sample, ddof=1)))
            assert math.isclose(s.median, float(np.median(sample)))


def test_summary_is_immutable():
    s = Summary.from_sample([1, 2, 3])
    with pytest.raises(AttributeError):
        s.mean = 10.0


def test_spread_of_huge_values_stays_finite():
    s = Summary.from_sample([1e170, 2e170, 3e170])
    assert math.isclose(s.mean, 2e170)
    assert math.isclose(s.standard_deviation, 1e170)
    assert math.isfinite(s.standard_error)


def test_values_near_float_limits():
    s = Summary.from_sample([-1e308, 0.0, 1e308])
    assert s.mean == 0.0
    assert math.isclose(s.standard_deviation, 1e308)
    pair = Summary.from_sample([1e308, 1.5e308])
    assert math.isclose(pair.mean, 1.25e308)
    assert math.isclose(pair.median, 1.25e308)
