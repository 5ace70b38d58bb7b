import math

import pytest
from scipy import stats as scipy_stats

from dent.errors import (
    DegenerateSampleError,
    InsufficientDataError,
    InvalidSignificanceLevelError,
)
from dent.stats.summary import Summary
from dent.stats.ttest import welch_t_test


def _summ(values):
    return Summary.from_sample(values)


def test_clearly_different_means_reject():
    result = welch_t_test(_summ([1, 2, 3]), _summ([4, 5, 6]), ".05")
    assert math.isclose(result.t, -3.0 / math.sqrt(2.0 / 3.0))
    assert math.isclose(result.df, 4.0)
    assert result.alpha == 0.05
    assert result.crit == 2.776
    assert result.reject is True


def test_overlapping_samples_do_not_reject():
    # t = -1 and df = 8 for two shifted copies of 1..5.
    result = welch_t_test(_summ([1, 2, 3, 4, 5]), _summ([2, 3, 4, 5, 6]))
    assert math.isclose(result.t, -1.0)
    assert math.isclose(result.df, 8.0)
    assert result.crit == 2.306
    assert result.reject is False


def test_swapping_samples_negates_t_only():
    a = _summ([3.1, 2.9, 4.4, 5.0, 3.3, 2.2])
    b = _summ([6.0, 5.1, 7.3, 4.8])
    ab = welch_t_test(a, b, 0.01)
    ba = welch_t_test(b, a, 0.01)
    assert ab.t == -ba.t
    assert ab.df == ba.df
    assert ab.crit == ba.crit
    assert ab.reject == ba.reject
    assert math.isclose(ab.p_value, ba.p_value)


def test_matches_scipy_welch():
    x = [12.1, 14.3, 11.8, 13.9, 15.2, 12.7, 13.3]
    y = [10.2, 11.9, 9.8, 12.5, 10.7]
    result = welch_t_test(_summ(x), _summ(y), 0.05)
    expected = scipy_stats.ttest_ind(x, y, equal_var=False)
    assert math.isclose(result.t, float(expected.statistic), rel_tol=1e-9)
    assert math.isclose(result.p_value, float(expected.pvalue), rel_tol=1e-6)


def test_stricter_alpha_raises_critical_value():
    a, b = _summ([1, 2, 3, 4]), _summ([3, 4, 5, 6])
    loose = welch_t_test(a, b, ".1")
    strict = welch_t_test(a, b, ".001")
    assert strict.crit > loose.crit
    assert loose.t == strict.t


def test_one_constant_sample_is_allowed():
    result = welch_t_test(_summ([5, 5, 5]), _summ([1, 2, 3]))
    assert math.isclose(result.df, 2.0)
    assert result.crit == 4.303
    assert result.reject is True


def test_single_value_sample_raises():
    with pytest.raises(InsufficientDataError):
        welch_t_test(_summ([42]), _summ([1, 2, 3]))
    with pytest.raises(InsufficientDataError):
        welch_t_test(_summ([1, 2, 3]), _summ([42]))


def test_two_constant_samples_raise():
    with pytest.raises(DegenerateSampleError):
        welch_t_test(_summ([5, 5]), _summ([7, 7, 7]))


def test_invalid_alpha_raises():
    with pytest.raises(InvalidSignificanceLevelError):
        welch_t_test(_summ([1, 2]), _summ([3, 4]), "0.2")


@pytest.mark.parametrize("scale", [1e-100, 1e-150, 1e150])
def test_result_does_not_depend_on_measurement_scale(scale):
    a = _summ([1 * scale, 2 * scale, 3 * scale])
    b = _summ([4 * scale, 5 * scale, 6 * scale])
    result = welch_t_test(a, b, ".05")
    assert math.isfinite(result.t)
    assert math.isclose(result.t, -3.0 / math.sqrt(2.0 / 3.0), rel_tol=1e-9)
    assert math.isclose(result.df, 4.0, rel_tol=1e-9)
    assert result.reject is True
