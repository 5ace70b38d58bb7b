import math

import pytest
from scipy.stats import norm
from scipy.stats import t as student_t

from dent.errors import InvalidSignificanceLevelError
from dent.stats.significance import (
    SIGNIFICANCE_TABLE,
    TABULATED_DF,
    SigLevel,
    critical_value,
    table_row,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        (".05", SigLevel.ALPHA_050),
        ("0.05", SigLevel.ALPHA_050),
        (0.05, SigLevel.ALPHA_050),
        (".001", SigLevel.ALPHA_001),
        (" .1 ", SigLevel.ALPHA_100),
        ("0.025", SigLevel.ALPHA_025),
        (SigLevel.ALPHA_010, SigLevel.ALPHA_010),
    ],
)
def test_parse_accepts_tabulated_levels(text, expected):
    assert SigLevel.parse(text) is expected


@pytest.mark.parametrize("text", ["0.2", ".5", "abc", "", 0.0, 1])
def test_parse_rejects_other_levels(text):
    with pytest.raises(InvalidSignificanceLevelError):
        SigLevel.parse(text)


@pytest.mark.parametrize(
    "df, row",
    [
        (0.3, 1),
        (1.0, 1),
        (7.9, 7),
        (30.5, 30),
        (45.0, 40),
        (119.99, 60),
        (120.0, 120),
        (1e6, 120),
        (math.inf, math.inf),
    ],
)
def test_table_row_floors_to_tabulated_df(df, row):
    assert table_row(df) == row


def test_table_row_rejects_nan():
    with pytest.raises(ValueError):
        table_row(math.nan)


def test_table_is_complete():
    assert len(SIGNIFICANCE_TABLE) == len(TABULATED_DF) * len(SigLevel)
    for df in TABULATED_DF:
        for level in SigLevel:
            assert (df, level) in SIGNIFICANCE_TABLE


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SIGNIFICANCE_TABLE[(1, SigLevel.ALPHA_050)] = 0.0


def test_table_matches_student_t_quantiles():
    for df in TABULATED_DF:
        for level in SigLevel:
            q = 1.0 - level.alpha / 2.0
            exact = norm.ppf(q) if math.isinf(df) else student_t.ppf(q, df)
            assert abs(SIGNIFICANCE_TABLE[(df, level)] - exact) < 1e-3, (df, level)


def test_critical_values_shrink_with_df_and_alpha():
    levels = sorted(SigLevel, key=lambda level: level.alpha)
    for level in levels:
        column = [SIGNIFICANCE_TABLE[(df, level)] for df in TABULATED_DF]
        assert column == sorted(column, reverse=True)
    for df in TABULATED_DF:
        row = [SIGNIFICANCE_TABLE[(df, level)] for level in levels]
        assert row == sorted(row, reverse=True)


def test_critical_value_lookup():
    assert critical_value(4.0, ".05") == 2.776
    assert critical_value(4.9, SigLevel.ALPHA_050) == 2.776
    assert critical_value(10, 0.01) == 3.169
