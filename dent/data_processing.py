"""
Reads numeric samples from text files or standard input.
"""

# One value per non-blank line for plain samples, two values per line
# (whitespace or comma separated) for paired samples. Strict mode fails on the
# first malformed line; lax mode drops malformed lines and logs a count.

from __future__ import annotations

import logging
import re
import sys
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

STDIN_NAMES = (None, "-")
_PAIR_SEPARATOR = re.compile(r"[,\s]+")


def _non_blank(lines: Iterable[str]) -> List[Tuple[int, str]]:
    rows = []
    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if text:
            rows.append((lineno, text))
    return rows


def _report_bad_rows(
    rows: List[Tuple[int, str]], bad: np.ndarray, lax: bool, source: str
) -> None:
    if not bad.any():
        return
    if not lax:
        lineno, text = rows[int(np.argmax(bad))]
        raise ValueError(f"{source}, line {lineno}: could not parse {text!r}.")
    logger.warning("Skipped %d malformed line(s) in %s", int(bad.sum()), source)


def parse_values(
    lines: Iterable[str], lax: bool = False, source: str = "<input>"
) -> np.ndarray:
    """Parse one number per non-blank line.

    Args:
        lines: Text lines (trailing newlines are fine).
        lax: Drop lines that are not finite numbers instead of failing.
        source: Name used in diagnostics.

    Returns:
        numpy.ndarray: Parsed values in input order; may be empty.

    Raises:
        ValueError: In strict mode, on the first line that is not a finite
            number.
    """
    rows = _non_blank(lines)
    if not rows:
        return np.empty(0, dtype=float)

    texts = pd.Series([text for _, text in rows], dtype=object)
    values = pd.to_numeric(texts, errors="coerce").to_numpy(dtype=float)
    bad = ~np.isfinite(values)
    _report_bad_rows(rows, bad, lax, source)
    return values[~bad]


def parse_pairs(
    lines: Iterable[str], lax: bool = False, source: str = "<input>"
) -> np.ndarray:
    """Parse ``x y`` (or ``x,y``) pairs, one per non-blank line.

    Returns:
        numpy.ndarray: Array of shape ``(n, 2)``; may have zero rows.

    Raises:
        ValueError: In strict mode, on the first line that is not a pair of
            numbers.
    """
    rows = _non_blank(lines)
    if not rows:
        return np.empty((0, 2), dtype=float)

    tokens = [_PAIR_SEPARATOR.split(text) for _, text in rows]
    wrong_arity = np.array([len(t) != 2 for t in tokens], dtype=bool)
    frame = pd.DataFrame(
        [t if len(t) == 2 else [None, None] for t in tokens],
        columns=["x", "y"],
    )
    frame = frame.apply(pd.to_numeric, errors="coerce")
    pairs = frame.to_numpy(dtype=float)
    bad = wrong_arity | ~np.isfinite(pairs).all(axis=1)
    _report_bad_rows(rows, bad, lax, source)
    return pairs[~bad]


def _read_lines(path: Optional[str]) -> Tuple[List[str], str]:
    if path in STDIN_NAMES:
        return sys.stdin.readlines(), "<stdin>"
    with open(path, encoding="utf-8") as fh:
        return fh.readlines(), str(path)


def read_sample(path: Optional[str] = None, lax: bool = False) -> np.ndarray:
    """Read a sample from ``path``, or from stdin when ``path`` is None or ``-``."""
    lines, source = _read_lines(path)
    values = parse_values(lines, lax=lax, source=source)
    logger.debug("Read %d values from %s", len(values), source)
    return values


def read_pairs(path: Optional[str] = None, lax: bool = False) -> np.ndarray:
    """Read paired values from ``path``, or from stdin when ``path`` is None or ``-``."""
    lines, source = _read_lines(path)
    pairs = parse_pairs(lines, lax=lax, source=source)
    logger.debug("Read %d pairs from %s", len(pairs), source)
    return pairs
