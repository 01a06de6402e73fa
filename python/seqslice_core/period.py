"""Minimal repeating unit detection."""

from __future__ import annotations

import warnings
from typing import Any, Sequence

from .view import Equality, PerformanceWarning, elements_equal, vectorisable, window

LARGE_PERIOD_INPUT = 100_000


def is_period(
    s: Sequence[Any],
    size: int,
    *,
    eq: Equality | None = None,
) -> bool:
    """Return True if repeating ``s[:size]`` reproduces ``s`` exactly.

    ``size`` must be positive. A ``size`` that does not divide ``len(s)`` is
    never a period.
    """

    if size <= 0:
        raise ValueError(f"period size must be positive, got {size}")
    count = len(s)
    if count % size:
        return False
    if vectorisable(s, eq=eq):
        return bool((s.reshape(-1, size) == s[:size]).all())
    for offset in range(size, count, size):
        for index in range(size):
            if not elements_equal(s[index], s[offset + index], eq):
                return False
    return True


def _smallest_period(s: Sequence[Any], eq: Equality | None) -> int | None:
    # called directly by each public entry point so stacklevel=3 names the caller
    count = len(s)
    if count <= 1:
        return None
    if count > LARGE_PERIOD_INPUT and not vectorisable(s, eq=eq):
        warnings.warn(
            f"Minimal period search over {count} elements is quadratic; "
            "pass a 1-D numpy array to use the vectorised comparison.",
            PerformanceWarning,
            stacklevel=3,
        )
    for size in range(1, count // 2 + 1):
        if count % size:
            continue
        if is_period(s, size, eq=eq):
            return size
    return None


def least_common_period(
    s: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> int | None:
    """Return the length of the smallest proper repeating unit of ``s``.

    Candidates run over ``1 .. len(s) // 2``; ``len(s)`` itself is never
    reported, so irreducible sequences and sequences shorter than two
    elements give ``None``.
    """

    return _smallest_period(s, eq)


def least_common_slice(
    s: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> Sequence[Any] | None:
    """Return the smallest slice of ``s`` that can be repeated to form ``s``."""

    size = _smallest_period(s, eq)
    if size is None:
        return None
    return window(s, 0, size)
