"""Non-overlapping subsequence matching."""

from __future__ import annotations

import time
from typing import Any, List, Sequence, Tuple

import numpy as np

from .view import EmptyPatternError, Equality, elements_equal, vectorisable

Ranges = List[range]


def require_pattern(pattern: Sequence[Any], name: str = "pattern") -> None:
    """Reject empty patterns, which would otherwise match at every offset."""

    if len(pattern) == 0:
        raise EmptyPatternError(f"{name} must contain at least one element")


def matches_at(
    s: Sequence[Any],
    pattern: Sequence[Any],
    offset: int,
    eq: Equality | None = None,
) -> bool:
    """Return True if ``pattern`` occurs in ``s`` starting at ``offset``."""

    if offset < 0 or offset + len(pattern) > len(s):
        return False
    return all(
        elements_equal(s[offset + index], element, eq)
        for index, element in enumerate(pattern)
    )


def _candidate_starts(s: np.ndarray, pattern: np.ndarray) -> np.ndarray:
    # offsets whose first element matches; confirmed one at a time by the caller
    return np.flatnonzero(s[: len(s) - len(pattern) + 1] == pattern[0])


def ranges(
    s: Sequence[Any],
    pattern: Sequence[Any],
    *,
    eq: Equality | None = None,
    do_time: bool = False,
) -> Ranges | Tuple[Ranges, float]:
    """Return the non-overlapping occurrences of ``pattern`` in ``s``.

    Matching is greedy and leftmost-first: a match consumes its span and the
    scan resumes after it, so ``ranges("aaaa", "aa")`` gives ``[0, 2)`` and
    ``[2, 4)``. Each occurrence is a half-open ``range``.
    """

    require_pattern(pattern)
    if do_time:
        start = time.time()

    width = len(pattern)
    found: Ranges = []
    if width <= len(s):
        if vectorisable(s, pattern, eq=eq):
            cursor = 0
            for begin in _candidate_starts(s, pattern):
                begin = int(begin)
                if begin < cursor or not np.array_equal(s[begin : begin + width], pattern):
                    continue
                found.append(range(begin, begin + width))
                cursor = begin + width
        else:
            cursor = 0
            while cursor + width <= len(s):
                if matches_at(s, pattern, cursor, eq):
                    found.append(range(cursor, cursor + width))
                    cursor += width
                else:
                    cursor += 1

    if do_time:
        return found, time.time() - start
    return found


def first_range(
    s: Sequence[Any],
    pattern: Sequence[Any],
    *,
    start: int = 0,
    eq: Equality | None = None,
) -> range | None:
    """Return the first occurrence of ``pattern`` at or after ``start``."""

    require_pattern(pattern)
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    width = len(pattern)
    for offset in range(start, len(s) - width + 1):
        if matches_at(s, pattern, offset, eq):
            return range(offset, offset + width)
    return None


def count_occurrences(
    s: Sequence[Any],
    pattern: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> int:
    """Return how many non-overlapping occurrences of ``pattern`` are in ``s``."""

    return len(ranges(s, pattern, eq=eq))
