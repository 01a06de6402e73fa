"""Common prefix and suffix detection between two sequences."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .view import Equality, elements_equal, vectorisable, window


def common_prefix_length(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> int:
    """Return how many leading elements ``a`` and ``b`` share."""

    limit = min(len(a), len(b))
    if vectorisable(a, b, eq=eq):
        mismatches = np.flatnonzero(a[:limit] != b[:limit])
        return int(mismatches[0]) if mismatches.size else limit
    for offset in range(limit):
        if not elements_equal(a[offset], b[offset], eq):
            return offset
    return limit


def common_suffix_length(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> int:
    """Return how many trailing elements ``a`` and ``b`` share."""

    limit = min(len(a), len(b))
    len_a, len_b = len(a), len(b)
    if vectorisable(a, b, eq=eq):
        tail_a = a[len_a - limit :][::-1]
        tail_b = b[len_b - limit :][::-1]
        mismatches = np.flatnonzero(tail_a != tail_b)
        return int(mismatches[0]) if mismatches.size else limit
    for offset in range(limit):
        if not elements_equal(a[len_a - 1 - offset], b[len_b - 1 - offset], eq):
            return offset
    return limit


def common_prefix(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> Sequence[Any]:
    """Return the prefix shared by ``a`` and ``b`` as a window into ``b``.

    The window is taken from ``b`` so that callers comparing an old sequence
    against a new one get a view into the sequence they keep.
    """

    return window(b, 0, common_prefix_length(a, b, eq=eq))


def common_suffix(
    a: Sequence[Any],
    b: Sequence[Any],
    *,
    eq: Equality | None = None,
) -> Sequence[Any]:
    """Return the suffix shared by ``a`` and ``b`` as a window into ``b``.

    For identical inputs the prefix and suffix both span the whole of ``b``
    and therefore overlap.
    """

    size = len(b)
    return window(b, size - common_suffix_length(a, b, eq=eq), size)
