"""Search and replace over generic sequences."""

from __future__ import annotations

import time
from typing import Any, Iterable, List, Sequence, Tuple

from .matching import ranges, require_pattern
from .view import Equality, window


def replacing_occurrences(
    s: Sequence[Any],
    search: Sequence[Any],
    replacement: Iterable[Any],
    *,
    eq: Equality | None = None,
    do_time: bool = False,
) -> List[Any] | Tuple[List[Any], float]:
    """Return a new list with every non-overlapping ``search`` replaced.

    Occurrences are located with :func:`~seqslice_core.matching.ranges`. The
    gaps between them are copied from ``s`` and ``replacement`` is spliced in
    at each match; an empty ``replacement`` deletes the matches. The result
    never shares storage with ``s``, even when nothing matched.
    """

    require_pattern(search, "search")
    if do_time:
        start = time.time()

    splice = list(replacement)
    result: List[Any] = []
    cursor = 0
    for match in ranges(s, search, eq=eq):
        result.extend(window(s, cursor, match.start))
        result.extend(splice)
        cursor = match.stop
    result.extend(window(s, cursor, len(s)))

    if do_time:
        return result, time.time() - start
    return result
