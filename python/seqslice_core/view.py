"""Non-owning sequence windows and element equality shared by the finders."""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from typing import Any, Callable, Iterator, Sequence

import numpy as np

Equality = Callable[[Any, Any], bool]


class EmptyPatternError(ValueError):
    """Raised when a search pattern has no elements."""


class PerformanceWarning(UserWarning):
    """Emitted when an input is large enough for a quadratic search to hurt."""


class SequenceView(SequenceABC):
    """A contiguous ``[lower, upper)`` window into a borrowed base sequence.

    The view stores only the base reference and the two offsets, so it
    reflects later mutations of a mutable base. Views compare equal to any
    sequence holding the same elements in the same order, which lets
    ``common_prefix([1, 2], [1, 3]) == [1]`` read naturally.
    """

    __slots__ = ("_base", "_lower", "_upper")

    def __init__(self, base: Sequence[Any], lower: int = 0, upper: int | None = None) -> None:
        if upper is None:
            upper = len(base)
        if not 0 <= lower <= upper <= len(base):
            raise ValueError(
                f"invalid window [{lower}, {upper}) for a sequence of length {len(base)}"
            )
        if isinstance(base, SequenceView):
            lower += base._lower
            upper += base._lower
            base = base._base
        self._base = base
        self._lower = lower
        self._upper = upper

    @property
    def base(self) -> Sequence[Any]:
        return self._base

    @property
    def lower(self) -> int:
        return self._lower

    @property
    def upper(self) -> int:
        return self._upper

    def __len__(self) -> int:
        return self._upper - self._lower

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("SequenceView slices must be contiguous")
            stop = max(start, stop)
            return SequenceView(self._base, self._lower + start, self._lower + stop)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("SequenceView index out of range")
        return self._base[self._lower + index]

    def __iter__(self) -> Iterator[Any]:
        base = self._base
        for offset in range(self._lower, self._upper):
            yield base[offset]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (SequenceABC, np.ndarray)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(elements_equal(mine, theirs) for mine, theirs in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"

    def materialise(self) -> Sequence[Any]:
        """Return the window as a native slice of the base (``str``, ``bytes``, ``list``...)."""

        return self._base[self._lower : self._upper]


def window(seq: Sequence[Any], lower: int, upper: int) -> Sequence[Any]:
    """Return a zero-copy ``[lower, upper)`` window into ``seq``.

    ``numpy.ndarray`` and ``memoryview`` slices are already views, so they are
    returned natively; anything else is wrapped in :class:`SequenceView`.
    """

    if isinstance(seq, (np.ndarray, memoryview)):
        if not 0 <= lower <= upper <= len(seq):
            raise ValueError(
                f"invalid window [{lower}, {upper}) for a sequence of length {len(seq)}"
            )
        return seq[lower:upper]
    return SequenceView(seq, lower, upper)


def elements_equal(left: Any, right: Any, eq: Equality | None = None) -> bool:
    """Compare two elements with ``eq``, falling back to ``==``."""

    if eq is not None:
        return bool(eq(left, right))
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        # rows of a 2-D array compare element-wise under ==
        return bool(np.array_equal(left, right))
    return bool(left == right)


def vectorisable(*seqs: Any, eq: Equality | None = None) -> bool:
    """True when every input is a 1-D ndarray and no custom equality is set."""

    if eq is not None:
        return False
    return all(isinstance(seq, np.ndarray) and seq.ndim == 1 for seq in seqs)
