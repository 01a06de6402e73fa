"""Tests for search and replace over sequences."""

import numpy as np
import pytest

from seqslice_core import EmptyPatternError
from seqslice_core.matching import ranges
from seqslice_core.substitution import replacing_occurrences


def test_replaces_every_occurrence():
    assert replacing_occurrences([1, 2, 1, 2, 3], [1, 2], [9]) == [9, 9, 3]


def test_gaps_and_tail_are_copied():
    assert replacing_occurrences("xabyabz", "ab", "-") == list("x-y-z")


def test_empty_replacement_deletes():
    assert replacing_occurrences(b"a--b--c", b"--", b"") == list(b"abc")


def test_longer_replacement_grows_output():
    seq = [0, 1, 0, 1]
    result = replacing_occurrences(seq, [1], [7, 7, 7])
    assert result == [0, 7, 7, 7, 0, 7, 7, 7]
    matches = len(ranges(seq, [1]))
    assert len(result) == len(seq) - matches * 1 + matches * 3


def test_replacing_with_search_is_identity():
    for seq, pattern in (("banana", "an"), ([3, 3, 3], [3, 3]), ("abc", "z")):
        assert replacing_occurrences(seq, pattern, pattern) == list(seq)


def test_no_match_returns_fresh_copy():
    """Without matches the result equals the input but is new storage."""
    seq = [4, 5, 6]
    result = replacing_occurrences(seq, [7], [0])
    assert result == seq
    assert result is not seq
    result.append(1)
    assert seq == [4, 5, 6]


def test_greedy_matches_drive_replacement():
    assert replacing_occurrences("aaaaa", "aa", "b") == list("bba")


def test_empty_search_is_rejected():
    with pytest.raises(EmptyPatternError, match="search"):
        replacing_occurrences([1, 2], [], [3])


def test_replacement_may_be_an_iterator():
    """The replacement is consumed once and reused for every match."""
    result = replacing_occurrences("a.b.c", ".", iter(", "))
    assert "".join(result) == "a, b, c"


def test_numpy_input():
    arr = np.array([1, 2, 3, 1, 2, 3])
    result = replacing_occurrences(arr, np.array([2, 3]), [0])
    assert result == [1, 0, 1, 0]


def test_custom_equality_predicate():
    same_case = lambda left, right: left.lower() == right.lower()
    result = replacing_occurrences("Cat cat CAT", "cat", "dog", eq=same_case)
    assert "".join(result) == "dog dog dog"


def test_do_time_returns_elapsed():
    result, elapsed = replacing_occurrences([1, 2], [2], [3], do_time=True)
    assert result == [1, 3]
    assert elapsed >= 0.0


if __name__ == "__main__":
    test_replaces_every_occurrence()
    test_gaps_and_tail_are_copied()
    test_empty_replacement_deletes()
    test_longer_replacement_grows_output()
    test_replacing_with_search_is_identity()
    test_no_match_returns_fresh_copy()
    test_greedy_matches_drive_replacement()
    test_empty_search_is_rejected()
    test_replacement_may_be_an_iterator()
    test_numpy_input()
    test_custom_equality_predicate()
    test_do_time_returns_elapsed()
    print("All tests passed!")
