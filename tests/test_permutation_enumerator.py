from __future__ import annotations

import itertools

import pytest

from permute_by_sorting import permutation_enumerator
from permute_by_sorting.permutation_enumerator import (
    NOT_FOUND,
    PermutationInvariantError,
    enumerate_permutations,
    factorial,
    find_permutation,
)


def test_factorial():
    assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_enumerates_all_distinct_orderings(n):
    seq = list(range(n))
    perms = enumerate_permutations(seq)
    assert len(perms) == factorial(n)
    assert len({tuple(p) for p in perms}) == factorial(n)
    for p in perms:
        assert sorted(p) == seq


def test_four_elements_give_24():
    perms = enumerate_permutations([1, 2, 3, 4])
    assert len(perms) == 24
    assert perms[0] == [1, 2, 3, 4]
    assert perms[-1] == [4, 3, 2, 1]


def test_canonical_order_for_three():
    assert enumerate_permutations([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 1, 2],
        [3, 2, 1],
    ]


def test_canonical_order_matches_lexicographic_for_sorted_input():
    seq = [1, 2, 3, 4, 5]
    assert enumerate_permutations(seq) == [list(p) for p in itertools.permutations(seq)]


def test_single_element():
    assert enumerate_permutations([5]) == [[5]]


def test_accepts_tuple_input():
    assert enumerate_permutations((1, 2)) == [[1, 2], [2, 1]]


def test_repeated_values_are_positional():
    perms = enumerate_permutations([7, 7, 8])
    assert len(perms) == 6
    assert perms.count([7, 7, 8]) == 2


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        enumerate_permutations([])


def test_find_permutation_returns_index():
    perms = enumerate_permutations([1, 2, 3, 4])
    for i, p in enumerate(perms):
        assert find_permutation(list(p), perms) == i


def test_find_permutation_returns_first_match():
    haystack = [[1, 2], [2, 1], [1, 2]]
    assert find_permutation([1, 2], haystack) == 0


def test_find_permutation_not_found():
    perms = enumerate_permutations([1, 2, 3])
    assert find_permutation([1, 2, 4], perms) == NOT_FOUND


def test_find_permutation_length_mismatch_is_fatal():
    with pytest.raises(PermutationInvariantError):
        find_permutation([1, 2, 3], [[1, 2]])


def test_invariant_error_is_runtime_error():
    assert issubclass(PermutationInvariantError, RuntimeError)


def test_enumeration_count_check_is_always_on(monkeypatch):
    monkeypatch.setattr(permutation_enumerator, "factorial", lambda n: 99)
    with pytest.raises(PermutationInvariantError):
        enumerate_permutations([1, 2])
