from typing import Any, List, Sequence


# Returned by find_permutation when the needle is not in the haystack.
NOT_FOUND = -1


class PermutationInvariantError(RuntimeError):
    """
    Raised when an internal invariant of the experiment does not hold.

    These are bugs, not bad input: the enumerator produced the wrong number
    of orderings, the matcher was handed sequences of different lengths, or
    a trial produced an ordering that is missing from the enumerated set.
    """


def factorial(n: int) -> int:
    return n * factorial(n - 1) if n > 1 else 1


# ------------------------------------------------------------
# Enumeration
# ------------------------------------------------------------

def enumerate_permutations(sequence: Sequence[Any]) -> List[List[Any]]:
    """
    Return every ordering of sequence.

    Divide and conquer: for each position i, remove element i, enumerate
    the orderings of what remains, and put element i in front of each one.
    The result order (outer loop over i, inner loop over the sub-results)
    is the canonical index order used for tallying.

    Elements are treated positionally, so repeated values produce repeated
    orderings. Growth is factorial: keep the sequence short (<= 8-10).
    """
    n = len(sequence)
    if n == 0:
        raise ValueError("sequence must be non-empty")

    permutations: List[List[Any]] = []

    if n == 1:
        permutations.append(list(sequence))
    else:
        for i in range(n):
            rest = list(sequence[:i]) + list(sequence[i + 1:])
            for tail in enumerate_permutations(rest):
                permutations.append([sequence[i]] + tail)

    expected = factorial(n)
    if len(permutations) != expected:
        raise PermutationInvariantError(
            f"enumerated {len(permutations)} permutations of {n} elements, expected {expected}"
        )

    return permutations


# ------------------------------------------------------------
# Matching
# ------------------------------------------------------------

def find_permutation(needle: Sequence[Any], haystack: Sequence[Sequence[Any]]) -> int:
    """
    Index of the first entry in haystack equal to needle, element by
    element, or NOT_FOUND.
    """
    for index, permutation in enumerate(haystack):
        if len(permutation) != len(needle):
            raise PermutationInvariantError(
                f"length mismatch at index {index}: "
                f"needle has {len(needle)} elements, permutation has {len(permutation)}"
            )

        found = True
        for a, b in zip(permutation, needle):
            if a != b:
                found = False
                break

        if found:
            return index

    return NOT_FOUND
