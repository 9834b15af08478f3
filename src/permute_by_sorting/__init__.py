"""
Random permutation by sorting on random keys, plus the enumeration and
matching helpers used to check how uniform the result is.
"""

from .permutation_enumerator import (
    NOT_FOUND,
    PermutationInvariantError,
    enumerate_permutations,
    factorial,
    find_permutation,
)
from .sort_key_permuter import (
    generate_keys,
    key_upper_bound,
    permute_by_sorting,
    permute_by_sorting_unique,
    sort_by_keys,
)

__all__ = [
    "NOT_FOUND",
    "PermutationInvariantError",
    "enumerate_permutations",
    "factorial",
    "find_permutation",
    "generate_keys",
    "key_upper_bound",
    "permute_by_sorting",
    "permute_by_sorting_unique",
    "sort_by_keys",
]
