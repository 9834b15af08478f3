import logging
import random
from typing import Any, List, Optional, Set

from .permutation_enumerator import PermutationInvariantError

logger = logging.getLogger(__name__)


def key_upper_bound(n: int) -> int:
    """
    Largest key value for a sequence of length n. Keys are drawn from
    [0, n**3 - 1], which makes collisions rare but not impossible.
    """
    return n ** 3 - 1


# ------------------------------------------------------------
# Key generation
# ------------------------------------------------------------

def generate_keys(
    n: int,
    rng: random.Random,
    unique: bool = False,
    max_draws: Optional[int] = None,
) -> List[int]:
    """
    Draw n sort keys uniformly from [0, n**3 - 1].

    With unique=False the draws are independent and duplicates may occur.
    With unique=True a duplicate draw is rejected and redrawn until n
    distinct keys have been collected. Accepted keys keep draw order.

    The unique loop stops after max_draws draws (default 100 * n) and
    raises PermutationInvariantError. With n**3 candidate keys a healthy
    generator never gets close to that.
    """
    if n <= 0:
        raise ValueError("n must be > 0")

    hi = key_upper_bound(n)

    if not unique:
        return [rng.randint(0, hi) for _ in range(n)]

    if max_draws is None:
        max_draws = 100 * n

    keys: List[int] = []
    seen: Set[int] = set()
    rejected = 0

    while len(keys) < n:
        if len(keys) + rejected >= max_draws:
            raise PermutationInvariantError(
                f"only {len(keys)} of {n} distinct keys after {max_draws} draws"
            )
        k = rng.randint(0, hi)
        if k in seen:
            rejected += 1
            continue
        seen.add(k)
        keys.append(k)

    if rejected:
        logger.debug("rejected %d duplicate keys for n=%d", rejected, n)
    return keys


# ------------------------------------------------------------
# Sorting
# ------------------------------------------------------------

def sort_by_keys(values: List[Any], keys: List[int]) -> None:
    """
    Reorder values by ascending key, in place.

    Pairwise compare-and-swap over every i < j, applied to keys and values
    in lockstep. Only strictly greater keys are swapped, so two elements
    with equal keys are never exchanged with each other. This is not a
    stable sort: keys [5, 5, 1] turn [a, b, c] into [c, b, a].
    """
    n = len(values)
    for i in range(n):
        for j in range(i + 1, n):
            if keys[i] > keys[j]:
                keys[i], keys[j] = keys[j], keys[i]
                values[i], values[j] = values[j], values[i]


# ------------------------------------------------------------
# Permuters
# ------------------------------------------------------------

def permute_by_sorting(values: List[Any], rng: random.Random) -> None:
    """
    Permute values in place by sorting on random keys.

    Keys may collide. Elements with equal keys are never swapped directly
    with each other, though a swap with a third element can still reorder
    them. Either way the resulting distribution is NOT uniform over all
    permutations.
    """
    keys = generate_keys(len(values), rng)
    sort_by_keys(values, keys)


def permute_by_sorting_unique(values: List[Any], rng: random.Random) -> None:
    """
    Permute values in place by sorting on distinct random keys.
    """
    keys = generate_keys(len(values), rng, unique=True)
    sort_by_keys(values, keys)
