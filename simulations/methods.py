# simulations/methods.py

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, List

from .common import ExperimentSpec, ExperimentResult, Timer

from permute_by_sorting.permutation_enumerator import (
    NOT_FOUND,
    PermutationInvariantError,
    enumerate_permutations,
    find_permutation,
)
from permute_by_sorting.sort_key_permuter import (
    permute_by_sorting,
    permute_by_sorting_unique,
)

logger = logging.getLogger(__name__)

# In-place permute function: (values, rng) -> None
PermuteFn = Callable[[List[Any], random.Random], None]


def run_trials(
    spec: ExperimentSpec,
    permute: PermuteFn,
    rng: random.Random,
    permutations: List[List[Any]],
) -> List[int]:
    """
    Apply permute to a fresh copy of spec.sequence, spec.trials times, and
    count how often each entry of permutations comes out.

    A result that is missing from permutations means permute is broken;
    that raises PermutationInvariantError rather than being skipped.
    """
    counts = [0] * len(permutations)

    for _ in range(spec.trials):
        values = list(spec.sequence)
        permute(values, rng)
        index = find_permutation(values, permutations)
        if index == NOT_FOUND:
            raise PermutationInvariantError(
                f"trial produced {values}, which is not a permutation of {list(spec.sequence)}"
            )
        counts[index] += 1

    return counts


def _simulate(method: str, permute: PermuteFn, spec: ExperimentSpec, seed: Any) -> ExperimentResult:
    rng = random.Random(seed)

    with Timer() as t:
        permutations = enumerate_permutations(spec.sequence)
        logger.debug("%s: %d permutations of %s", method, len(permutations), spec.sequence)
        counts = run_trials(spec, permute, rng, permutations)

    logger.debug("%s: %d trials in %.3fs", method, spec.trials, t.elapsed_s)

    return ExperimentResult(
        method=method,
        spec=spec,
        permutations=permutations,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={"seed": seed},
    )


def simulate_sorting(spec: ExperimentSpec, seed: Any) -> ExperimentResult:
    """
    Permute by sorting on random keys in [0, n**3 - 1], duplicates allowed.

    Tied keys never reorder their elements, which skews the outcome towards
    orderings that keep tied elements in input order.
    """
    return _simulate("sorting", permute_by_sorting, spec, seed)


def simulate_sorting_unique(spec: ExperimentSpec, seed: Any) -> ExperimentResult:
    """
    Permute by sorting on distinct random keys (duplicates are redrawn).
    """
    return _simulate("sorting_unique", permute_by_sorting_unique, spec, seed)


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> Callable[..., ExperimentResult]:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function.
METHODS: Dict[str, Callable[..., ExperimentResult]] = {
    "sorting": simulate_sorting,
    "sorting_unique": simulate_sorting_unique,
}
