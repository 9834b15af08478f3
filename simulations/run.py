# simulations/run.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from .common import ExperimentSpec, ExperimentResult
from .methods import get_method


def run_experiment(
    method: str,
    sequence: Sequence[Any],
    trials: int,
    seed: Optional[int] = None,
) -> ExperimentResult:
    """
    Run a single permutation experiment and return an ExperimentResult.

    Parameters
    ----------
    method:
        Name of the permuter ('sorting' or 'sorting_unique').
    sequence:
        Initial sequence. Never mutated; every trial permutes a copy.
    trials:
        Number of permutations to generate.
    seed:
        RNG seed. None seeds from the operating system.

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(sequence=tuple(sequence), trials=trials)
    fn = get_method(method)
    return fn(spec, seed)


def run_pair(
    method_a: str,
    method_b: str,
    sequence: Sequence[Any],
    trials: int,
    seed: Optional[int] = None,
):
    """
    Convenience helper: run two methods under the same spec and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(method=method_a, sequence=sequence, trials=trials, seed=seed)
    rb = run_experiment(method=method_b, sequence=sequence, trials=trials, seed=seed)
    return ra, rb
