# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import math
import time


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters shared by every permutation experiment.
    """
    sequence: Tuple[Any, ...]
    trials: int

    def __post_init__(self) -> None:
        # Accept any sequence, store an immutable copy.
        object.__setattr__(self, "sequence", tuple(self.sequence))
        if not self.sequence:
            raise ValueError("sequence must be non-empty")
        if self.trials < 0:
            raise ValueError("trials must be >= 0")


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats over per-permutation occurrence counts.
    """
    min: int
    max: int
    mean: float
    std: float  # population stddev
    chi_square: float  # Pearson, against a uniform expectation of `mean`


def summarize_counts(counts: List[int]) -> SummaryStats:
    """
    Compute min/max/mean/std over integer counts (population stddev), plus
    Pearson's chi-square statistic against the uniform distribution.
    """
    if not counts:
        raise ValueError("counts must be non-empty")

    mn = min(counts)
    mx = max(counts)

    n = len(counts)
    total = 0
    for c in counts:
        total += c
    mean = total / n

    # population variance
    var_acc = 0.0
    for c in counts:
        d = c - mean
        var_acc += d * d
    var = var_acc / n
    std = math.sqrt(var)

    chi_square = var_acc / mean if mean > 0 else 0.0

    return SummaryStats(min=mn, max=mx, mean=mean, std=std, chi_square=chi_square)


@dataclass
class ExperimentResult:
    """
    Outcome of one experiment: the enumerated permutations (canonical order)
    and how many trials landed on each of them.
    """
    method: str
    spec: ExperimentSpec
    permutations: List[List[Any]]
    counts: List[int]

    expected_average: int = field(init=False)
    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.counts) != len(self.permutations):
            raise ValueError(
                f"expected {len(self.permutations)} counts, got {len(self.counts)}"
            )

        self.expected_average = self.spec.trials // len(self.permutations)
        self.stats = summarize_counts(self.counts)

        # Sanity: counts should sum to trials
        expected = self.spec.trials
        actual = 0
        for c in self.counts:
            actual += c
        if actual != expected:
            raise ValueError(
                f"counts sum mismatch: expected {expected}, got {actual}"
            )


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def deviation(count: int, expected_average: int) -> Tuple[int, float]:
    """
    Absolute deviation of count from the expected average, and that
    deviation as a fraction of the expected average.

    An expected average of 0 gives a fraction of inf (or 0.0 when the
    count is 0 as well).
    """
    d = abs(count - expected_average)
    if expected_average == 0:
        return d, math.inf if d else 0.0
    return d, d / expected_average


def format_permutation(permutation: List[Any]) -> str:
    return " ".join(str(x) for x in permutation)


def format_report(r: ExperimentResult) -> List[str]:
    """
    Full occurrence report, one line per permutation in canonical order.
    """
    lines = [
        f"Method: {r.method}",
        f"All possible permutations count: {len(r.permutations)}",
        f"Trials count: {r.spec.trials}",
        f"Expected average count: {r.expected_average}",
        "",
        "Permutation occurrence",
    ]
    for permutation, count in zip(r.permutations, r.counts):
        d, frac = deviation(count, r.expected_average)
        lines.append(
            f"{format_permutation(permutation)}: {count}, deviation = {d} / {frac:g}"
        )
    lines.append("")
    return lines


def common_y_max(results: List[ExperimentResult]) -> int:
    """
    Largest count across multiple results, for 'same y-axis' bar chart
    comparisons.
    """
    if not results:
        raise ValueError("results must be non-empty")

    ymax = results[0].stats.max
    for r in results[1:]:
        if r.stats.max > ymax:
            ymax = r.stats.max
    return ymax


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{r.method}: min={s.min}, max={s.max}, mean={s.mean:.3f}, std={s.std:.3f}, "
        f"chi2={s.chi_square:.3f} (df={len(r.counts) - 1})"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
