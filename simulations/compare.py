# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import ExperimentResult, common_y_max, format_permutation, format_report, format_stats_line
from .run import run_pair


# Keep the tool intentionally opinionated:
# - the experiment itself is fixed (trial count, sequence, both methods)
# - only the seed, plotting and verbosity are exposed
DEFAULT_TRIALS = 10000
DEFAULT_SEQUENCE = (1, 2, 3, 4)
METHOD_A = "sorting"
METHOD_B = "sorting_unique"


def _plot(results: list[ExperimentResult]) -> None:
    ymax = common_y_max(results)

    plt.figure(figsize=(6 * len(results), 4))

    for i, r in enumerate(results, start=1):
        labels = [format_permutation(p) for p in r.permutations]
        plt.subplot(1, len(results), i)
        plt.bar(range(len(r.counts)), r.counts)
        plt.axhline(r.expected_average, color="red", linestyle="--", linewidth=1)
        plt.xticks(range(len(labels)), labels, rotation=90, fontsize=7)
        plt.title(r.method)
        plt.xlabel("Permutation")
        if i == 1:
            plt.ylabel("Occurrences")
        plt.ylim(0, ymax * 1.05)

    plt.suptitle(
        f"Compare: {' vs '.join(r.method for r in results)}  "
        f"(sequence={list(results[0].spec.sequence)}, trials={results[0].spec.trials})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare permute-by-sorting with and without unique keys against the uniform distribution."
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: seeded from the OS)")
    parser.add_argument("--plot", action="store_true", help="show per-permutation bar charts")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Run both experiments
    ra, rb = run_pair(
        method_a=METHOD_A,
        method_b=METHOD_B,
        sequence=DEFAULT_SEQUENCE,
        trials=DEFAULT_TRIALS,
        seed=args.seed,
    )

    # Print reports
    for r in (ra, rb):
        for line in format_report(r):
            print(line)
        print(format_stats_line(r))
        print()

    if args.plot:
        _plot([ra, rb])

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
