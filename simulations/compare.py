# simulations/compare.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from .common import expected_frequencies, format_stats_line
from .run import run_pair


# Seed is fixed unless you edit the file, so reruns are comparable.
DEFAULT_SEED = 42


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two trial methods via Monte Carlo (same axes, exact binomial overlaid)."
    )
    parser.add_argument("--method-a", required=True, help="serial | parallel")
    parser.add_argument("--method-b", required=True, help="serial | parallel")
    parser.add_argument("--occurrences", type=int, required=True, help="coin flips per trial")
    parser.add_argument("--trials", type=int, required=True, help="number of trials")
    parser.add_argument("--workers", type=int, default=1, help="worker processes for 'parallel'")

    args = parser.parse_args(argv)

    ra, rb = run_pair(
        method_a=args.method_a,
        method_b=args.method_b,
        occurrences=args.occurrences,
        trials=args.trials,
        workers=args.workers,
        seed=DEFAULT_SEED,
    )

    # Print stats
    print(format_stats_line(ra))
    print(format_stats_line(rb))

    xs = list(range(args.occurrences + 1))
    expected = expected_frequencies(args.occurrences, args.trials)
    ymax = max(max(ra.frequencies), max(rb.frequencies), max(expected))

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.bar(xs, ra.frequencies)
    plt.plot(xs, expected, color="black", linewidth=1)
    plt.title(ra.method)
    plt.xlabel("Heads per trial")
    plt.ylabel("Number of trials")
    plt.ylim(0, ymax * 1.05)

    plt.subplot(1, 2, 2)
    plt.bar(xs, rb.frequencies)
    plt.plot(xs, expected, color="black", linewidth=1)
    plt.title(rb.method)
    plt.xlabel("Heads per trial")
    plt.ylim(0, ymax * 1.05)

    plt.suptitle(
        f"Compare: {ra.method} vs {rb.method}  "
        f"(occurrences={args.occurrences}, trials={args.trials}, workers={args.workers})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
