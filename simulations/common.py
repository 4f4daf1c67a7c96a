# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import math
import time


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Common experiment parameters shared across all simulations.
    """
    occurrences: int  # coin flips per trial
    trials: int
    workers: int = 1  # worker processes (methods may ignore this)

    def __post_init__(self) -> None:
        if self.occurrences < 0:
            raise ValueError("occurrences must be >= 0")
        if self.trials <= 0:
            raise ValueError("trials must be > 0")
        if self.workers <= 0:
            raise ValueError("workers must be > 0")


@dataclass(frozen=True)
class SummaryStats:
    """
    Summary of a frequency table, in terms of heads per trial.
    """
    trials: int
    mean: float
    std: float  # population stddev
    peak: int  # most frequent heads count (lowest on ties)
    min: int  # fewest heads seen in any trial
    max: int  # most heads seen in any trial


def summarize_frequencies(frequencies: Sequence[int]) -> SummaryStats:
    """
    Compute mean/std/peak/min/max of heads per trial from a frequency
    table. Stddev computed via a two-pass method for clarity.
    """
    trials = 0
    for f in frequencies:
        trials += f
    if trials <= 0:
        raise ValueError("frequencies must record at least one trial")

    total = 0
    for k, f in enumerate(frequencies):
        total += k * f
    mean = total / trials

    # population variance
    var_acc = 0.0
    for k, f in enumerate(frequencies):
        d = k - mean
        var_acc += f * d * d
    std = math.sqrt(var_acc / trials)

    peak = 0
    for k, f in enumerate(frequencies):
        if f > frequencies[peak]:
            peak = k

    seen = [k for k, f in enumerate(frequencies) if f > 0]
    return SummaryStats(
        trials=trials, mean=mean, std=std, peak=peak, min=seen[0], max=seen[-1]
    )


def expected_frequencies(occurrences: int, trials: int) -> List[float]:
    """
    Exact binomial expectation for a fair coin:
    trials * C(occurrences, k) / 2**occurrences for k in 0..occurrences.
    """
    if occurrences < 0:
        raise ValueError("occurrences must be >= 0")
    if trials < 0:
        raise ValueError("trials must be >= 0")
    denom = 2 ** occurrences
    return [trials * math.comb(occurrences, k) / denom for k in range(occurrences + 1)]


def tv_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Total variation distance in [0, 1] between two frequency tables,
    each normalised by its own total.
    """
    if len(a) != len(b):
        raise ValueError(f"table length mismatch: {len(a)} vs {len(b)}")
    ta = sum(a)
    tb = sum(b)
    if ta <= 0 or tb <= 0:
        raise ValueError("tables must have a positive total")
    s = 0.0
    for x, y in zip(a, b):
        s += abs(x / ta - y / tb)
    return s / 2.0


@dataclass
class ExperimentResult:
    """
    Common return type for all simulations.
    """
    method: str
    spec: ExperimentSpec
    frequencies: List[int]

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.frequencies) != self.spec.occurrences + 1:
            raise ValueError(
                f"table length mismatch: expected {self.spec.occurrences + 1}, "
                f"got {len(self.frequencies)}"
            )

        # Sanity: frequencies should sum to trials
        expected = self.spec.trials
        actual = 0
        for f in self.frequencies:
            actual += f
        if actual != expected:
            raise ValueError(
                f"frequencies sum mismatch: expected {expected}, got {actual}"
            )

        self.stats = summarize_frequencies(self.frequencies)


class Timer:
    """
    Wall-clock runtime of a trial method, from perf_counter():

        with Timer() as t:
            sim = TrialSimulator(...)
        result.runtime_s = t.elapsed_s

    elapsed_s stays None until the block exits.
    """
    def __init__(self) -> None:
        self._t0 = 0.0
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_s = time.perf_counter() - self._t0


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    tv = tv_distance(r.frequencies, expected_frequencies(r.spec.occurrences, r.spec.trials))
    return (
        f"{r.method}: mean={s.mean:.3f}, std={s.std:.3f}, peak={s.peak}, "
        f"min={s.min}, max={s.max}, tv={tv:.4f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
