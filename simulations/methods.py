# simulations/methods.py

from __future__ import annotations

import multiprocessing as mp
from typing import Callable, Dict, List, Tuple

from .common import ExperimentSpec, ExperimentResult, Timer

from coin_trials.histogram import merge_frequencies
from coin_trials.trial_simulator import TrialSimulator


SimFn = Callable[[ExperimentSpec, int], ExperimentResult]


def simulate_serial(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    All trials on one TrialSimulator in the current process.
    """
    with Timer() as t:
        sim = TrialSimulator(spec.occurrences, spec.trials, seed=seed)

    return ExperimentResult(
        method="serial",
        spec=spec,
        frequencies=sim.frequencies(),
        runtime_s=t.elapsed_s,
        meta={},
    )


def split_trials(trials: int, workers: int) -> List[int]:
    """
    Share trials out as evenly as possible; the first (trials % workers)
    workers take one extra.
    """
    if workers <= 0:
        raise ValueError("workers must be > 0")
    base, extra = divmod(trials, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def _worker_frequencies(job: Tuple[int, int, int]) -> List[int]:
    occurrences, trials, seed = job
    return TrialSimulator(occurrences, trials, seed=seed).frequencies()


def simulate_parallel(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Trials split across spec.workers processes.

      - Each worker runs a private TrialSimulator with its own seed.
      - Each worker returns its own partial frequency table.
      - The parent adds the partial tables together.

    Workers never share a table, so the merged total is exactly
    spec.trials.
    """
    shares = split_trials(spec.trials, spec.workers)
    jobs = [
        (spec.occurrences, share, seed + 1000 * (i + 1))
        for i, share in enumerate(shares)
    ]

    with Timer() as t:
        with mp.Pool(processes=spec.workers) as pool:
            partials = pool.map(_worker_frequencies, jobs)
        frequencies = merge_frequencies(partials)

    return ExperimentResult(
        method="parallel",
        spec=spec,
        frequencies=frequencies,
        runtime_s=t.elapsed_s,
        meta={"workers": spec.workers, "shares": shares},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function.
METHODS: Dict[str, SimFn] = {
    "serial": simulate_serial,
    "parallel": simulate_parallel,
}
