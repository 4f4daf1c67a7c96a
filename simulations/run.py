# simulations/run.py

from __future__ import annotations

from .common import ExperimentSpec, ExperimentResult
from .methods import get_method


def run_experiment(
    method: str,
    occurrences: int,
    trials: int,
    workers: int = 1,
    seed: int = 42,
) -> ExperimentResult:
    """
    Run a single simulation and return an ExperimentResult.

    Parameters
    ----------
    method:
        Name of the method ('serial' or 'parallel').
    occurrences:
        Coin flips per trial.
    trials:
        Number of trials.
    workers:
        Number of worker processes (the serial method ignores this).
    seed:
        Base RNG seed.

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(occurrences=occurrences, trials=trials, workers=workers)
    fn = get_method(method)
    return fn(spec, seed)


def run_pair(
    method_a: str,
    method_b: str,
    occurrences: int,
    trials: int,
    workers: int = 1,
    seed: int = 42,
):
    """
    Convenience helper: run two methods under the same spec and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(
        method=method_a,
        occurrences=occurrences,
        trials=trials,
        workers=workers,
        seed=seed,
    )
    rb = run_experiment(
        method=method_b,
        occurrences=occurrences,
        trials=trials,
        workers=workers,
        seed=seed,
    )
    return ra, rb
