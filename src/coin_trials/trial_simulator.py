from __future__ import annotations

import logging
import operator
import random
from typing import Callable, List, Optional, TextIO

from .histogram import print_histogram, render_lines


logger = logging.getLogger(__name__)

DrawFn = Callable[[], bool]

# progress is logged this many times over a run
PROGRESS_DIVISIONS = 20


class TrialSimulator:
    """
    TrialSimulator

    Runs num_trials independent trials. Each trial makes
    occurrences_per_trial draws from a fair binary source and counts
    the positive ones ("heads"). The frequency table records, for every
    possible count 0..occurrences_per_trial, how many trials ended with
    exactly that many positives.

    The simulation runs eagerly in the constructor; afterwards the
    table is read-only and print() only renders it:

        sim = TrialSimulator(50, 1_000_000)
        sim.print(2000.0)

    Randomness is injected rather than taken from process-wide state:

      - draw: zero-argument callable returning a bool, consulted once
        per draw. Useful for deterministic tests.
      - seed: seed for a private random.Random. None seeds from OS
        entropy.

    Without draw, a trial takes all of its bits from a single
    getrandbits() call and counts the set bits. Each bit is an
    independent fair draw, so the distribution is unchanged.
    """

    def __init__(
        self,
        occurrences_per_trial: int,
        num_trials: int,
        seed: Optional[int] = None,
        draw: Optional[DrawFn] = None,
    ):
        # operator.index refuses floats instead of truncating them
        occurrences_per_trial = operator.index(occurrences_per_trial)
        num_trials = operator.index(num_trials)
        if occurrences_per_trial < 0:
            raise ValueError("occurrences_per_trial must be >= 0")
        if num_trials < 0:
            raise ValueError("num_trials must be >= 0")

        self.occurrences_per_trial = occurrences_per_trial
        self.num_trials = num_trials
        self._rng = random.Random(seed)
        self._draw = draw

        # _frequencies[k] = number of trials with exactly k positive draws
        self._frequencies: List[int] = [0] * (self.occurrences_per_trial + 1)

        self._simulate()

    # ------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------

    def _simulate(self) -> None:
        logger.info(
            "Simulating %d trials of %d draws.",
            self.num_trials,
            self.occurrences_per_trial,
        )
        progress_step = max(1, self.num_trials // PROGRESS_DIVISIONS)
        for trial in range(1, self.num_trials + 1):
            self._frequencies[self._run_trial()] += 1
            if trial % progress_step == 0:
                logger.debug("Simulated %d/%d trials.", trial, self.num_trials)

    def _run_trial(self) -> int:
        n = self.occurrences_per_trial
        if self._draw is None:
            return bin(self._rng.getrandbits(n)).count("1")

        positives = 0
        for _ in range(n):
            if self._draw():
                positives += 1
        return positives

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------

    def render(self, scale: float = 1.0) -> List[str]:
        return render_lines(self._frequencies, scale)

    def print(self, scale: float = 1.0, file: Optional[TextIO] = None) -> None:
        """
        Write the histogram to stdout (or file). Each bar holds
        floor(frequency / scale) markers; scale must be > 0.
        """
        print_histogram(self._frequencies, scale, file=file)

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def frequencies(self) -> List[int]:
        """
        Return a copy of the frequency table.
        """
        return list(self._frequencies)

    def total_trials(self) -> int:
        return sum(self._frequencies)
