"""
Fair-coin trial simulation with a text histogram of the outcome counts.

Run the default simulation via:
    python -m coin_trials --occurrences 50 --trials 1000000 --scale 2000
"""

from .histogram import (
    bar_length,
    merge_frequencies,
    print_histogram,
    render_lines,
    validate_scale,
)
from .trial_simulator import TrialSimulator

__all__ = [
    "TrialSimulator",
    "bar_length",
    "merge_frequencies",
    "print_histogram",
    "render_lines",
    "validate_scale",
]
