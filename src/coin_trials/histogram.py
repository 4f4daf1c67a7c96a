from __future__ import annotations

import math
import sys
from typing import Iterable, List, Optional, Sequence, TextIO


MARKER = "*"

# longest bar bar_length will allow; scales that need more raise ValueError
MAX_BAR_LENGTH = 10_000_000


def validate_scale(scale: float) -> float:
    scale = float(scale)
    # "not >" also rejects NaN
    if not scale > 0:
        raise ValueError("scale must be > 0")
    return scale


def bar_length(frequency: int, scale: float) -> int:
    """
    Number of markers drawn for one bucket: floor(frequency / scale).
    """
    scale = validate_scale(scale)
    if frequency < 0:
        raise ValueError("frequency must be >= 0")
    length = frequency / scale
    if not math.isfinite(length) or length > MAX_BAR_LENGTH:
        raise ValueError(
            f"scale {scale!r} too small: bar of {length:g} markers exceeds {MAX_BAR_LENGTH}"
        )
    return math.floor(length)


def render_lines(frequencies: Sequence[int], scale: float = 1.0) -> List[str]:
    """
    Render a frequency table as histogram lines, one per index:

        <index>\\t<markers>

    The scale is validated up front so a bad value never produces
    partial output.
    """
    scale = validate_scale(scale)
    return [
        f"{i}\t{MARKER * bar_length(f, scale)}"
        for i, f in enumerate(frequencies)
    ]


def print_histogram(
    frequencies: Sequence[int],
    scale: float = 1.0,
    file: Optional[TextIO] = None,
) -> None:
    out = file if file is not None else sys.stdout
    for line in render_lines(frequencies, scale):
        print(line, file=out)


def merge_frequencies(tables: Iterable[Sequence[int]]) -> List[int]:
    """
    Add partial frequency tables index by index.

    All tables must cover the same index range; an empty iterable
    merges to an empty table.
    """
    merged: Optional[List[int]] = None
    for table in tables:
        if merged is None:
            merged = list(table)
            continue
        if len(table) != len(merged):
            raise ValueError(
                f"table length mismatch: expected {len(merged)}, got {len(table)}"
            )
        for i, f in enumerate(table):
            merged[i] += f
    return merged if merged is not None else []
