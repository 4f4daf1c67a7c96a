from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Final, List, Optional

from .histogram import validate_scale
from .trial_simulator import TrialSimulator


@dataclass(frozen=True)
class SimulationDefaults:
    OCCURRENCES_PER_TRIAL: Final[int] = 50
    NUM_TRIALS: Final[int] = 1_000_000
    SCALE: Final[float] = 2000.0
    LOG_FORMAT: Final[str] = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coin-trials",
        description="Flip a fair coin in repeated trials and print a histogram of heads per trial.",
    )
    parser.add_argument(
        "--occurrences",
        type=int,
        default=SimulationDefaults.OCCURRENCES_PER_TRIAL,
        help="coin flips per trial",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=SimulationDefaults.NUM_TRIALS,
        help="number of trials",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=SimulationDefaults.SCALE,
        help="trials per printed marker",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format=SimulationDefaults.LOG_FORMAT)
    args = build_parser().parse_args(argv)

    try:
        # reject a bad scale before spending time on the simulation
        validate_scale(args.scale)
        sim = TrialSimulator(args.occurrences, args.trials)
        sim.print(args.scale)
    except ValueError as e:
        logging.error(f"Invalid configuration: {e}.")
        return 1
    except Exception as e:
        logging.exception(f"Fatal error: {e}.")
        raise

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
