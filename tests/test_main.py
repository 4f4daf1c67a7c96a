import os
import subprocess
import sys
from pathlib import Path

import pytest

from coin_trials.__main__ import SimulationDefaults, build_parser, main


def test_defaults_match_illustrative_run():
    args = build_parser().parse_args([])
    assert args.occurrences == SimulationDefaults.OCCURRENCES_PER_TRIAL == 50
    assert args.trials == SimulationDefaults.NUM_TRIALS == 1_000_000
    assert args.scale == SimulationDefaults.SCALE == 2000.0


def test_main_prints_histogram_only(capsys):
    assert main(["--occurrences", "4", "--trials", "100", "--scale", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["0", "1", "2", "3", "4"]
    assert sum(len(line.split("\t")[1]) for line in lines) == 100
    assert all(set(line.split("\t")[1]) <= {"*"} for line in lines)


def test_main_zero_occurrences(capsys):
    assert main(["--occurrences", "0", "--trials", "5", "--scale", "1"]) == 0
    assert capsys.readouterr().out == "0\t*****\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["--scale", "0", "--trials", "10"],
        ["--scale", "-2000", "--trials", "10"],
        ["--trials", "-1"],
        ["--occurrences", "-5", "--trials", "10"],
    ],
)
def test_main_rejects_invalid_configuration(capsys, argv):
    assert main(argv) == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_non_integer_counts():
    with pytest.raises(SystemExit) as exc:
        main(["--trials", "ten"])
    assert exc.value.code != 0


def test_main_rejects_scale_too_small_for_bars(capsys):
    argv = ["--occurrences", "1", "--trials", "3", "--scale", "1e-320"]
    assert main(argv) == 1
    assert capsys.readouterr().out == ""


def test_logs_go_to_stderr_and_histogram_to_stdout():
    root = Path(__file__).resolve().parents[1]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(root / "src"), env.get("PYTHONPATH", "")] if p
    )
    proc = subprocess.run(
        [sys.executable, "-m", "coin_trials", "--trials", "10", "--occurrences", "2", "--scale", "1"],
        capture_output=True,
        text=True,
        env=env,
        cwd=str(root),
        check=False,
    )
    assert proc.returncode == 0
    assert "INFO: Simulating 10 trials of 2 draws." in proc.stderr
    assert "INFO" not in proc.stdout

    lines = proc.stdout.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["0", "1", "2"]
    assert sum(len(line.split("\t")[1]) for line in lines) == 10
