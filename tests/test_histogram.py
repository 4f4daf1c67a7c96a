import io

import pytest

from coin_trials.histogram import (
    MARKER,
    MAX_BAR_LENGTH,
    bar_length,
    merge_frequencies,
    print_histogram,
    render_lines,
    validate_scale,
)


@pytest.mark.parametrize(
    "frequency,scale,expected",
    [
        (0, 1.0, 0),
        (7, 1.0, 7),
        (7, 2.0, 3),
        (8, 2.0, 4),
        (1999, 2000.0, 0),
        (2000, 2000.0, 1),
        (5, 0.5, 10),
        (3, float("inf"), 0),
    ],
)
def test_bar_length_is_floor_of_ratio(frequency, scale, expected):
    assert bar_length(frequency, scale) == expected


@pytest.mark.parametrize("frequency", [0, 1, 2, 3, 17, 1000, 12345])
def test_doubling_scale_halves_bar_with_floor(frequency):
    assert bar_length(frequency, 2.0) == bar_length(frequency, 1.0) // 2
    assert bar_length(frequency, 6.0) == bar_length(frequency, 3.0) // 2


@pytest.mark.parametrize("scale", [0, 0.0, -0.5, -2000.0, float("nan")])
def test_non_positive_scale_is_rejected(scale):
    with pytest.raises(ValueError):
        validate_scale(scale)
    with pytest.raises(ValueError):
        render_lines([1, 2, 3], scale)


def test_negative_frequency_is_rejected():
    with pytest.raises(ValueError):
        bar_length(-1, 1.0)


def test_render_lines_format():
    assert MARKER == "*"
    assert render_lines([0, 4, 9], 2.0) == ["0\t", "1\t**", "2\t****"]


def test_render_lines_empty_table():
    assert render_lines([], 1.0) == []


def test_print_histogram_writes_lines_to_file():
    buf = io.StringIO()
    print_histogram([2, 0, 1], 1.0, file=buf)
    assert buf.getvalue() == "0\t**\n1\t\n2\t*\n"


def test_print_histogram_defaults_to_stdout(capsys):
    print_histogram([3], 1.5)
    assert capsys.readouterr().out == "0\t**\n"


def test_merge_adds_partial_tables():
    merged = merge_frequencies([[1, 2, 3], [0, 5, 1], [4, 0, 0]])
    assert merged == [5, 7, 4]
    assert sum(merged) == 6 + 6 + 4


def test_merge_does_not_modify_inputs():
    first = [1, 1]
    merge_frequencies([first, [2, 2]])
    assert first == [1, 1]


def test_merge_empty_and_mismatched():
    assert merge_frequencies([]) == []
    with pytest.raises(ValueError):
        merge_frequencies([[1, 2], [1, 2, 3]])


@pytest.mark.parametrize("scale", [1e-320, 5e-324])
def test_scale_that_overflows_bar_is_rejected(scale):
    with pytest.raises(ValueError):
        bar_length(1, scale)
    with pytest.raises(ValueError):
        render_lines([1], scale)


def test_bar_longer_than_cap_is_rejected():
    assert bar_length(MAX_BAR_LENGTH, 1.0) == MAX_BAR_LENGTH
    with pytest.raises(ValueError):
        bar_length(1_000_000, 1e-12)


def test_rejected_bar_prints_nothing():
    buf = io.StringIO()
    with pytest.raises(ValueError):
        print_histogram([0, 1], 1e-320, file=buf)
    assert buf.getvalue() == ""
