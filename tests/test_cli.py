import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mergesorts.cli import format_input_line, format_result, read_numbers, run


def _sort_in_place(values):
    values.sort()


def test_read_numbers_reads_count_then_values():
    prompts = io.StringIO()
    numbers = read_numbers(io.StringIO("3\n7 -2\n+5\n"), prompts)
    assert numbers == [7, -2, 5]
    assert prompts.getvalue().count("Enter integer (") == 3


def test_read_numbers_prompts_are_numbered_from_zero():
    prompts = io.StringIO()
    read_numbers(io.StringIO("2 10 20"), prompts)
    assert prompts.getvalue() == "Enter integer (0): Enter integer (1): "


def test_read_numbers_zero_count_gives_empty_list():
    prompts = io.StringIO()
    assert read_numbers(io.StringIO("0\n"), prompts) == []
    assert prompts.getvalue() == ""


def test_read_numbers_ignores_extra_tokens():
    assert read_numbers(io.StringIO("1 4 9 9"), io.StringIO()) == [4]


@pytest.mark.parametrize("text", ["", "   \n", "3 1 2", "x 1", "2 1 abc", "2 1 1.5", "-1"])
def test_read_numbers_rejects_bad_input(text):
    with pytest.raises(ValueError):
        read_numbers(io.StringIO(text), io.StringIO())


def test_format_input_line():
    assert format_input_line([3, 1, 2]) == "3 1 2 \n"


def test_format_result():
    assert format_result([1, 2]) == "Length: 2\n1\t2\t\n"


def test_format_result_empty():
    assert format_result([]).startswith("Length: 0\n")


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=30))
def test_input_line_round_trips_through_read_numbers(values):
    text = f"{len(values)} " + format_input_line(values)
    assert read_numbers(io.StringIO(text), io.StringIO()) == values


def test_run_prints_prompts_echo_and_result():
    out = io.StringIO()
    status = run(_sort_in_place, [], io.StringIO("3\n3 1 2\n"), out)
    assert status == 0
    assert out.getvalue() == (
        "Enter integer (0): Enter integer (1): Enter integer (2): "
        "3 1 2 \nLength: 3\n1\t2\t3\t\n"
    )


def test_run_reports_bad_input(capsys):
    out = io.StringIO()
    status = run(_sort_in_place, [], io.StringIO("2 1 z"), out)
    assert status == 1
    assert "error:" in capsys.readouterr().err
    assert "Length:" not in out.getvalue()


def test_run_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        run(_sort_in_place, ["--bogus"], io.StringIO("0"), io.StringIO())