import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import main, push_swap
from pushswap.parsing import InputError
from pushswap.stacks import Stacks


def _replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    return stacks


@settings(max_examples=40)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=80))
def test_push_swap_moves_sort_input(values):
    moves = push_swap([" ".join(str(v) for v in values)])
    stacks = _replay(values, moves)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_push_swap_sorted_input_needs_no_moves():
    assert push_swap(["1 2 3"]) == []


def test_push_swap_accepts_limits_across_arguments():
    args = ["2147483647", "-2147483648", "0"]
    stacks = _replay([2147483647, -2147483648, 0], push_swap(args))
    assert list(stacks.a) == [-2147483648, 0, 2147483647]


def test_push_swap_empty_input():
    assert push_swap(["", "   "]) == []


@pytest.mark.parametrize(
    "args",
    [["1 a"], ["1", "1"], ["2147483648"], ["-2147483649"], ["-"], ["+"], ["1", "2-"]],
)
def test_push_swap_rejects_bad_input(args):
    with pytest.raises(InputError):
        push_swap(args)


def test_main_prints_moves(capsys):
    assert main(["3 2 1"]) == 0
    out = capsys.readouterr().out
    moves = out.splitlines()
    assert out.endswith("\n")
    assert list(_replay([3, 2, 1], moves).a) == [1, 2, 3]


def test_main_reports_error(capsys):
    assert main(["1", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_duplicates_are_errors(capsys):
    assert main(["4 4"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_without_numbers_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""