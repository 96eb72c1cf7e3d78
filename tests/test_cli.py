import pytest

from pushswap.cli import main
from pushswap.operations import Board, parse_operation
from pushswap.sorter import sort_operations


def _expected(values):
    return "".join(f"{operation}\n" for operation in sort_operations(values))


def test_prints_operations_for_separate_arguments(capsys):
    assert main(["5", "1", "4", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == _expected([5, 1, 4, 2, 3])
    assert captured.err == ""


def test_single_argument_is_split_on_spaces(capsys):
    main(["3 2 1"])
    assert capsys.readouterr().out == _expected([3, 2, 1])


def test_output_sorts_the_input(capsys):
    values = [12, -3, 40, 7, 0, 25, -18, 9]
    main([str(value) for value in values])
    board = Board(values)
    for line in capsys.readouterr().out.splitlines(keepends=True):
        board.apply(parse_operation(line))
    assert board.is_solved()


def test_sorted_input_prints_nothing(capsys):
    main(["1", "2", "3"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["1", "a"], ["1", "1"], ["1", "2147483648"], ["1 2 x"], ["1", "2-"], ["abc"]],
)
def test_invalid_input_reports_error(capsys, args):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize("args", [[], ["42"], ["99999999999"]])
def test_fewer_than_two_numbers_prints_nothing(capsys, args):
    main(args)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""