import random
from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.operations import Board, Operation
from pushswap.sorter import sort_board, sort_operations


def _replay(values, operations):
    board = Board(values)
    for operation in operations:
        board.apply(operation)
    return board


def test_two_numbers_reversed():
    assert sort_operations([2, 1]) == [Operation.RA]


def test_three_numbers_descending():
    assert sort_operations([3, 2, 1]) == [Operation.RA, Operation.SA]


@pytest.mark.parametrize("values", [[], [7], [1, 2], [-5, 0, 9], [1, 2, 3, 4, 5, 6, 7]])
def test_sorted_or_tiny_input_needs_nothing(values):
    assert sort_operations(values) == []


@pytest.mark.parametrize("values", [list(p) for p in permutations([1, 2, 3])])
def test_three_permutations_take_at_most_two_moves(values):
    operations = sort_operations(values)
    assert len(operations) <= 2
    assert _replay(values, operations).is_solved()


@pytest.mark.parametrize("size", [4, 5, 6])
def test_every_permutation_gets_sorted(size):
    for values in permutations(range(size)):
        operations = sort_operations(list(values))
        board = _replay(list(values), operations)
        assert board.is_solved(), values


def test_sort_board_returns_only_new_operations():
    board = Board([4, 1, 3, 2, 5])
    board.apply(Operation.SA)
    before = list(board.history)
    added = sort_board(board)
    assert board.history == before + added
    assert board.is_solved()
    assert board.a.values() == [1, 2, 3, 4, 5]


def test_hundred_numbers_get_sorted():
    values = random.Random(7).sample(range(-500, 500), 100)
    operations = sort_operations(values)
    board = _replay(values, operations)
    assert board.is_solved()
    assert board.a.values() == sorted(values)


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=30))
def test_operations_sort_any_distinct_values(values):
    operations = sort_operations(values)
    board = _replay(values, operations)
    assert board.a.values() == sorted(values)
    assert not board.b