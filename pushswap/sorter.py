"""Sorting stack a with the fewest practical operations.

Up to three numbers are sorted in place. Up to five, all but three are
pushed to b. Larger inputs push everything but three to b in chunks of
rank. The numbers left on b are then inserted back into a one at a time,
cheapest move first, and a is finally rotated so its minimum is on top.
"""

from __future__ import annotations

from itertools import cycle, islice
from typing import Iterable

from .operations import Board, Operation
from .stack import Item, Stack

_COST_CEILING = 1000


def _repeat(board: Board, operation: Operation, count: int) -> None:
    for _ in range(count):
        board.apply(operation)


def _max_item(stack: Stack) -> Item:
    return max(stack, key=lambda item: item.value)


def _min_item(stack: Stack) -> Item:
    return min(stack, key=lambda item: item.value)


def _top(stack: Stack) -> Item:
    return next(iter(stack))


def _insert_position(stack: Stack, item: Item) -> int:
    """Position in ``stack`` of the item that ``item`` should land on."""
    successor = _max_item(stack)
    if item.value > successor.value:
        return _min_item(stack).pos
    for candidate in stack:
        if item.value <= candidate.value <= successor.value:
            successor = candidate
    return successor.pos


def _sort_three(board: Board) -> None:
    a = board.a
    items = list(a)
    largest = _max_item(a)
    if largest is items[0]:
        board.apply(Operation.RA)
        if not a.is_sorted():
            board.apply(Operation.SA)
    elif largest is items[-1]:
        if not a.is_sorted():
            board.apply(Operation.SA)
    elif not a.is_sorted():
        board.apply(Operation.RRA)
        if not a.is_sorted():
            board.apply(Operation.SA)


def _bring_min_to_top(board: Board) -> None:
    position = _min_item(board.a).pos
    size = len(board.a)
    if size > 2 * position:
        _repeat(board, Operation.RA, position)
    else:
        _repeat(board, Operation.RRA, size - position)


def _insert_top_of_b(board: Board) -> None:
    a = board.a
    incoming = _top(board.b)
    if incoming.value > _max_item(a).value:
        _bring_min_to_top(board)
        board.apply(Operation.PA)
        board.apply(Operation.RA)
        return
    position = _insert_position(a, incoming)
    size = len(a)
    if size > 2 * position:
        _repeat(board, Operation.RA, position)
    else:
        _repeat(board, Operation.RRA, size - position)
    board.apply(Operation.PA)


def _move_cost(board: Board, a_position: int, b_position: int) -> int:
    size_a, size_b = len(board.a), len(board.b)
    if 2 * a_position > size_a:
        a_position = size_a - a_position
    if 2 * b_position > size_b:
        b_position = size_b - b_position
    return a_position + b_position


def _cheapest(board: Board) -> Item:
    best_cost = _COST_CEILING
    best = _top(board.b)
    for item in list(board.b):
        cost = _move_cost(board, _insert_position(board.a, item), item.pos)
        if cost < best_cost:
            best_cost, best = cost, item
    return best


def _shared_rotations(board: Board, item: Item) -> int:
    position = _insert_position(board.a, item)
    ra = position if 2 * position < len(board.a) else 0
    rb = item.pos if 2 * item.pos < len(board.b) else 0
    return min(ra, rb) if ra and rb else 0


def _shared_reverse_rotations(board: Board, item: Item) -> int:
    size_a, size_b = len(board.a), len(board.b)
    position = _insert_position(board.a, item)
    rra = size_a - position if 2 * position >= size_a else 0
    rrb = size_b - item.pos if 2 * item.pos >= size_b else 0
    return min(rra, rrb) if rra and rrb else 0


def _bring_to_top_of_b(board: Board, item: Item) -> None:
    position = item.pos
    size = len(board.b)
    if size > 2 * position:
        _repeat(board, Operation.RB, position)
    else:
        _repeat(board, Operation.RRB, size - position)


def _insert_all(board: Board) -> None:
    while board.b:
        item = _cheapest(board)
        _repeat(board, Operation.RR, _shared_rotations(board, item))
        _repeat(board, Operation.RRR, _shared_reverse_rotations(board, item))
        _bring_to_top_of_b(board, item)
        _insert_top_of_b(board)


def _find_from_top(stack: Stack) -> Item | None:
    limit = _max_item(stack).index + 1
    for item in islice(cycle(list(stack)), limit):
        if item.index < limit - 3:
            return item
    return None


def _find_from_bottom(stack: Stack) -> Item | None:
    limit = _max_item(stack).index + 1
    for item in reversed(list(stack)):
        if item.index < limit - 3:
            return item
    return None


def _push_chunks(board: Board) -> None:
    a = board.a
    while len(a) > 3:
        highest = _find_from_top(a)
        lowest = _find_from_bottom(a)
        if highest is None or lowest is None:
            break
        if 2 * highest.pos < len(a):
            _repeat(board, Operation.RA, highest.pos)
        else:
            _repeat(board, Operation.RRA, lowest.pos)
        board.apply(Operation.PB)
        if 2 * _top(board.b).index < _max_item(a).index + 1:
            board.apply(Operation.RB)


def sort_board(board: Board) -> list[Operation]:
    """Sort stack a of ``board`` in place and return the operations used."""
    start = len(board.history)
    a = board.a
    if len(a) < 2 or a.is_sorted():
        return []
    size = len(a)
    if size <= 3:
        _sort_three(board)
    else:
        if size <= 5:
            while len(a) > 3:
                board.apply(Operation.PB)
        else:
            _push_chunks(board)
        _sort_three(board)
        _insert_all(board)
        _bring_min_to_top(board)
    return board.history[start:]


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values`` (first value on top of a)."""
    return sort_board(Board(values))