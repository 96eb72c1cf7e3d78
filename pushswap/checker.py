"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .operations import Board, Operation, parse_operation
from .parsing import INT_MAX, INT_MIN, InputError, parse_arguments


def read_operations(stream: Iterable[str]) -> list[Operation]:
    """Read every line of ``stream`` as an operation.

    All lines are consumed; if any of them is not an operation, InputError
    is raised and none is returned.
    """
    operations: list[Operation] = []
    valid = True
    for line in stream:
        try:
            operations.append(parse_operation(line))
        except ValueError:
            valid = False
    if not valid:
        raise InputError()
    return operations


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the operations in ``lines`` to ``values``; True if sorted."""
    board = Board(values)
    for operation in read_operations(lines):
        board.apply(operation)
    return board.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    if not args:
        return 0
    if len(numbers) < 2:
        if INT_MIN <= numbers[0] <= INT_MAX:
            print("OK")
        else:
            print("Error", file=sys.stderr)
        return 0
    try:
        solved = check(numbers, sys.stdin)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())