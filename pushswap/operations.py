"""The eleven stack operations and a two-stack board that applies them."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .stack import Stack, from_values


class Operation(Enum):
    """An instruction acting on stack a, stack b or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    PA = "pa"
    PB = "pb"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Read an instruction line.

    A line is accepted when it is a non-empty prefix of an instruction name
    followed by a newline; the first instruction, in declaration order, that
    it matches is chosen. Anything else raises ValueError.
    """
    if text:
        for operation in Operation:
            if (operation.value + "\n").startswith(text):
                return operation
    raise ValueError(f"unknown operation: {text!r}")


class Board:
    """Stack a, filled with the given values, and an empty stack b."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: Stack = from_values(values)
        self.b: Stack = Stack()
        self.history: list[Operation] = []

    def apply(self, operation: Operation) -> None:
        """Carry out ``operation`` and record it in ``history``.

        A push from an empty stack does nothing and is not recorded.
        """
        if operation is Operation.PA:
            if not self.b:
                return
            self.a.push(self.b.pop())
        elif operation is Operation.PB:
            if not self.a:
                return
            self.b.push(self.a.pop())
        else:
            for action in self._ACTIONS[operation]:
                action(self)
        self.history.append(operation)

    def is_solved(self) -> bool:
        """True when a is in ascending order and b is empty."""
        return self.a.is_sorted() and not self.b

    def __repr__(self) -> str:
        return f"Board(a={self.a.values()!r}, b={self.b.values()!r})"

    _ACTIONS = {
        Operation.SA: (lambda board: board.a.swap(),),
        Operation.SB: (lambda board: board.b.swap(),),
        Operation.SS: (lambda board: board.a.swap(), lambda board: board.b.swap()),
        Operation.RA: (lambda board: board.a.rotate(),),
        Operation.RB: (lambda board: board.b.rotate(),),
        Operation.RR: (lambda board: board.a.rotate(), lambda board: board.b.rotate()),
        Operation.RRA: (lambda board: board.a.reverse_rotate(),),
        Operation.RRB: (lambda board: board.b.reverse_rotate(),),
        Operation.RRR: (
            lambda board: board.a.reverse_rotate(),
            lambda board: board.b.reverse_rotate(),
        ),
    }