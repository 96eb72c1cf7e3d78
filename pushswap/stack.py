"""Circular stacks of ranked items, with the top of the stack first."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class Item:
    """One number on a stack.

    ``index`` is the item's rank among all the numbers it was created with
    (-1 until ranked) and ``pos`` its distance from the top of the stack it
    currently sits on.
    """

    value: int
    index: int = -1
    pos: int = 0


class Stack:
    """A stack whose top is the first item; rotations wrap around."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: deque[Item] = deque(items)
        self._renumber()

    def _renumber(self) -> None:
        for position, item in enumerate(self._items):
            item.pos = position

    def push(self, item: Item) -> None:
        """Put ``item`` on top of the stack."""
        self._items.appendleft(item)
        self._renumber()

    def pop(self) -> Item:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        item = self._items.popleft()
        self._renumber()
        return item

    def swap(self) -> None:
        """Exchange the two top items; does nothing with fewer than two."""
        if len(self._items) > 1:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.extendleft((first, second))
            self._renumber()

    def rotate(self) -> None:
        """Move the top item to the bottom."""
        if self._items:
            self._items.rotate(-1)
            self._renumber()

    def reverse_rotate(self) -> None:
        """Move the bottom item to the top."""
        if self._items:
            self._items.rotate(1)
            self._renumber()

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        values = self.values()
        return all(upper <= lower for upper, lower in zip(values, values[1:]))

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [item.value for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"


def from_values(values: Iterable[int]) -> Stack:
    """Build a stack with the first value on top and every item ranked.

    Equal values are ranked in the order they appear from the top.
    """
    items = [Item(value) for value in values]
    for rank, item in enumerate(sorted(items, key=lambda it: it.value)):
        item.index = rank
    return Stack(items)