"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_WIDTH = 11

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_ALLOWED = re.compile(r"[0-9 +-]*")


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read a leading integer: whitespace, one optional sign, then digits.

    Reading stops at the first other character; no digits gives 0.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def parse_int(text: str) -> int:
    """Like parse_long, wrapped to a signed 32-bit integer."""
    value = parse_long(text)
    return (value - INT_MIN) % 2**32 + INT_MIN


def _has_valid_characters(word: str) -> bool:
    return bool(_ALLOWED.fullmatch(word)) and not any(
        char in "+-" for char in word[1:]
    )


def _validate(words: list[str]) -> list[int]:
    for word in words:
        if len(word) > _MAX_WIDTH:
            raise InputError()
        value = parse_long(word)
        if value == 0 and (len(word) > 2 or not word.startswith("0")):
            raise InputError()
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
    numbers = [parse_int(word) for word in words]
    if len(set(numbers)) != len(numbers):
        raise InputError()
    if not all(_has_valid_characters(word) for word in words):
        raise InputError()
    return numbers


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the numbers for stack a, top first.

    Several arguments are each one number. A single argument is split on
    spaces; when it holds fewer than two numbers, the whole argument is
    returned as one value read by parse_long, without the range check, so
    that callers can treat that case apart. No arguments give an empty list.
    Invalid input raises InputError.
    """
    args = list(args)
    if not args:
        return []
    if len(args) > 1:
        return _validate(args)
    words = [word for word in args[0].split(" ") if word]
    if len(words) > 1:
        return _validate(words)
    if not all(_has_valid_characters(word) for word in words):
        raise InputError()
    return [parse_long(args[0])]