"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_arguments
from .sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report invalid input as ``Error``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    if len(numbers) < 2:
        return 0
    for operation in sort_operations(numbers):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())