# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
instructions. The package prints an instruction sequence that sorts the
numbers, and can check whether a given sequence really sorts them.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element becomes the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element becomes the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

A swap on a stack with fewer than two elements, a rotation of an empty stack
and a push from an empty stack do nothing.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

Numbers are given as separate arguments, or as a single argument separated by
spaces. The first number is the top of stack `a`.

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

`push_swap` prints one instruction per line. It prints nothing when the
numbers are already sorted or when fewer than two numbers are given. Input
that is not a list of distinct 32-bit integers makes it print `Error` on
standard error.

Up to three numbers are sorted directly on `a`; larger inputs move all but
three numbers to `b` (in chunks of rank when there are more than five) and
insert them back, cheapest move first, before rotating the smallest number to
the top.

To check a sequence, feed the instructions to `checker` on standard input,
one per line:

```
push_swap 5 1 4 2 3 | checker 5 1 4 2 3
```

`checker` reads all of standard input, then prints `OK` when stack `a` ends
sorted and stack `b` ends empty, and `KO` otherwise. It prints `Error` on
standard error when the numbers are invalid or when any line is not an
instruction. A line is accepted when it is a non-empty beginning of an
instruction name followed by a newline; the first match in the table order
above is taken. With a single number it prints `OK` without reading input.

Both commands exit with status 0 in every case.

## Library

```python
from pushswap.sorter import sort_operations
from pushswap.checker import check
from pushswap.operations import Board, parse_operation

ops = sort_operations([3, 2, 1])
print([str(op) for op in ops])
print(check([3, 2, 1], [f"{op}\n" for op in ops]))   # True

board = Board([2, 1])
board.apply(parse_operation("sa"))
print(board.is_solved())                              # True
print(board.history)
```

- `pushswap.stack`: `Stack`, a stack of `Item` objects (value, rank `index`,
  position `pos`) with `push`, `pop`, `swap`, `rotate`, `reverse_rotate`,
  `is_sorted` and `values`; `from_values` builds a ranked stack.
- `pushswap.operations`: the `Operation` enum, `parse_operation`, and
  `Board`, which holds stacks `a` and `b` and records every applied
  operation in `history`.
- `pushswap.sorter`: `sort_board` sorts a board in place and returns the
  operations it used; `sort_operations` does the same for a list of values.
- `pushswap.parsing`: `parse_arguments` validates command-line style
  arguments and raises `InputError` on bad input; `parse_long` and
  `parse_int` read a leading integer the way the commands do.
- `pushswap.checker`: `read_operations` and `check`, and the `main` of the
  `checker` command; `pushswap.cli.main` is the `push_swap` command.