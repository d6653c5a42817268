# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of stack operations. The `push_swap` command prints a sequence of
operations that sorts the input. The `checker` command tells you whether a
given sequence of operations sorts the input.

## Operations

The top of each stack is its first element.

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top becomes the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom becomes the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

A swap or rotation of a stack with fewer than two elements leaves it
unchanged. A push from an empty stack does nothing.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, in one quoted argument separated by
spaces, or as a mix of the two. The first number is the top of stack `a`.

```
$ push_swap 2 1 3
sa
$ push_swap "3 2 1"
sa
rra
```

If the input is already sorted, nothing is printed. Two numbers are sorted
with a swap, three with at most two fixed operations; larger inputs are
moved to `b` and pushed back one at a time, each time choosing the element
that needs the fewest rotations to reach its place in `a`.

An argument is rejected if it is empty, holds anything other than digits,
spaces and signs, has a sign not directly followed by a digit or not at the
start of a number, holds a number longer than 12 characters or outside the
32-bit signed range, or if a number appears twice. Then `Error` is written to
standard error and the exit status is 1.

The checker takes the same arguments, reads operations from standard input,
one per line, and applies them to the numbers. It prints `OK` when `a` ends
sorted and `b` ends empty, and `KO` otherwise. A line that is not exactly one
known operation followed by a newline (including a last line without a
newline) makes it write `Error` to standard error and exit with status 1.

```
$ push_swap 4 67 3 87 23 | checker 4 67 3 87 23
OK
$ printf 'sa\n' | checker 1 2 3
KO
```

Both commands exit quietly with status 0 when given no arguments.

## Library use

```python
from pushswap.sorting import solve
from pushswap.operations import Stacks

ops = solve([5, 1, 4, 2, 3])
stacks = Stacks([5, 1, 4, 2, 3])
for op in ops:
    stacks.apply(op)
assert stacks.is_solved()
```

- `pushswap.operations` has the `Operation` enum, `Stacks` (with `apply`,
  `is_sorted`, `is_solved` and a `history` of applied operations),
  `parse_operation` and `is_ascending`.
- `pushswap.parsing.parse_arguments` turns command-line strings into a list
  of integers and raises `pushswap.parsing.InputError` (a `ValueError`) on
  bad input.
- `pushswap.sorting.solve` returns the list of `Operation`s that sorts the
  values; `sort_two`, `sort_three` and `sort_large` work on a `Stacks`.
- `pushswap.cli.run_checker` applies lines of operations to a list of values
  and returns `True` if they sort it, `False` otherwise; it raises
  `InputError` on an unknown line.