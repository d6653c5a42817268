"""Command-line entry points: the sorter and the instruction checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.operations import Stacks, parse_operation
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` one at a time, newline included.

    A final line without a newline is yielded as it is. Reading stops at
    the end of the stream or on a read error.
    """
    while True:
        try:
            line = stream.readline()
        except OSError:
            return
        if not line:
            return
        yield line


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each instruction line to a stack holding ``values``.

    Returns True if ``a`` ends up ascending with ``b`` empty. Lines are
    consumed one at a time; the first one that is not a known instruction
    followed by a newline raises InputError and nothing after it is read.
    """
    stacks = Stacks(values)
    for line in lines:
        try:
            op = parse_operation(line)
        except ValueError as exc:
            raise InputError() from exc
        stacks.apply(op)
    return stacks.is_solved()


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 1


def push_swap_main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the given integers, one per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        return _report_error()
    ops = solve(values)
    sys.stdout.write("".join(f"{op}\n" for op in ops))
    sys.stdout.flush()
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK if they sort the
    given integers, KO otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        solved = run_checker(values, read_lines(sys.stdin))
    except InputError:
        return _report_error()
    sys.stdout.write("OK\n" if solved else "KO\n")
    sys.stdout.flush()
    return 0