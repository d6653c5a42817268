"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(Enum):
    """An instruction that rearranges stack ``a``, stack ``b`` or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


def is_ascending(values: Iterable[int]) -> bool:
    """Return True if no value is greater than the one after it."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


def parse_operation(text: str) -> Operation:
    """Return the operation named by an instruction line ending in a newline.

    Raises ValueError for anything that is not exactly one known
    instruction followed by ``\\n``.
    """
    if not text.endswith("\n"):
        raise ValueError(f"invalid instruction: {text!r}")
    try:
        return Operation(text[:-1])
    except ValueError:
        raise ValueError(f"invalid instruction: {text!r}") from None


class Stacks:
    """Stack ``a`` holding the input, an empty stack ``b``, and the
    record of every instruction that was emitted.

    The top of each stack is its first element.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> None:
        """Perform ``op`` and record it.

        A push from an empty stack does nothing and is not recorded;
        every other instruction is recorded even when it changes nothing.
        """
        op = Operation(op)
        if op is Operation.PA:
            if not self.b:
                return
            self.a.appendleft(self.b.popleft())
        elif op is Operation.PB:
            if not self.a:
                return
            self.b.appendleft(self.a.popleft())
        else:
            action, targets = _SINGLE_ACTIONS[op]
            for name in targets:
                action(getattr(self, name))
        self.history.append(op)

    def is_sorted(self) -> bool:
        """Return True if stack ``a`` is in ascending order."""
        return is_ascending(self.a)

    def is_solved(self) -> bool:
        """Return True if ``a`` is ascending and ``b`` is empty."""
        return self.is_sorted() and not self.b


_SINGLE_ACTIONS = {
    Operation.SA: (_swap, ("a",)),
    Operation.SB: (_swap, ("b",)),
    Operation.SS: (_swap, ("a", "b")),
    Operation.RA: (_rotate, ("a",)),
    Operation.RB: (_rotate, ("b",)),
    Operation.RR: (_rotate, ("a", "b")),
    Operation.RRA: (_reverse_rotate, ("a",)),
    Operation.RRB: (_reverse_rotate, ("b",)),
    Operation.RRR: (_reverse_rotate, ("a", "b")),
}