"""Finding a short instruction sequence that sorts stack ``a``.

Small inputs are handled by fixed rules. Larger ones are moved to stack
``b`` and then pushed back one by one, each time choosing the element that
needs the fewest rotations to land in its place in ``a``.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.operations import Operation, Stacks


def ranks(values: Sequence[int]) -> list[int]:
    """Return each value's position in the sorted order of ``values``.

    Equal values share the rank of their first place in sorted order.
    """
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def find_lowest(indices: Sequence[int]) -> int:
    """Return the position of the smallest rank, or 0 for an empty stack."""
    if not indices:
        return 0
    return min(range(len(indices)), key=indices.__getitem__)


def find_target(a_indices: Sequence[int], index_b: int) -> int:
    """Return where in ``a`` an element of rank ``index_b`` belongs.

    That is the position of the smallest rank in ``a`` greater than
    ``index_b``; if there is none, the position of the smallest rank.
    """
    larger = [pos for pos, rank in enumerate(a_indices) if rank > index_b]
    if not larger:
        return find_lowest(a_indices)
    return min(larger, key=a_indices.__getitem__)


def move_cost(position: int, length: int) -> int:
    """Return the signed number of rotations that bring ``position`` to the top.

    A positive cost means rotating, a negative one reverse rotating.
    """
    if position <= length // 2:
        return position
    return position - length


def sort_two(stacks: Stacks) -> None:
    """Swap the two elements of ``a`` if they are out of order."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of ``a`` with at most two instructions."""
    if len(stacks.a) < 3:
        return
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if second < first < third:
        steps = [Operation.SA]
    elif first > second > third:
        steps = [Operation.SA, Operation.RRA]
    elif first > third and second < third:
        steps = [Operation.RA]
    elif third < first < second:
        steps = [Operation.RRA]
    elif first < third < second:
        steps = [Operation.SA, Operation.RA]
    else:
        steps = []
    for op in steps:
        stacks.apply(op)


def _rotate(stacks: Stacks, cost: int, forward: Operation, backward: Operation) -> None:
    op = forward if cost > 0 else backward
    for _ in range(abs(cost)):
        stacks.apply(op)


def _push_cheapest(stacks: Stacks, rank: dict[int, int]) -> None:
    a_indices = [rank[value] for value in stacks.a]
    len_a, len_b = len(stacks.a), len(stacks.b)
    candidates = [
        (
            move_cost(find_target(a_indices, rank[value]), len_a),
            move_cost(pos, len_b),
        )
        for pos, value in enumerate(stacks.b)
    ]
    cost_a, cost_b = min(candidates, key=lambda costs: abs(costs[0]) + abs(costs[1]))

    while cost_a < 0 and cost_b < 0:
        stacks.apply(Operation.RRR)
        cost_a += 1
        cost_b += 1
    while cost_a > 0 and cost_b > 0:
        stacks.apply(Operation.RR)
        cost_a -= 1
        cost_b -= 1
    _rotate(stacks, cost_a, Operation.RA, Operation.RRA)
    _rotate(stacks, cost_b, Operation.RB, Operation.RRB)
    stacks.apply(Operation.PA)


def _rotate_lowest_to_top(stacks: Stacks, rank: dict[int, int]) -> None:
    lowest = find_lowest([rank[value] for value in stacks.a])
    length = len(stacks.a)
    if lowest > length // 2:
        _rotate(stacks, lowest - length, Operation.RA, Operation.RRA)
    else:
        _rotate(stacks, lowest, Operation.RA, Operation.RRA)


def sort_large(stacks: Stacks) -> None:
    """Sort ``a`` by moving all but three elements to ``b`` and back."""
    values = list(stacks.a) + list(stacks.b)
    rank = dict(zip(values, ranks(values)))

    remaining = len(stacks.a)
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    remaining -= 2
    while remaining > 3:
        stacks.apply(Operation.PB)
        remaining -= 1

    if len(stacks.a) == 3:
        sort_three(stacks)
    elif len(stacks.a) == 2:
        sort_two(stacks)

    while stacks.b:
        _push_cheapest(stacks, rank)
    _rotate_lowest_to_top(stacks, rank)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the instructions that sort ``values`` in stack ``a``."""
    stacks = Stacks(values)
    if stacks.is_solved():
        return []
    if len(stacks.a) == 2:
        stacks.apply(Operation.SA)
    elif len(stacks.a) == 3:
        sort_three(stacks)
    else:
        sort_large(stacks)
    return list(stacks.history)