import pytest

from pushswap.operations import Operation, Stacks, is_ascending, parse_operation


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.apply(Operation.SA)
    assert list(s.a) == [2, 1, 3]
    assert s.history == [Operation.SA]


def test_swap_twice_is_identity():
    s = Stacks([5, 9, 4, 7])
    s.apply("sa")
    s.apply("sa")
    assert list(s.a) == [5, 9, 4, 7]


def test_swap_on_short_stack_changes_nothing_but_is_recorded():
    s = Stacks([4])
    s.apply(Operation.SA)
    s.apply(Operation.SB)
    assert list(s.a) == [4]
    assert list(s.b) == []
    assert s.history == [Operation.SA, Operation.SB]


def test_push_moves_top_element():
    s = Stacks([1, 2, 3])
    s.apply(Operation.PB)
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]


def test_pb_then_pa_restores():
    s = Stacks([3, 1, 2])
    s.apply(Operation.PB)
    s.apply(Operation.PB)
    s.apply(Operation.PA)
    s.apply(Operation.PA)
    assert list(s.a) == [3, 1, 2]
    assert not s.b


def test_push_from_empty_is_not_recorded():
    s = Stacks([1, 2])
    s.apply(Operation.PA)
    assert s.history == []
    assert list(s.a) == [1, 2]
    empty = Stacks([])
    empty.apply(Operation.PB)
    assert empty.history == []


def test_rotate_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.apply(Operation.RA)
    assert list(s.a) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.apply(Operation.RRA)
    assert list(s.a) == [3, 1, 2]


def test_rotate_then_reverse_is_identity():
    s = Stacks([8, 6, 7, 5])
    s.apply(Operation.RA)
    s.apply(Operation.RRA)
    assert list(s.a) == [8, 6, 7, 5]


def test_rotate_length_times_is_identity():
    values = [4, 0, 9, 2, 6]
    s = Stacks(values)
    for _ in values:
        s.apply(Operation.RA)
    assert list(s.a) == values


def test_combined_operations_act_on_both():
    s = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        s.apply(Operation.PB)
    before_a, before_b = list(s.a), list(s.b)
    s.apply(Operation.RR)
    s.apply(Operation.RRR)
    s.apply(Operation.SS)
    s.apply(Operation.SS)
    assert list(s.a) == before_a
    assert list(s.b) == before_b
    assert s.history[-4:] == [Operation.RR, Operation.RRR, Operation.SS, Operation.SS]


def test_sorted_and_solved():
    s = Stacks([1, 2, 3])
    assert s.is_sorted()
    assert s.is_solved()
    s.apply(Operation.PB)
    assert s.is_sorted()
    assert not s.is_solved()
    assert not Stacks([2, 1]).is_sorted()


def test_is_ascending():
    assert is_ascending([])
    assert is_ascending([7])
    assert is_ascending([1, 1, 2])
    assert not is_ascending([3, 2])


@pytest.mark.parametrize("op", list(Operation))
def test_parse_operation_round_trip(op):
    assert parse_operation(f"{op}\n") is op


@pytest.mark.parametrize("line", ["sa", "sa \n", "SA\n", "rrx\n", "\n", "pa\n\n"])
def test_parse_operation_rejects(line):
    with pytest.raises(ValueError):
        parse_operation(line)


def test_apply_rejects_unknown_name():
    with pytest.raises(ValueError):
        Stacks([1]).apply("xx")