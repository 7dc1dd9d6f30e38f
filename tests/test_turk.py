import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.stack import Machine, Stack
from pushswap.turk import (
    get_cheapest,
    init_nodes_a,
    init_nodes_b,
    prep_for_push,
    set_cheapest,
    solve,
    sort_stacks,
    sort_three,
)


def _replay(values, operations):
    machine = Machine(Stack(values), Stack())
    for operation in operations:
        getattr(machine, operation)()
    return machine


def _node(stack, value):
    return next(node for node in stack if node.value == value)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1, 3], ["sa"]),
        ([3, 1, 2], ["ra"]),
        ([2, 3, 1], ["rra"]),
    ],
)
def test_sort_three_single_moves(values, expected):
    machine = Machine(Stack(values), Stack())
    sort_three(machine)
    assert machine.operations == expected
    assert machine.a.values() == sorted(values)


@pytest.mark.parametrize("values", [[1, 3, 2], [3, 2, 1], [1, 2, 3]])
def test_sort_three_sorts_with_at_most_two_moves(values):
    machine = Machine(Stack(values), Stack())
    sort_three(machine)
    assert machine.a.values() == sorted(values)
    assert len(machine.operations) <= 2


def test_init_nodes_a_targets_and_cheapest():
    a = Stack([5, 1, 8])
    b = Stack([3, 7])
    init_nodes_a(a, b)
    assert _node(a, 5).target is _node(b, 3)
    assert _node(a, 1).target is _node(b, 7)
    assert _node(a, 8).target is _node(b, 7)
    assert _node(a, 5).push_cost == 0
    assert get_cheapest(a) is _node(a, 5)


def test_init_nodes_b_targets():
    a = Stack([2, 6, 9])
    b = Stack([5, 10, 1])
    init_nodes_b(a, b)
    assert _node(b, 5).target is _node(a, 6)
    assert _node(b, 10).target is _node(a, 2)
    assert _node(b, 1).target is _node(a, 2)


def test_set_cheapest_flags_exactly_one():
    stack = Stack([4, 5, 6])
    for node, cost in zip(stack, [3, 1, 1]):
        node.push_cost = cost
    set_cheapest(stack)
    flagged = [node.value for node in stack if node.cheapest]
    assert flagged == [5]
    assert get_cheapest(stack).value == 5


def test_get_cheapest_of_empty_stack_is_none():
    empty = Stack()
    set_cheapest(empty)
    assert get_cheapest(empty) is None


def test_prep_for_push_rotates_upper_half_forward():
    machine = Machine(Stack([1, 2, 3, 4, 5]), Stack())
    machine.a.refresh_positions()
    prep_for_push(machine, _node(machine.a, 2), "a")
    assert machine.a.top().value == 2
    assert machine.operations == ["ra"]


def test_prep_for_push_rotates_lower_half_backward():
    machine = Machine(Stack(), Stack([1, 2, 3, 4, 5]))
    machine.b.refresh_positions()
    prep_for_push(machine, _node(machine.b, 4), "b")
    assert machine.b.top().value == 4
    assert set(machine.operations) == {"rrb"}


def test_prep_for_push_rejects_unknown_stack_name():
    machine = Machine(Stack([1, 2]), Stack())
    with pytest.raises(ValueError):
        prep_for_push(machine, machine.a.top(), "c")


def test_sort_stacks_empties_b():
    machine = Machine(Stack([4, -3, 9, 0, 12, 7, -8]), Stack())
    sort_stacks(machine)
    assert machine.a.values() == [-8, -3, 0, 4, 7, 9, 12]
    assert len(machine.b) == 0


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []


def test_solve_two_numbers_swaps():
    assert solve([2, 1]) == ["sa"]


@settings(max_examples=150, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=40))
def test_solve_sorts_any_input(values):
    machine = _replay(values, solve(values))
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


@settings(max_examples=60, deadline=None)
@given(st.permutations(list(range(3))))
def test_solve_three_within_two_moves(values):
    assert len(solve(values)) <= 2