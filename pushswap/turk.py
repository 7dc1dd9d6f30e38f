"""The "Turk" sorting strategy: cheapest-move insertion between two stacks."""

from __future__ import annotations

from typing import Iterable, Optional

from .stack import Machine, Node, Stack


def _set_target_a(a: Stack, b: Stack) -> None:
    """Give each node of ``a`` its closest smaller node in ``b``, or ``b``'s maximum."""
    for node in a:
        smaller = [candidate for candidate in b if candidate.value < node.value]
        if smaller:
            node.target = max(smaller, key=lambda candidate: candidate.value)
        else:
            node.target = b.find_max()


def _set_target_b(a: Stack, b: Stack) -> None:
    """Give each node of ``b`` its closest bigger node in ``a``, or ``a``'s minimum."""
    for node in b:
        bigger = [candidate for candidate in a if candidate.value > node.value]
        if bigger:
            node.target = min(bigger, key=lambda candidate: candidate.value)
        else:
            node.target = a.find_min()


def _cost_analysis_a(a: Stack, b: Stack) -> None:
    """Count the rotations needed to bring each ``a`` node and its target to the top."""
    len_a = len(a)
    len_b = len(b)
    for node in a:
        node.push_cost = node.index if node.above_median else len_a - node.index
        target = node.target
        if target is None:
            continue
        if target.above_median:
            node.push_cost += target.index
        else:
            node.push_cost += len_b - target.index


def set_cheapest(stack: Stack) -> None:
    """Flag the first node with the lowest push cost as the cheapest one."""
    cheapest: Optional[Node] = None
    for node in stack:
        node.cheapest = False
        if cheapest is None or node.push_cost < cheapest.push_cost:
            cheapest = node
    if cheapest is not None:
        cheapest.cheapest = True


def get_cheapest(stack: Stack) -> Optional[Node]:
    """The first node flagged as cheapest, or None."""
    return next((node for node in stack if node.cheapest), None)


def init_nodes_a(a: Stack, b: Stack) -> None:
    """Prepare every node for moving ``a`` into ``b``."""
    a.refresh_positions()
    b.refresh_positions()
    _set_target_a(a, b)
    _cost_analysis_a(a, b)
    set_cheapest(a)


def init_nodes_b(a: Stack, b: Stack) -> None:
    """Prepare every node for moving ``b`` back into ``a``."""
    a.refresh_positions()
    b.refresh_positions()
    _set_target_b(a, b)


def prep_for_push(machine: Machine, node: Node, stack_name: str) -> None:
    """Rotate stack ``a`` or ``b`` until ``node`` is on top."""
    if stack_name == "a":
        stack, forward, backward = machine.a, machine.ra, machine.rra
    elif stack_name == "b":
        stack, forward, backward = machine.b, machine.rb, machine.rrb
    else:
        raise ValueError(f"unknown stack name: {stack_name!r}")
    if node not in list(stack):
        raise ValueError("node is not in the stack")
    while stack.top() is not node:
        if node.above_median:
            forward()
        else:
            backward()


def sort_three(machine: Machine) -> None:
    """Sort stack ``a`` when it holds three numbers."""
    a = machine.a
    biggest = a.find_max()
    nodes = list(a)
    if biggest is nodes[0]:
        machine.ra()
    elif len(nodes) > 1 and biggest is nodes[1]:
        machine.rra()
    first, second, *_ = list(a)
    if first.value > second.value:
        machine.sa()


def _rotate_both(machine: Machine, cheapest: Node) -> None:
    while machine.b.top() is not cheapest.target and machine.a.top() is not cheapest:
        machine.rr()
    machine.a.refresh_positions()
    machine.b.refresh_positions()


def _reverse_rotate_both(machine: Machine, cheapest: Node) -> None:
    while machine.b.top() is not cheapest.target and machine.a.top() is not cheapest:
        machine.rrr()
    machine.a.refresh_positions()
    machine.b.refresh_positions()


def _move_a_to_b(machine: Machine) -> None:
    cheapest = get_cheapest(machine.a)
    if cheapest is None or cheapest.target is None:
        raise RuntimeError("stacks were not prepared before moving")
    target = cheapest.target
    if cheapest.above_median and target.above_median:
        _rotate_both(machine, cheapest)
    elif not cheapest.above_median and not target.above_median:
        _reverse_rotate_both(machine, cheapest)
    prep_for_push(machine, cheapest, "a")
    prep_for_push(machine, target, "b")
    machine.pb()


def _move_b_to_a(machine: Machine) -> None:
    top = machine.b.top()
    if top is None or top.target is None:
        raise RuntimeError("stacks were not prepared before moving")
    prep_for_push(machine, top.target, "a")
    machine.pa()


def _min_on_top(machine: Machine) -> None:
    a = machine.a
    while True:
        smallest = a.find_min()
        top = a.top()
        if smallest is None or top is None or top.value == smallest.value:
            return
        if smallest.above_median:
            machine.ra()
        else:
            machine.rra()


def sort_stacks(machine: Machine) -> None:
    """Sort stack ``a`` of more than three numbers, using ``b`` as scratch space."""
    a, b = machine.a, machine.b
    remaining = len(a)
    if remaining > 3 and not a.is_sorted():
        machine.pb()
    remaining -= 1
    if remaining > 3 and not a.is_sorted():
        machine.pb()
    remaining -= 1
    while remaining > 3 and not a.is_sorted():
        remaining -= 1
        init_nodes_a(a, b)
        _move_a_to_b(machine)
    sort_three(machine)
    while len(b):
        init_nodes_b(a, b)
        _move_b_to_a(machine)
    a.refresh_positions()
    _min_on_top(machine)


def solve(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values`` (top first) in ascending order."""
    machine = Machine(Stack(values), Stack())
    a = machine.a
    if not a.is_sorted():
        if len(a) == 2:
            machine.sa()
        elif len(a) == 3:
            sort_three(machine)
        else:
            sort_stacks(machine)
    return machine.operations