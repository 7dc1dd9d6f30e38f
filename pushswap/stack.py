"""Stacks of numbered nodes and the machine that applies push_swap operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A number in a stack, with the bookkeeping the sorting algorithm needs."""

    value: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Optional["Node"] = None


class Stack:
    """A stack of nodes, top first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """The numbers in the stack, from top to bottom."""
        return [node.value for node in self._nodes]

    def top(self) -> Optional[Node]:
        """The top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def last(self) -> Optional[Node]:
        """The bottom node, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def is_sorted(self) -> bool:
        """True when the numbers ascend from top to bottom; an empty stack is sorted."""
        values = self.values()
        return all(lower <= upper for lower, upper in zip(values, values[1:]))

    def find_min(self) -> Optional[Node]:
        """The first node holding the smallest number, or None when empty."""
        return min(self._nodes, key=lambda node: node.value, default=None)

    def find_max(self) -> Optional[Node]:
        """The first node holding the biggest number, or None when empty."""
        return max(self._nodes, key=lambda node: node.value, default=None)

    def refresh_positions(self) -> None:
        """Set each node's index and whether it lies in the upper half of the stack."""
        median = len(self._nodes) // 2
        for position, node in enumerate(self._nodes):
            node.index = position
            node.above_median = position <= median

    def push_onto(self, other: "Stack") -> None:
        """Move the top node of this stack onto the top of ``other``."""
        if self._nodes:
            other._nodes.appendleft(self._nodes.popleft())

    def swap(self) -> None:
        """Exchange the two top nodes."""
        if len(self._nodes) >= 2:
            first = self._nodes.popleft()
            second = self._nodes.popleft()
            self._nodes.appendleft(first)
            self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        self._nodes.rotate(1)


class Machine:
    """Two stacks and the record of the operations applied to them."""

    def __init__(self, a: Stack, b: Stack) -> None:
        self.a = a
        self.b = b
        self.operations: list[str] = []

    def sa(self) -> None:
        self.a.swap()
        self.operations.append("sa")

    def sb(self) -> None:
        self.b.swap()
        self.operations.append("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self.operations.append("ss")

    def ra(self) -> None:
        self.a.rotate()
        self.operations.append("ra")

    def rb(self) -> None:
        self.b.rotate()
        self.operations.append("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self.operations.append("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self.operations.append("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self.operations.append("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self.operations.append("rrr")

    def pa(self) -> None:
        """Push the top of ``b`` onto ``a``."""
        self.b.push_onto(self.a)
        self.operations.append("pa")

    def pb(self) -> None:
        """Push the top of ``a`` onto ``b``."""
        self.a.push_onto(self.b)
        self.operations.append("pb")