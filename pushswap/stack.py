"""Singly ended stacks of numbered nodes used by the push-swap board."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a stack: its value, its rank and move costs."""

    number: int
    index: int = 0
    cost_a: int = 0
    cost_b: int = 0


class Stack:
    """An ordered stack whose first element is the top."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(number) for number in numbers)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.numbers()!r})"

    def numbers(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.number for node in self._nodes]

    def push_front(self, node: Node) -> None:
        """Place a node on top of the stack."""
        self._nodes.appendleft(node)

    def push_back(self, node: Node) -> None:
        """Place a node at the bottom of the stack."""
        self._nodes.append(node)

    def pop_front(self) -> Node:
        """Remove and return the top node; raise IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from empty stack")
        return self._nodes.popleft()

    def last(self) -> Optional[Node]:
        """Return the bottom node, or None when empty."""
        return self._nodes[-1] if self._nodes else None

    def before_last(self) -> Optional[Node]:
        """Return the node just above the bottom one.

        A one-element stack yields its only node; an empty one yields None.
        """
        if not self._nodes:
            return None
        if len(self._nodes) == 1:
            return self._nodes[0]
        return self._nodes[-2]

    def swap_top(self) -> None:
        """Exchange the two top elements; do nothing with fewer than two."""
        if len(self._nodes) >= 2:
            first = self._nodes.popleft()
            second = self._nodes.popleft()
            self._nodes.appendleft(first)
            self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._nodes.rotate(1)

    def is_sorted(self) -> bool:
        """True when non-empty and ascending from top to bottom."""
        if not self._nodes:
            return False
        return all(a.number <= b.number for a, b in pairwise(self._nodes))

    def clear(self) -> None:
        """Remove every node."""
        self._nodes.clear()

    def format(self) -> str:
        """Render each node as ``[num: N | idx: I]`` in stack order."""
        return "".join(
            f"[num: {node.number} | idx: {node.index}]" for node in self._nodes
        )