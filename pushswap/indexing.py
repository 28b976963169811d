"""Ranking of stack values so each node knows its sorted position."""

from __future__ import annotations

from pushswap.stack import Stack


def stack_to_list(stack: Stack) -> list[int]:
    """Return the stack's numbers from top to bottom."""
    return [node.number for node in stack]


def assign_indexes(stack: Stack) -> list[int]:
    """Set each node's index to its value's rank and return the sorted values."""
    ordered = sorted(stack_to_list(stack))
    ranks: dict[int, int] = {}
    for position, value in enumerate(ordered):
        ranks.setdefault(value, position)
    for node in stack:
        node.index = ranks[node.number]
    return ordered