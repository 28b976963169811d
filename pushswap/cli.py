"""Command-line entry point: index the numbers and push them to ``b`` by chunks."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.indexing import assign_indexes
from pushswap.operations import Board
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import push_chunks_to_b
from pushswap.stack import Stack


def _show(board: Board, title: str) -> None:
    out = board.out
    out.write(f"\n=== {title} ===\n")
    out.write("A: " + board.a.format())
    out.write("B: " + board.b.format())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on the given arguments and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not numbers:
        return 0

    stack_a = Stack(numbers)
    assign_indexes(stack_a)
    board = Board(stack_a, Stack(), sys.stdout)

    _show(board, "Before pushing")
    push_chunks_to_b(board, len(stack_a))
    _show(board, "After pushing")

    stack_a.clear()
    board.b.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())