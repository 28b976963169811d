"""Chunked transfer of stack ``a`` into stack ``b`` by index ranges."""

from __future__ import annotations

from pushswap.operations import Board

_SMALL_STACK_LIMIT = 100
_SMALL_STACK_CHUNKS = 5
_LARGE_STACK_CHUNKS = 11


def get_chunk_count(size: int) -> int:
    """Number of chunks used for a stack of the given size.

    Stacks of up to 100 elements use 5 chunks; larger stacks use 11.
    """
    if size <= _SMALL_STACK_LIMIT:
        return _SMALL_STACK_CHUNKS
    return _LARGE_STACK_CHUNKS


def push_one_chunk(board: Board, lower: int, upper: int, size: int) -> None:
    """Push nodes whose index lies in [lower, upper] from ``a`` to ``b``.

    At most ``size`` moves are tried and at most one chunk's worth pushed.
    """
    limit = size // get_chunk_count(size)
    pushed = 0
    for _ in range(size):
        if pushed >= limit or not len(board.a):
            break
        top = next(iter(board.a))
        if lower <= top.index <= upper:
            board.pb()
            pushed += 1
        else:
            board.ra()


def push_chunks_to_b(board: Board, size: int) -> None:
    """Push every chunk of ``a`` to ``b``, lowest index range first."""
    if not len(board.a):
        return
    count = get_chunk_count(size)
    width = size // count
    for chunk in range(1, count + 1):
        lower = (chunk - 1) * width
        upper = chunk * width - 1
        push_one_chunk(board, lower, upper, size)