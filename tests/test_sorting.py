import io
import random

import pytest

from pushswap.indexing import assign_indexes
from pushswap.operations import Board
from pushswap.sorting import get_chunk_count, push_chunks_to_b, push_one_chunk
from pushswap.stack import Stack


def make_board(numbers):
    stack = Stack(numbers)
    assign_indexes(stack)
    return Board(stack, Stack(), io.StringIO())


@pytest.mark.parametrize("size,expected", [(0, 5), (5, 5), (100, 5), (101, 11), (500, 11)])
def test_get_chunk_count(size, expected):
    assert get_chunk_count(size) == expected


def test_small_stack_pushes_nothing():
    board = make_board([3, 1, 2])
    push_chunks_to_b(board, 3)
    assert board.a.numbers() == [3, 1, 2]
    assert len(board.b) == 0
    assert board.moves == []


def test_empty_stack_does_nothing():
    board = make_board([])
    push_chunks_to_b(board, 0)
    assert board.moves == []


def test_push_one_chunk_moves_only_range():
    board = make_board(list(range(10, 0, -1)))
    push_one_chunk(board, 0, 1, 10)
    assert sorted(n.index for n in board.b) == [0, 1]
    assert board.moves.count("pb") == 2
    assert set(board.moves) <= {"pb", "ra"}


def test_ten_elements_all_pushed_in_chunk_order():
    values = [42, -7, 13, 0, 99, 5, -20, 8, 77, 3]
    board = make_board(values)
    push_chunks_to_b(board, len(values))
    assert len(board.a) == 0
    assert sorted(board.b.numbers()) == sorted(values)
    chunk_ids = [n.index // 2 for n in board.b]
    assert chunk_ids == sorted(chunk_ids, reverse=True)


def test_remainder_stays_in_a():
    values = list(range(12))
    random.Random(1).shuffle(values)
    board = make_board(values)
    push_chunks_to_b(board, 12)
    assert sorted(n.index for n in board.a) == [10, 11]
    assert sorted(n.index for n in board.b) == list(range(10))


def test_output_matches_moves():
    values = list(range(20))
    random.Random(7).shuffle(values)
    board = make_board(values)
    push_chunks_to_b(board, 20)
    assert board.out.getvalue().splitlines() == board.moves
    assert board.moves.count("pb") == len(board.b)
    assert set(board.moves) <= {"pb", "ra"}