"""
Pytest configuration and shared board fixtures.
"""
import random

import pytest

from engine.board import Board
from engine.pieces import Side

HOLLOW_ROW = "#########"


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def small_board():
    """Empty 5x5 board, big enough for full games and quick to search."""
    return Board(size=5)


@pytest.fixture
def single_move_board():
    """Black to move with exactly one legal placement, B1 (index 1).

    A1 would take the last liberty of the white stone at A2.
    """
    rows = [".." + "#" * 7, "o" + "#" * 8] + [HOLLOW_ROW] * 7
    return Board.from_rows(rows, to_move=Side.BLACK)


@pytest.fixture
def stuck_white_board(single_move_board):
    """single_move_board after black B1: white has no legal placement."""
    board = single_move_board.clone()
    board.place(1, Side.BLACK)
    return board


@pytest.fixture
def no_move_board():
    """Black to move; the only empty cell would be suicide."""
    rows = ["." + "#" * 8] + [HOLLOW_ROW] * 8
    return Board.from_rows(rows, to_move=Side.BLACK)


@pytest.fixture
def corridor_board():
    """Three empty cells in a row; only the middle one wins for black."""
    return Board.from_rows(["...", "###", "###"], to_move=Side.BLACK)
