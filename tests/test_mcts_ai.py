"""
Tests for the Monte-Carlo tree search agent.
"""
import logging

import pytest

from ai.mcts_ai import DEFAULT_SIMULATIONS, MCTSAI, TreeMode
from engine.action import Placement
from engine.board import PlaceResult
from engine.pieces import Side


def test_defaults():
    agent = MCTSAI("role=black")
    assert agent.simulations == DEFAULT_SIMULATIONS == 100
    assert agent.tree_mode is TreeMode.FLAT


def test_no_legal_move_returns_none_without_iterating(no_move_board):
    agent = MCTSAI("role=black seed=1 simulations=50")
    assert agent.choose_move(no_move_board) is None
    assert agent.last_iterations == 0


def test_wrong_side_to_move_returns_none(empty_board):
    agent = MCTSAI("role=white seed=1 simulations=5")
    assert agent.choose_move(empty_board) is None


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_single_legal_move_is_deterministic(single_move_board, seed):
    agent = MCTSAI(f"role=black seed={seed} simulations=10")
    moves = {agent.choose_move(single_move_board) for _ in range(3)}
    assert moves == {Placement(1, Side.BLACK)}
    assert agent.last_iterations == 10


@pytest.mark.parametrize("mode", ["flat", "recursive"])
def test_finds_the_only_winning_placement(corridor_board, mode):
    agent = MCTSAI(f"role=black seed=4 simulations=12 tree={mode}")
    move = agent.choose_move(corridor_board)
    assert move == Placement(1, Side.BLACK, size=3)


@pytest.mark.parametrize("mode", ["flat", "recursive"])
def test_returns_legal_move_and_leaves_board_untouched(small_board, mode):
    agent = MCTSAI(f"role=black seed=8 simulations=30 tree={mode}")
    before = small_board.clone()
    move = agent.choose_move(small_board)
    assert small_board == before
    assert move is not None
    assert move.side is Side.BLACK
    assert move.apply(small_board) is PlaceResult.LEGAL


def test_same_seed_same_decision(small_board):
    first = MCTSAI("role=black seed=21 simulations=25")
    second = MCTSAI("role=black seed=21 simulations=25")
    assert first.choose_move(small_board) == second.choose_move(small_board)


def test_plays_as_white(small_board):
    small_board.place(12, Side.BLACK)
    agent = MCTSAI("role=white seed=3 simulations=20 tree=recursive")
    move = agent.choose_move(small_board)
    assert move is not None and move.side is Side.WHITE
    assert small_board.is_legal(move.index, Side.WHITE)


@pytest.mark.parametrize("args", ["role=black tree=deep", "role=black simulations=-1"])
def test_invalid_search_settings(args):
    with pytest.raises(ValueError):
        MCTSAI(args)


def test_debug_diagnostics_are_logged(corridor_board, caplog):
    caplog.set_level(logging.DEBUG, logger="ai.mcts_ai")
    agent = MCTSAI("name=dbg role=black seed=2 simulations=6 debug_top_k=2")
    agent.choose_move(corridor_board)
    assert "Candidate #1" in caplog.text
    assert "Candidate #3" not in caplog.text
    assert "after 6 iterations" in caplog.text
