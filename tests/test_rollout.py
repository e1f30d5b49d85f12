"""
Tests for random playouts.
"""
import random

import pytest

from ai.rollout import build_rollout_policy, simulate
from engine.pieces import Side


@pytest.mark.parametrize("seed", range(5))
def test_opponent_without_first_move_is_a_certain_win(stuck_white_board, seed):
    assert simulate(stuck_white_board, Side.BLACK, random.Random(seed)) is True


@pytest.mark.parametrize("seed", range(5))
def test_searcher_without_move_loses(no_move_board, seed):
    assert simulate(no_move_board, Side.BLACK, random.Random(seed)) is False


def test_corridor_outcomes_are_forced(corridor_board):
    rng = random.Random(0)
    after_middle = corridor_board.clone()
    after_middle.place(1, Side.BLACK)
    after_edge = corridor_board.clone()
    after_edge.place(0, Side.BLACK)
    for _ in range(10):
        assert simulate(after_middle, Side.BLACK, rng) is True
        assert simulate(after_edge, Side.BLACK, rng) is False


def test_rollout_does_not_touch_input_board(small_board):
    before = small_board.clone()
    simulate(small_board, Side.BLACK, random.Random(3))
    assert small_board == before


def test_rollout_is_reproducible_from_searcher_source(small_board):
    first = [simulate(small_board, Side.WHITE, random.Random(11)) for _ in range(3)]
    second = [simulate(small_board, Side.WHITE, random.Random(11)) for _ in range(3)]
    assert first == second


def test_rollout_policy_seed_comes_from_rng():
    policy = build_rollout_policy(Side.WHITE, 5, random.Random(9))
    assert policy.side is Side.WHITE
    assert policy.meta["seed"] == str(random.Random(9).randrange(2**31))
    assert policy.space[0].size == 5
