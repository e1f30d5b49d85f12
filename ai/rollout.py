"""Random playouts used to score search nodes."""

from __future__ import annotations

import random

from ai.random_ai import RandomAI
from engine.board import Board, PlaceResult
from engine.pieces import Side

SEED_RANGE = 2**31


def build_rollout_policy(side: Side, size: int, rng: random.Random) -> RandomAI:
    """Random policy for one side, seeded from the searching agent's source."""
    seed = rng.randrange(SEED_RANGE)
    return RandomAI(f"name={side.value} role={side.value} size={size} seed={seed}")


def simulate(board: Board, searcher: Side, rng: random.Random) -> bool:
    """Play random moves until a side cannot move; True if searcher wins.

    The side to move on ``board`` starts. A mover with no legal placement
    loses, so the searcher wins exactly when the opponent gets stuck.
    """
    myself = build_rollout_policy(searcher, board.size, rng)
    opponent = build_rollout_policy(searcher.opponent(), board.size, rng)
    state = board.clone()
    my_turn = state.to_move is searcher
    while True:
        mover = myself if my_turn else opponent
        move = mover.choose_move(state)
        if move is None or move.apply(state) is not PlaceResult.LEGAL:
            break
        my_turn = not my_turn
    return not my_turn
