"""Uniform-random legal placement AI for either side."""

from __future__ import annotations

import random
from typing import List, Optional

from ai.base_ai import BaseAI, as_int
from engine.action import Placement
from engine.board import Board, PlaceResult
from engine.pieces import Side
from engine.rules import BOARD_SIZE

INVALID_NAME_CHARS = "[]():; "


def parse_role(role: str) -> Side:
    """Map a role string to a side, rejecting anything but black/white."""
    try:
        return Side(role)
    except ValueError:
        raise ValueError(f"invalid role: {role}") from None


class RandomAI(BaseAI):
    """Shuffle every cell and play the first placement that applies legally."""

    def __init__(self, args: str = "") -> None:
        super().__init__(args)
        self._rng = random.Random(self.meta_value("seed", cast=as_int))
        if any(ch in INVALID_NAME_CHARS for ch in self.name):
            raise ValueError(f"invalid name: {self.name}")
        self.side = parse_role(self.role)
        self.space: List[Placement] = self._build_space(self.meta_value("size", BOARD_SIZE, as_int))

    def _build_space(self, size: int) -> List[Placement]:
        return [Placement(index=index, side=self.side, size=size) for index in range(size * size)]

    def _ensure_space(self, board: Board) -> None:
        if not self.space or self.space[0].size != board.size:
            self.space = self._build_space(board.size)

    def choose_move(self, board: Board) -> Optional[Placement]:
        self._ensure_space(board)
        self._rng.shuffle(self.space)
        for move in self.space:
            after = board.clone()
            if move.apply(after) is PlaceResult.LEGAL:
                return move
        return None
