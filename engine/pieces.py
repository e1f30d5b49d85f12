"""Stone and side definitions for NoGo."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict


class Side(str, Enum):
    """Player side. Black moves first."""

    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def stone(self) -> "Stone":
        return SIDE_STONE[self]


class Stone(IntEnum):
    """Cell contents as stored in the board grid."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2
    HOLLOW = 3  # blocked cell, never playable


SIDE_STONE: Dict[Side, Stone] = {
    Side.BLACK: Stone.BLACK,
    Side.WHITE: Stone.WHITE,
}

STONE_SYMBOL: Dict[Stone, str] = {
    Stone.EMPTY: ".",
    Stone.BLACK: "x",
    Stone.WHITE: "o",
    Stone.HOLLOW: "#",
}

SYMBOL_STONE: Dict[str, Stone] = {symbol: stone for stone, symbol in STONE_SYMBOL.items()}
