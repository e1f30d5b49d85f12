"""Placement action for NoGo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from engine.pieces import Side
from engine.rules import BOARD_SIZE, index_to_label, index_to_pos, label_to_index

if TYPE_CHECKING:
    from engine.board import Board, PlaceResult


@dataclass(frozen=True)
class Placement:
    """Put a stone of ``side`` on cell ``index`` (row-major)."""

    index: int
    side: Side
    size: int = BOARD_SIZE

    def apply(self, board: "Board") -> "PlaceResult":
        """Apply to board in place and report legality."""
        return board.place(self.index, self.side)

    @property
    def row(self) -> int:
        return index_to_pos(self.index, self.size)[0]

    @property
    def col(self) -> int:
        return index_to_pos(self.index, self.size)[1]

    @property
    def label(self) -> str:
        return index_to_label(self.index, self.size)

    @classmethod
    def parse(cls, label: str, side: Side, size: int = BOARD_SIZE) -> "Placement":
        return cls(index=label_to_index(label, size), side=side, size=size)

    def __str__(self) -> str:
        return f"{self.side.value}@{self.label}"
