"""NoGo board state, placement legality, and terminal detection."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from engine.pieces import STONE_SYMBOL, SYMBOL_STONE, Side, Stone
from engine.rules import BOARD_SIZE, COLUMN_LETTERS, neighbor_table


class PlaceResult(str, Enum):
    """Outcome of applying a placement."""

    LEGAL = "legal"
    ILLEGAL = "illegal"


class Board:
    """NoGo board: placing a stone may neither capture nor be suicide."""

    def __init__(self, size: int = BOARD_SIZE, to_move: Side = Side.BLACK) -> None:
        if size < 1 or size > len(COLUMN_LETTERS):
            raise ValueError(f"Unsupported board size: {size}")
        self.size = size
        self.to_move = to_move
        self.ply_count = 0
        self.cells: np.ndarray = np.zeros(size * size, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[str], to_move: Side = Side.BLACK) -> "Board":
        """Build a position from text rows (x black, o white, . empty, # hollow)."""
        cleaned = ["".join(row.split()) for row in rows]
        board = cls(size=len(cleaned), to_move=to_move)
        for row_idx, row in enumerate(cleaned):
            if len(row) != board.size:
                raise ValueError(f"Row {row_idx} has {len(row)} cells, expected {board.size}")
            for col_idx, symbol in enumerate(row):
                if symbol not in SYMBOL_STONE:
                    raise ValueError(f"Unknown cell symbol {symbol!r} in row {row_idx}")
                board.cells[row_idx * board.size + col_idx] = SYMBOL_STONE[symbol]
        return board

    def clone(self) -> "Board":
        """Copy the board; the copy shares no state with the original."""
        cloned = Board.__new__(Board)
        cloned.size = self.size
        cloned.to_move = self.to_move
        cloned.ply_count = self.ply_count
        cloned.cells = self.cells.copy()
        return cloned

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def grid(self) -> np.ndarray:
        """Row-major 2-D view of the cells."""
        return self.cells.reshape(self.size, self.size)

    def stone_at(self, index: int) -> Stone:
        return Stone(int(self.cells[index]))

    def place(self, index: int, side: Side) -> PlaceResult:
        """Place a stone for side; illegal placements leave the board untouched."""
        if side is not self.to_move:
            return PlaceResult.ILLEGAL
        if not 0 <= index < self.cell_count:
            return PlaceResult.ILLEGAL
        cells = self.cells
        if cells[index] != Stone.EMPTY:
            return PlaceResult.ILLEGAL

        cells[index] = side.stone
        if not self._is_legal_after_placing(index, side):
            cells[index] = Stone.EMPTY
            return PlaceResult.ILLEGAL

        self.to_move = side.opponent()
        self.ply_count += 1
        return PlaceResult.LEGAL

    def apply(self, placement) -> PlaceResult:
        """Apply anything carrying ``index`` and ``side`` (see engine.action.Placement)."""
        return self.place(placement.index, placement.side)

    def _is_legal_after_placing(self, index: int, side: Side) -> bool:
        neighbors = neighbor_table(self.size)
        if not self._group_has_liberty(index, neighbors):
            return False
        enemy = side.opponent().stone
        for neighbor in neighbors[index]:
            if self.cells[neighbor] == enemy and not self._group_has_liberty(neighbor, neighbors):
                return False
        return True

    def _group_has_liberty(self, start: int, neighbors) -> bool:
        cells = self.cells
        color = cells[start]
        stack = [start]
        seen = {start}
        while stack:
            current = stack.pop()
            for neighbor in neighbors[current]:
                value = cells[neighbor]
                if value == Stone.EMPTY:
                    return True
                if value == color and neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)
        return False

    def is_legal(self, index: int, side: Optional[Side] = None) -> bool:
        """Return whether side (default: side to move) may place at index."""
        side = self.to_move if side is None else side
        return self.clone().place(index, side) is PlaceResult.LEGAL

    def legal_placements(self, side: Optional[Side] = None) -> List[int]:
        """All cell indices where side may legally place, in index order."""
        side = self.to_move if side is None else side
        return [index for index in range(self.cell_count) if self.is_legal(index, side)]

    def legal_mask(self, side: Optional[Side] = None) -> np.ndarray:
        """Boolean mask over cell indices for legal placements."""
        mask = np.zeros(self.cell_count, dtype=np.bool_)
        for index in self.legal_placements(side):
            mask[index] = True
        return mask

    def has_legal_move(self, side: Optional[Side] = None) -> bool:
        side = self.to_move if side is None else side
        return any(self.is_legal(index, side) for index in range(self.cell_count))

    def is_terminal(self) -> bool:
        """The side to move has no legal placement."""
        return not self.has_legal_move()

    def winner(self) -> Optional[Side]:
        """Return the winner if the side to move is stuck, else None."""
        if self.is_terminal():
            return self.to_move.opponent()
        return None

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = ["    " + " ".join(COLUMN_LETTERS[: self.size])]
        for row in range(self.size):
            row_cells = [STONE_SYMBOL[Stone(int(value))] for value in self.grid[row]]
            lines.append(f"{row + 1:>2d}  " + " ".join(row_cells))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.to_move is other.to_move
            and bool(np.array_equal(self.cells, other.cells))
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size}, to_move={self.to_move.value}, ply={self.ply_count})"
