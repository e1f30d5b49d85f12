"""Rules helpers for NoGo boards."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Tuple

BOARD_SIZE = 9

# Column letters skip "I", as on Go boards.
COLUMN_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"

Position = Tuple[int, int]


def in_bounds(pos: Position, size: int = BOARD_SIZE) -> bool:
    """Return whether a position is inside a size x size board."""
    row, col = pos
    return 0 <= row < size and 0 <= col < size


def orthogonal_neighbors(pos: Position, size: int = BOARD_SIZE) -> Iterable[Position]:
    """Yield orthogonally adjacent positions in bounds."""
    row, col = pos
    candidates = ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
    for candidate in candidates:
        if in_bounds(candidate, size):
            yield candidate


def pos_to_index(pos: Position, size: int = BOARD_SIZE) -> int:
    """Convert a board position to flattened index."""
    return pos[0] * size + pos[1]


def index_to_pos(index: int, size: int = BOARD_SIZE) -> Position:
    """Convert flattened index to board position."""
    return (index // size, index % size)


@lru_cache(maxsize=None)
def neighbor_table(size: int) -> Tuple[Tuple[int, ...], ...]:
    """Neighbor indices for every cell of a size x size board."""
    table: List[Tuple[int, ...]] = []
    for index in range(size * size):
        pos = index_to_pos(index, size)
        table.append(tuple(pos_to_index(n, size) for n in orthogonal_neighbors(pos, size)))
    return tuple(table)


def index_to_label(index: int, size: int = BOARD_SIZE) -> str:
    """Render a cell index as a coordinate like ``C4`` (row 1 at the top)."""
    row, col = index_to_pos(index, size)
    return f"{COLUMN_LETTERS[col]}{row + 1}"


def label_to_index(label: str, size: int = BOARD_SIZE) -> int:
    """Parse a coordinate like ``C4`` into a cell index."""
    text = label.strip().upper()
    if len(text) < 2:
        raise ValueError(f"invalid coordinate: {label!r}")
    col = COLUMN_LETTERS.find(text[0])
    try:
        row = int(text[1:]) - 1
    except ValueError as exc:
        raise ValueError(f"invalid coordinate: {label!r}") from exc
    if col < 0 or not in_bounds((row, col), size):
        raise ValueError(f"coordinate out of range: {label!r}")
    return pos_to_index((row, col), size)
