"""Elo ratings for agents playing match series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from arena.match import GameRecord
from engine.pieces import Side


@dataclass
class RatingConfig:
    k_factor: float = 24.0
    initial_rating: float = 1200.0


def expected_score(rating: float, opponent_rating: float) -> float:
    """Expected score of a player against an opponent."""
    return 1.0 / (1.0 + 10 ** ((opponent_rating - rating) / 400.0))


class RatingTable:
    """Per-name ratings, updated one game at a time."""

    def __init__(self, config: Optional[RatingConfig] = None) -> None:
        self.config = config or RatingConfig()
        self._ratings: Dict[str, float] = {}

    def rating(self, name: str) -> float:
        return self._ratings.setdefault(name, self.config.initial_rating)

    def record_game(self, black_name: str, white_name: str, winner: Optional[Side]) -> None:
        """Update both ratings; a game without a winner counts as half a point each."""
        if winner is None:
            black_score = 0.5
        else:
            black_score = 1.0 if winner is Side.BLACK else 0.0
        black = self.rating(black_name)
        white = self.rating(white_name)
        delta = self.config.k_factor * (black_score - expected_score(black, white))
        self._ratings[black_name] = black + delta
        self._ratings[white_name] = white - delta

    def record_series(self, black_name: str, white_name: str, records: Iterable[GameRecord]) -> None:
        for record in records:
            self.record_game(black_name, white_name, record.winner)

    def leaderboard(self) -> Dict[str, float]:
        return dict(sorted(self._ratings.items(), key=lambda item: item[1], reverse=True))
