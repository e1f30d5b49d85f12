"""Arena settings loaded from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from arena.match import MatchConfig
from arena.ratings import RatingConfig
from engine.rules import BOARD_SIZE


class ArenaConfig:
    """Container for arena settings loaded from config file."""

    def __init__(self, payload: Dict[str, object]) -> None:
        self.black = str(payload.get("black", "name=mcts search=MCTS"))
        self.white = str(payload.get("white", "name=random"))

        match = payload.get("match", {})
        self.n_games = int(match.get("games", 10))
        self.board_size = int(match.get("board_size", BOARD_SIZE))
        self.max_plies = int(match.get("max_plies", 500))
        self.parallel_workers = int(match.get("parallel_workers", 1))
        self.base_seed = match.get("base_seed")
        self.log_every = int(match.get("log_every", 10))

        ratings = payload.get("ratings", {})
        self.k_factor = float(ratings.get("k_factor", 24.0))
        self.initial_rating = float(ratings.get("initial_rating", 1200.0))

    @classmethod
    def from_json(cls, path: str | Path) -> "ArenaConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)

    def match_config(self) -> MatchConfig:
        return MatchConfig(
            n_games=self.n_games,
            board_size=self.board_size,
            max_plies=self.max_plies,
            parallel_workers=self.parallel_workers,
            base_seed=None if self.base_seed is None else int(self.base_seed),
            log_every=self.log_every,
        )

    def rating_config(self) -> RatingConfig:
        return RatingConfig(k_factor=self.k_factor, initial_rating=self.initial_rating)
