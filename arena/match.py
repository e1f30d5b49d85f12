"""Agent-vs-agent match runner for NoGo."""

from __future__ import annotations

import logging
import multiprocessing as mp
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ai.base_ai import BaseAI
from ai.factory import build_agent
from engine.board import Board, PlaceResult
from engine.pieces import Side
from engine.rules import BOARD_SIZE

LOGGER = logging.getLogger(__name__)


@dataclass
class MatchConfig:
    """Match series settings."""

    n_games: int = 10
    board_size: int = BOARD_SIZE
    max_plies: int = 500
    parallel_workers: int = 1
    base_seed: Optional[int] = None
    log_every: int = 10


@dataclass
class GameRecord:
    """Outcome of one full game."""

    winner: Optional[Side]
    plies: int
    moves: List[str] = field(default_factory=list)


def with_seed(args: str, seed: Optional[int]) -> str:
    """Append a seed to agent args; later pairs override earlier ones."""
    if seed is None:
        return args
    return f"{args} seed={seed}"


def play_game(black_ai: BaseAI, white_ai: BaseAI, board_size: int = BOARD_SIZE, max_plies: int = 500) -> GameRecord:
    """Alternate moves until a side passes or plays an illegal placement; that side loses."""
    board = Board(size=board_size)
    agents: Dict[Side, BaseAI] = {Side.BLACK: black_ai, Side.WHITE: white_ai}
    flag = f"{black_ai.name}:{white_ai.name}"
    for agent in agents.values():
        agent.open_episode(flag)

    moves: List[str] = []
    winner: Optional[Side] = None
    while board.ply_count < max_plies:
        mover = board.to_move
        move = agents[mover].choose_move(board)
        if move is None or board.apply(move) is not PlaceResult.LEGAL:
            if move is not None:
                LOGGER.warning("%s played illegal move %s; forfeiting", agents[mover].name, move)
            winner = mover.opponent()
            break
        moves.append(move.label)

    result = "none" if winner is None else winner.value
    for agent in agents.values():
        agent.notify(f"winner={result}")
        agent.close_episode(flag)
    return GameRecord(winner=winner, plies=board.ply_count, moves=moves)


def _parallel_worker(
    game_index: int,
    black_args: str,
    white_args: str,
    board_size: int,
    max_plies: int,
    base_seed: Optional[int],
) -> GameRecord:
    seed = None if base_seed is None else base_seed + game_index
    black_ai = build_agent(with_seed(black_args, seed))
    white_ai = build_agent(with_seed(white_args, None if seed is None else seed + 9973))
    return play_game(black_ai, white_ai, board_size=board_size, max_plies=max_plies)


class MatchRunner:
    """Runs a series of games between a black and a white agent."""

    def __init__(self, config: MatchConfig) -> None:
        self.config = config

    def run_games(self, black_ai: BaseAI, white_ai: BaseAI, n_games: Optional[int] = None) -> List[GameRecord]:
        n_games = self.config.n_games if n_games is None else n_games
        records: List[GameRecord] = []
        for game_index in range(n_games):
            record = play_game(
                black_ai,
                white_ai,
                board_size=self.config.board_size,
                max_plies=self.config.max_plies,
            )
            records.append(record)
            self._log_progress("serial", game_index, n_games, record)
        return records

    def run_games_from_specs(self, black_args: str, white_args: str, n_games: Optional[int] = None) -> List[GameRecord]:
        """Build agents from config strings; with several workers, each game runs in its own process."""
        n_games = self.config.n_games if n_games is None else n_games
        base_seed = self.config.base_seed
        if self.config.parallel_workers <= 1:
            black_ai = build_agent(with_seed(black_args, base_seed))
            white_ai = build_agent(with_seed(white_args, None if base_seed is None else base_seed + 1))
            return self.run_games(black_ai, white_ai, n_games=n_games)

        args = [
            (idx, black_args, white_args, self.config.board_size, self.config.max_plies, base_seed)
            for idx in range(n_games)
        ]
        with mp.Pool(processes=self.config.parallel_workers) as pool:
            records = pool.starmap(_parallel_worker, args)

        for idx, record in enumerate(records):
            self._log_progress("parallel", idx, n_games, record)
        return records

    def _log_progress(self, mode: str, game_index: int, n_games: int, record: GameRecord) -> None:
        if (game_index + 1) % max(1, self.config.log_every) == 0:
            LOGGER.info(
                "Match %s game %d/%d | winner=%s plies=%d",
                mode,
                game_index + 1,
                n_games,
                None if record.winner is None else record.winner.value,
                record.plies,
            )

    @staticmethod
    def summarize(records: Sequence[GameRecord]) -> Dict[str, int]:
        summary = {"black_wins": 0, "white_wins": 0, "unfinished": 0}
        for record in records:
            if record.winner is Side.BLACK:
                summary["black_wins"] += 1
            elif record.winner is Side.WHITE:
                summary["white_wins"] += 1
            else:
                summary["unfinished"] += 1
        return summary
