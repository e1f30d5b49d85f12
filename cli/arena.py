"""CLI command to run an AI-vs-AI NoGo match series."""

from __future__ import annotations

import argparse
import logging

from arena.config import ArenaConfig
from arena.match import MatchRunner
from arena.ratings import RatingTable
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pit two NoGo agents against each other.")
    parser.add_argument("--config", type=str, default=None, help="Path to arena config JSON")
    parser.add_argument("--black", type=str, default=None, help="Black agent key=value config")
    parser.add_argument("--white", type=str, default=None, help="White agent key=value config")
    parser.add_argument("--games", type=int, default=None, help="Number of games")
    parser.add_argument("--workers", type=int, default=None, help="Parallel game processes")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for both agents")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def load_config(args: argparse.Namespace) -> ArenaConfig:
    """Read the JSON config if given, then apply command-line overrides."""
    config = ArenaConfig.from_json(args.config) if args.config else ArenaConfig({})
    if args.black is not None:
        config.black = args.black
    if args.white is not None:
        config.white = args.white
    if args.games is not None:
        config.n_games = args.games
    if args.workers is not None:
        config.parallel_workers = args.workers
    if args.seed is not None:
        config.base_seed = args.seed
    return config


def side_args(args: str, side: Side, size: int) -> str:
    """Force the role (and board size) an agent plays with."""
    return f"{args} role={side.value} size={size}"


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = load_config(args)
    black_args = side_args(config.black, Side.BLACK, config.board_size)
    white_args = side_args(config.white, Side.WHITE, config.board_size)
    runner = MatchRunner(config.match_config())
    LOGGER.info("Arena: black=[%s] white=[%s] games=%d", config.black, config.white, config.n_games)

    records = runner.run_games_from_specs(black_args, white_args)
    summary = runner.summarize(records)

    ratings = RatingTable(config.rating_config())
    black_name = f"black:{config.black}"
    white_name = f"white:{config.white}"
    ratings.record_series(black_name, white_name, records)

    print(f"Black wins: {summary['black_wins']}")
    print(f"White wins: {summary['white_wins']}")
    print(f"Unfinished: {summary['unfinished']}")
    for name, rating in ratings.leaderboard().items():
        print(f"{rating:8.1f}  {name}")


if __name__ == "__main__":
    main()
