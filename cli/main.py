"""CLI entrypoint for playing NoGo against an AI."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ai.factory import build_agent
from arena.match import with_seed
from engine.action import Placement
from engine.board import Board, PlaceResult
from engine.pieces import Side
from engine.rules import BOARD_SIZE


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play NoGo in terminal.")
    parser.add_argument(
        "--agent",
        type=str,
        default="name=mcts search=MCTS",
        help="AI config as key=value pairs, e.g. 'search=MCTS simulations=200'",
    )
    parser.add_argument("--seed", type=int, default=None, help="Deterministic AI seed")
    parser.add_argument("--size", type=int, default=BOARD_SIZE, help="Board size")
    parser.add_argument(
        "--human-side",
        type=str,
        default="black",
        choices=["black", "white"],
        help="Which side the human controls",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def parse_user_move(command: str, side: Side, size: int = BOARD_SIZE) -> Optional[Placement]:
    """Parse a coordinate like ``C4``; None when it is not one."""
    parts = command.strip().split()
    if len(parts) != 1:
        return None
    try:
        return Placement.parse(parts[0], side, size)
    except ValueError:
        return None


def run_cli() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("nogo.cli")

    human_side = Side(args.human_side)
    ai_side = human_side.opponent()
    ai = build_agent(with_seed(f"{args.agent} role={ai_side.value} size={args.size}", args.seed))
    board = Board(size=args.size)

    logger.info("Starting NoGo game. Human=%s AI=%s (%s)", human_side.value, ai_side.value, ai.name)
    print("Commands: <column><row> e.g. C4 | help | quit")
    ai.open_episode(f"human:{ai.name}")

    while True:
        print()
        print(board.render_ascii())
        print(f"Turn: {board.to_move.value} | Ply: {board.ply_count}")

        winner = board.winner()
        if winner is not None:
            print(f"{board.to_move.value} has no legal move. Winner: {winner.value}")
            break

        if board.to_move is human_side:
            user_input = input("Your move> ").strip()
            if user_input.lower() in {"quit", "exit"}:
                print("Exiting game.")
                break
            if user_input.lower() == "help":
                print("Commands: <column><row> e.g. C4 | quit")
                continue

            move = parse_user_move(user_input, human_side, board.size)
            if move is None:
                print("Invalid command format.")
                continue
            if board.apply(move) is not PlaceResult.LEGAL:
                print("Illegal move for current state.")
                continue
        else:
            ai_move = ai.choose_move(board)
            if ai_move is None or board.apply(ai_move) is not PlaceResult.LEGAL:
                print(f"AI cannot move. Winner: {human_side.value}")
                winner = human_side
                break
            print(f"AI move: {ai_move.label}")

    if winner is not None:
        ai.notify(f"winner={winner.value}")
    ai.close_episode(f"human:{ai.name}")


if __name__ == "__main__":
    run_cli()
