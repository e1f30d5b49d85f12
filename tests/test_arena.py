"""
Tests for match series, ratings, arena config, and CLI helpers.
"""
import argparse
import json

import pytest

from ai.base_ai import BaseAI
from ai.random_ai import RandomAI
from arena.config import ArenaConfig
from arena.match import GameRecord, MatchConfig, MatchRunner, play_game, with_seed
from arena.ratings import RatingConfig, RatingTable, expected_score
from cli.arena import load_config, side_args
from cli.main import parse_user_move
from engine.action import Placement
from engine.pieces import Side


class CornerAI(BaseAI):
    """Always plays A1, which is illegal from its second move on."""

    def choose_move(self, board):
        return Placement(0, Side(self.role), board.size)


class PassingAI(BaseAI):
    def choose_move(self, board):
        return None


def test_random_games_finish_with_a_winner():
    runner = MatchRunner(MatchConfig(n_games=3, board_size=4, log_every=1))
    black = RandomAI("name=b role=black seed=1")
    white = RandomAI("name=w role=white seed=2")
    records = runner.run_games(black, white)
    assert len(records) == 3
    for record in records:
        assert record.winner in (Side.BLACK, Side.WHITE)
        assert record.plies == len(record.moves) <= 16
    summary = runner.summarize(records)
    assert summary["black_wins"] + summary["white_wins"] == 3
    assert summary["unfinished"] == 0
    assert black.property("winner") == records[-1].winner.value


def test_illegal_move_forfeits():
    black = CornerAI("name=corner role=black")
    white = RandomAI("name=w role=white seed=5")
    record = play_game(black, white, board_size=4)
    assert record.winner is Side.WHITE
    assert record.moves[0] == "A1"
    assert record.plies == 2


def test_pass_loses_immediately():
    record = play_game(PassingAI("name=p role=black"), RandomAI("role=white"), board_size=3)
    assert record.winner is Side.WHITE
    assert record.plies == 0


def test_ply_limit_leaves_game_unfinished():
    black = RandomAI("role=black seed=1")
    white = RandomAI("role=white seed=1")
    record = play_game(black, white, board_size=4, max_plies=2)
    assert record.winner is None
    assert MatchRunner.summarize([record])["unfinished"] == 1
    assert white.property("winner") == "none"


def test_spec_games_are_seed_reproducible():
    config = MatchConfig(n_games=2, board_size=4, base_seed=17)
    first = MatchRunner(config).run_games_from_specs("role=black", "role=white")
    second = MatchRunner(config).run_games_from_specs("role=black", "role=white")
    assert [r.moves for r in first] == [r.moves for r in second]


def test_parallel_spec_games():
    config = MatchConfig(n_games=2, board_size=4, base_seed=3, parallel_workers=2)
    records = MatchRunner(config).run_games_from_specs(
        "name=m role=black search=MCTS simulations=4", "name=r role=white"
    )
    assert len(records) == 2
    assert all(isinstance(record, GameRecord) for record in records)


def test_with_seed_overrides_only_when_given():
    assert with_seed("role=black", None) == "role=black"
    assert with_seed("role=black seed=1", 9).endswith("seed=9")


def test_ratings_are_zero_sum():
    assert expected_score(1500.0, 1500.0) == pytest.approx(0.5)
    table = RatingTable(RatingConfig(k_factor=24.0, initial_rating=1500.0))
    table.record_game("a", "b", Side.BLACK)
    assert table.rating("a") == pytest.approx(1512.0)
    assert table.rating("b") == pytest.approx(1488.0)
    table.record_game("c", "d", None)
    assert table.rating("c") == pytest.approx(1500.0)
    assert list(table.leaderboard())[0] == "a"


def test_record_series_uses_each_winner():
    table = RatingTable()
    records = [GameRecord(winner=Side.WHITE, plies=5), GameRecord(winner=Side.WHITE, plies=7)]
    table.record_series("black-bot", "white-bot", records)
    assert table.rating("white-bot") > table.rating("black-bot")


def test_arena_config_from_json(tmp_path):
    path = tmp_path / "arena.json"
    path.write_text(
        json.dumps(
            {
                "black": "name=m search=MCTS simulations=50",
                "match": {"games": 4, "board_size": 7, "base_seed": "12", "parallel_workers": 2},
                "ratings": {"k_factor": 16},
            }
        ),
        encoding="utf-8",
    )
    config = ArenaConfig.from_json(path)
    assert config.black == "name=m search=MCTS simulations=50"
    assert config.white == "name=random"
    match = config.match_config()
    assert (match.n_games, match.board_size, match.base_seed, match.parallel_workers) == (4, 7, 12, 2)
    assert config.rating_config().k_factor == 16.0


def test_cli_overrides_config():
    args = argparse.Namespace(config=None, black="name=x", white=None, games=3, workers=None, seed=5)
    config = load_config(args)
    assert config.black == "name=x"
    assert config.white == "name=random"
    assert config.n_games == 3
    assert config.match_config().base_seed == 5
    assert side_args("name=x", Side.WHITE, 9) == "name=x role=white size=9"


def test_parse_user_move():
    assert parse_user_move("C4", Side.BLACK) == Placement(29, Side.BLACK)
    assert parse_user_move(" e5 ", Side.WHITE, 5) == Placement(24, Side.WHITE, 5)
    assert parse_user_move("C 4", Side.BLACK) is None
    assert parse_user_move("bogus", Side.BLACK) is None
