"""
Tests for bot-vs-bot matches and the command line entry point.
"""
import pytest

from reversi.arena import Arena, ArenaEntrant
from reversi.cli import build_parser, main
from reversi.config import get_default_config
from reversi.game import Board, Color, ReversiGame


def test_entrant_player():
    player = ArenaEntrant("shallow", 1).make_player(Color.BLACK)
    assert player.color == Color.BLACK
    assert player.name == "shallow"
    assert player.depth == 1


def test_duplicate_names():
    with pytest.raises(ValueError):
        Arena(ArenaEntrant("bot", 1), ArenaEntrant("bot", 2))


def test_match_tally():
    arena = Arena(ArenaEntrant("one", 1), ArenaEntrant("two", 1))
    tally = arena.run_match(rounds=2, progress=False)

    assert set(tally) == {"one", "two", "draws"}
    assert sum(tally.values()) == 2


def test_same_depth_games_mirror():
    """Equal deterministic bots play the same game whichever entrant is White."""
    arena = Arena(ArenaEntrant("one", 1), ArenaEntrant("two", 1))
    first = arena.play_game(arena.entrant_a, arena.entrant_b)
    second = arena.play_game(arena.entrant_b, arena.entrant_a)
    assert first == second


def test_match_needs_rounds():
    arena = Arena(ArenaEntrant("one", 1), ArenaEntrant("two", 1))
    with pytest.raises(ValueError):
        arena.run_match(rounds=0)


def test_cli_requires_a_mode():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-p", "-b"])


def test_cli_arena(tmp_path, capsys):
    config = get_default_config()
    config.arena.depth_a = 1
    config.arena.depth_b = 1
    config.arena.rounds = 1
    path = str(tmp_path / "arena.json")
    config.save(path)

    assert main(["-a", "--config", path, "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "Arena results:" in out
    assert "A (depth 1)" in out


def test_cli_missing_config(tmp_path):
    assert main(["-a", "--config", str(tmp_path / "missing.json")]) == 1


def test_cli_invalid_override():
    assert main(["-a", "--depth", "0"]) == 1


def test_cli_quit(monkeypatch, capsys):
    def quit_immediately(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", quit_immediately)
    assert main(["-b", "--no-clear", "--depth", "1"]) == 130
    assert "Thanks for playing!" in capsys.readouterr().out


def test_cli_draws_final_board(monkeypatch, capsys):
    finished = Board.from_rows(["W.......", "W......."] + ["........"] * 5 + [".......B"])
    monkeypatch.setattr("reversi.cli.ReversiGame", lambda: ReversiGame(finished))

    assert main(["-p", "--no-clear"]) == 0

    lines = capsys.readouterr().out.split("\n")
    assert "Game over: White wins (Black 1, White 2)" in lines
    # Sorted view: Black first from the top left, White last at the bottom right
    assert lines[1].startswith("│ BB │    │")
    assert lines[15].endswith("│ WW │ WW │")
