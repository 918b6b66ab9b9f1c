import logging

import pytest

from connect4cli.debug import debug, DebugLevel
from connect4cli.game.rules import InvalidColumnError
from connect4cli.interfaces.cli import SimpleCLI, parse_column, main
from connect4cli.interfaces.render import Renderer
from connect4cli.utils import Player


@pytest.fixture
def feed(monkeypatch):
    """Answer input() prompts from a list; input ends when it runs out."""
    def _feed(lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


@pytest.fixture
def cli():
    return SimpleCLI(Renderer(color=False))


def test_parse_column_is_one_based():
    assert parse_column("1") == 0
    assert parse_column(" 7 \n") == 6


@pytest.mark.parametrize("text", ["0", "8", "-3"])
def test_parse_column_out_of_range(text):
    with pytest.raises(InvalidColumnError):
        parse_column(text)


@pytest.mark.parametrize("text", ["", "abc", "2.5"])
def test_parse_column_not_a_number(text):
    with pytest.raises(ValueError):
        parse_column(text)


def test_vertical_win_then_quit(cli, feed, capsys):
    feed(["1", "2", "1", "2", "1", "2", "1", "q"])
    cli.play_game()
    out = capsys.readouterr().out
    assert cli.game.is_finished
    assert cli.game.winner == Player.ONE
    assert "CONNECT 4 (Move 7)" in out
    assert "Player 1 has won!" in out
    assert out.rstrip().endswith("Quitting...")


def test_bad_input_does_not_touch_the_game(cli, feed, capsys):
    feed(["abc", "9", "4", "q"])
    cli.play_game()
    out = capsys.readouterr().out
    assert "Error: Please enter a number between 1 and 7" in out
    assert "Error: Column must be between 1 and 7" in out
    assert cli.game.move_count == 1
    assert cli.game.current_player == Player.TWO


def test_full_column_error(cli, feed, capsys):
    feed(["3"] * 7 + ["q"])
    cli.play_game()
    out = capsys.readouterr().out
    assert "Error: Column is full" in out
    assert cli.game.move_count == 6


def test_restart_after_game_over(cli, feed, capsys):
    feed(["1", "2", "1", "2", "1", "2", "1", "x", "R", "5", "q"])
    cli.play_game()
    out = capsys.readouterr().out
    assert "Error: Invalid input" in out
    assert not cli.game.is_finished
    assert cli.game.move_count == 1
    assert cli.game.cell(5, 4) == Player.ONE


def test_restart_mid_game(cli, feed):
    feed(["1", "2", "r", "q"])
    cli.play_game()
    assert cli.game.move_count == 0


def test_end_of_input_quits(cli, feed, capsys):
    feed(["4"])
    cli.play_game()
    assert capsys.readouterr().out.rstrip().endswith("Quitting...")
    assert cli.game.move_count == 1


def test_benchmark_counts_games(cli, capsys):
    stats = cli.benchmark(iterations=20, seed=7)
    assert stats['games'] == 20
    assert stats['player_one_wins'] + stats['player_two_wins'] + stats['draws'] == 20
    assert stats['moves'] >= 20 * 7
    assert "Running benchmark with 20 games" in capsys.readouterr().out


def test_benchmark_is_reproducible(cli):
    first = cli.benchmark(iterations=10, seed=3)
    second = cli.benchmark(iterations=10, seed=3)
    assert first['moves'] == second['moves']
    assert first['draws'] == second['draws']


def test_main_play(feed, capsys):
    feed(["q"])
    assert main(["play", "--no-color", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "CONNECT 4 (Move 0)" in out
    assert ". . . . . . ." in out


def test_main_debug_flag(feed):
    feed(["q"])
    main(["--debug", "--no-color"])
    assert debug.level == DebugLevel.DEBUG


def test_main_rejects_zero_iterations(capsys):
    assert main(["benchmark", "--iterations", "0"]) == 2


def test_main_closes_log_file(feed, tmp_path):
    log_file = tmp_path / "game.log"
    feed(["4", "q"])
    assert main(["--no-color", "--debug_level", "debug", "--log_file", str(log_file)]) == 0
    assert not any(isinstance(handler, logging.FileHandler) for handler in debug.logger.handlers)
    assert "Move 1: ONE -> (5, 3)" in log_file.read_text()
