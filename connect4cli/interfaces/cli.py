"""
cli.py - Command-line interface for playing Connect Four

Two people share the keyboard and take turns typing a column number. The
driver translates the 1-based columns people type into the engine's 0-based
columns, shows engine errors under the board and offers a restart once the
game is over.
"""

import argparse
import sys
from typing import Dict, List, Optional

import numpy as np

from connect4cli.debug import debug, DebugLevel
from connect4cli.utils import COLS
from connect4cli.game.rules import Game, MoveError, InvalidColumnError
from connect4cli.interfaces.render import Renderer, CLEAR_SCREEN

QUIT_COMMANDS = ('q', 'quit')
RESTART_COMMANDS = ('r', 'restart')


def parse_column(text: str) -> int:
    """
    Convert a typed column number (1-based) to an engine column (0-based).

    Raises:
        ValueError: If text is not a whole number
        InvalidColumnError: If the number is not between 1 and COLS
    """
    number = int(text.strip())
    if not 1 <= number <= COLS:
        raise InvalidColumnError()
    return number - 1


class SimpleCLI:
    """Interactive two-player Connect Four in the terminal."""

    def __init__(self, renderer: Optional[Renderer] = None, clear_screen: bool = False):
        self.game = Game()
        self.renderer = renderer or Renderer()
        self.clear_screen = clear_screen

    def show_board(self) -> None:
        if self.clear_screen:
            print(CLEAR_SCREEN, end="")
        print(self.renderer.board(self.game))

    def show_error(self, message: str) -> None:
        if self.clear_screen:
            print(CLEAR_SCREEN, end="")
        print(self.renderer.error(self.game, message))

    def read_line(self, prompt: str) -> Optional[str]:
        """Read one line of input; None when input is closed or interrupted."""
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None

    def restart(self) -> None:
        debug.info("Starting a new game", "cli")
        self.game = Game()
        self.show_board()

    def play_turn(self, line: str) -> None:
        """Try the move typed in line and show the outcome."""
        try:
            column = parse_column(line)
            self.game.apply_move(column)
        except MoveError as e:
            self.show_error(str(e))
        except ValueError:
            debug.debug(f"Could not parse column from {line!r}", "cli")
            self.show_error(f"Please enter a number between 1 and {COLS}")
        else:
            self.show_board()

    def play_game(self) -> None:
        """Run games until the players quit."""
        self.show_board()

        while True:
            while not self.game.is_finished:
                print()
                print(self.game.current_player.label)
                line = self.read_line(f"Enter a column between 1 and {COLS}: ")
                if line is None or line.strip().lower() in QUIT_COMMANDS:
                    print("Quitting...")
                    return
                if line.strip().lower() in RESTART_COMMANDS:
                    self.restart()
                    continue
                self.play_turn(line)

            line = self.read_line("Press 'R' to restart or 'Q' to quit the game. ")
            if line is None:
                print("Quitting...")
                return

            command = line.strip().lower()
            if command in RESTART_COMMANDS:
                self.restart()
            elif command in QUIT_COMMANDS:
                print("Quitting...")
                return
            else:
                self.show_error("Invalid input")

    def benchmark(self, iterations: int = 1000, seed: Optional[int] = None) -> Dict[str, float]:
        """
        Play random games and time them.

        Args:
            iterations: Number of games to play
            seed: Seed for the move generator

        Returns:
            Totals and per-game/per-move timings
        """
        rng = np.random.default_rng(seed)
        results = {'one': 0, 'two': 0, 'draw': 0}
        total_moves = 0

        print(f"Running benchmark with {iterations} games...")
        debug.start_timer("benchmark")
        for _ in range(iterations):
            game = Game()
            while not game.is_finished:
                game.apply_move(int(rng.choice(game.get_valid_moves())))
            total_moves += game.move_count
            if game.is_draw:
                results['draw'] += 1
            else:
                results[game.winner.name.lower()] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        stats = {
            'games': iterations,
            'moves': total_moves,
            'seconds': elapsed,
            'ms_per_game': elapsed / iterations * 1000 if iterations else 0.0,
            'ms_per_move': elapsed / total_moves * 1000 if total_moves else 0.0,
            'player_one_wins': results['one'],
            'player_two_wins': results['two'],
            'draws': results['draw'],
        }
        print(f"Played {iterations} games with {total_moves} moves in {elapsed:.6f} seconds "
              f"({stats['ms_per_game']:.4f} ms per game, {stats['ms_per_move']:.4f} ms per move)")
        print(f"Player 1 wins: {results['one']}, Player 2 wins: {results['two']}, "
              f"draws: {results['draw']}")
        return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Two-player Connect Four in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play a game (columns are numbered 1-7)
    python run.py play

    # Play without colors, using X and O instead of emoji
    python run.py play --no-color --ascii

    # Play with engine logging written to a file
    python run.py play --debug_level debug --log_file connect4.log

    # Time 5000 random games
    python run.py benchmark --iterations 5000 --seed 42
    """
    )
    parser.add_argument('command',
        nargs='?',
        choices=['play', 'benchmark'],
        default='play',
        help='play (interactive two-player game) or benchmark (random games)')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug logging (same as --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=[level.name.lower() for level in DebugLevel],
        default='warning',
        help='Logging verbosity: none, error, warning, info, debug, trace')
    parser.add_argument('--log_file',
        type=str,
        help='Also write log messages to this file')
    parser.add_argument('--no-color',
        dest='color',
        action='store_false',
        help='Disable ANSI colors')
    parser.add_argument('--ascii',
        action='store_true',
        help='Draw pieces as X and O instead of emoji')
    parser.add_argument('--clear',
        action='store_true',
        help='Clear the screen before drawing the board')
    parser.add_argument('--iterations',
        type=int,
        default=1000,
        help='Number of games for the benchmark')
    parser.add_argument('--seed',
        type=int,
        default=None,
        help='Random seed for the benchmark')
    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Apply --debug, --debug_level and --log_file to the debug manager."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    cli = SimpleCLI(Renderer(color=args.color, ascii_only=args.ascii), clear_screen=args.clear)
    try:
        if args.command == 'benchmark':
            if args.iterations < 1:
                print("--iterations must be at least 1", file=sys.stderr)
                return 2
            cli.benchmark(args.iterations, args.seed)
        else:
            cli.play_game()
        return 0
    finally:
        if args.log_file:
            debug.configure(log_file="")


if __name__ == "__main__":
    sys.exit(main())
