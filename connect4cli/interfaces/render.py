"""
render.py - Terminal rendering for Connect Four

Turns a Game into the text shown between turns: a green framed header with
the move number, one line per board row, and the result once the game is
over. Rendering only reads the game through its public properties.
"""

from connect4cli.utils import COLS, Player
from connect4cli.game.rules import Game

# ANSI color codes for terminal output
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"

GLYPHS = {
    Player.ONE: "🔴",
    Player.TWO: "🔵",
    Player.NONE: "⚫",
}

ASCII_GLYPHS = {
    Player.ONE: "X",
    Player.TWO: "O",
    Player.NONE: ".",
}

RULE = "-" * 20


class Renderer:
    """Builds the text for the board, results and errors."""

    def __init__(self, color: bool = True, ascii_only: bool = False):
        self.color = color
        self.glyphs = ASCII_GLYPHS if ascii_only else GLYPHS
        self.cell_width = 1 if ascii_only else 2  # emoji take two terminal columns

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"

    def result_line(self, game: Game) -> str:
        """Message announcing the outcome, or '' while the game is running."""
        if not game.is_finished:
            return ""
        if game.winner == Player.NONE:
            return "It's a draw!"
        return f"{self.glyphs[game.winner]} {game.winner.label} has won!"

    def board(self, game: Game) -> str:
        lines = [
            self._paint(RULE, GREEN),
            self._paint(f"CONNECT 4 (Move {game.move_count})", GREEN),
            self._paint(RULE, GREEN),
        ]
        for row in game.rows():
            lines.append(" ".join(self.glyphs[cell] for cell in row))
        lines.append(" ".join(str(col + 1).ljust(self.cell_width)
                              for col in range(COLS)).rstrip())
        lines.append(self._paint(RULE, GREEN))

        result = self.result_line(game)
        if result:
            lines.append(self._paint(result, GREEN))
            lines.append(self._paint(RULE, GREEN))
        return "\n".join(lines)

    def error(self, game: Game, message: str) -> str:
        """The board followed by an error line."""
        return f"{self.board(game)}\n{self._paint('Error: ' + message, RED)}"
