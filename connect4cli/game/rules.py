"""
rules.py - Game state management for Connect Four

This module provides the Game class, the single mutable object of a Connect
Four match, and the MoveError exceptions raised when a move is rejected.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4cli.debug import debug
from connect4cli.utils import (ROWS, COLS, MIN_MOVES_FOR_WIN, Player, Position,
                               find_winning_line)
from connect4cli.game.board import Board


class MoveError(Exception):
    """Base class for rejected moves. The game state is untouched when raised."""

    message = "Invalid move"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class GameFinishedError(MoveError):
    """A move was attempted after the game ended."""

    message = "Game is already finished"


class InvalidColumnError(MoveError):
    """The column index is outside the board."""

    message = f"Column must be between 1 and {COLS}"


class ColumnFullError(MoveError):
    """The target column has no empty cell left."""

    message = "Column is full"


def _is_column_index(column) -> bool:
    return isinstance(column, (int, np.integer)) and not isinstance(column, (bool, np.bool_))


class Game:
    """
    A Connect Four match between Player.ONE and Player.TWO.

    A game starts with an empty board and Player.ONE to move. It is changed
    only through apply_move and stays finished once a player connects four
    or the board fills up. Starting over means creating a new Game.
    """

    def __init__(self):
        """Initialize a new game."""
        debug.debug("Initializing Game", "game")
        self._board = Board()
        self._move_count = 0
        self._current_player = Player.ONE
        self._is_finished = False
        self._winner = Player.NONE
        self._last_move: Optional[Position] = None
        self._winning_line: Tuple[Position, ...] = ()

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def current_player(self) -> Player:
        """Player to move; after the game ends, the player who moved last."""
        return self._current_player

    @property
    def board(self) -> Board:
        """Snapshot of the board; changing it does not affect the game."""
        return self._board.copy()

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the board grid."""
        return self._board.grid

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def winner(self) -> Player:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_finished and self._winner == Player.NONE

    @property
    def last_move(self) -> Optional[Position]:
        return self._last_move

    @property
    def winning_line(self) -> Tuple[Position, ...]:
        """Cells of the four-in-a-row that ended the game, if any."""
        return self._winning_line

    def cell(self, row: int, col: int) -> Player:
        return self._board.cell(row, col)

    def rows(self) -> Tuple[Tuple[Player, ...], ...]:
        """Cells as nested tuples of Player, top row first."""
        return self._board.rows()

    def count_pieces(self) -> int:
        return self._board.count_pieces()

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array."""
        return self._board.get_state()

    def is_valid_move(self, column) -> bool:
        """
        Check if a move would be accepted, without making it.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if apply_move(column) would succeed
        """
        return self._check_move(column) is None

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still take a piece.

        Returns:
            List of column indices, empty once the game is finished
        """
        if self._is_finished:
            return []
        return [col for col in range(COLS) if not self._board.is_column_full(col)]

    def _check_move(self, column) -> Optional[MoveError]:
        if self._is_finished:
            return GameFinishedError()
        if not _is_column_index(column) or not 0 <= column < COLS:
            return InvalidColumnError()
        if self._board.landing_row(int(column)) < 0:
            return ColumnFullError()
        return None

    def apply_move(self, column) -> None:
        """
        Drop the current player's piece into column.

        Checks run in order: finished game, column range, full column. On
        success the move count goes up and the result is evaluated: a four
        in a row ends the game with a winner, a full board ends it as a draw,
        otherwise the turn passes to the other player.

        Args:
            column: The column to place a piece (0-indexed)

        Raises:
            GameFinishedError: If the game has already ended
            InvalidColumnError: If column is not an index in [0, COLS)
            ColumnFullError: If column has no empty cell
        """
        error = self._check_move(column)
        if error is not None:
            debug.debug(f"Rejected move {column!r} for {self._current_player.name}: {error}", "game")
            raise error

        column = int(column)
        row = self._board.drop(column, self._current_player)
        self._move_count += 1
        self._last_move = (row, column)
        debug.debug(f"Move {self._move_count}: {self._current_player.name} -> ({row}, {column})", "game")

        winner, line = self._scan()
        if winner != Player.NONE:
            self._winner = winner
            self._winning_line = tuple(line)
            self._is_finished = True
            debug.info(f"{winner.label} wins on move {self._move_count}", "game")
        elif self._move_count == ROWS * COLS:
            self._is_finished = True
            debug.info("Game ends in a draw", "game")
        else:
            self._current_player = self._current_player.other()

    def evaluate(self) -> Player:
        """
        Look for a four-in-a-row anywhere on the board.

        Fewer than MIN_MOVES_FOR_WIN pieces cannot contain a line, so the scan
        is skipped. Deciding a draw is left to the caller.

        Returns:
            The owner of the first line found in scan order, or Player.NONE
        """
        return self._scan()[0]

    def _scan(self) -> Tuple[Player, List[Position]]:
        if self._move_count < MIN_MOVES_FOR_WIN:
            return Player.NONE, []

        debug.start_timer("win_check")
        result = find_winning_line(self._board.grid)
        debug.end_timer("win_check", "game")
        return result

    def render(self) -> str:
        return self._board.render()
