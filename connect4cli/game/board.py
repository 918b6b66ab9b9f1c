"""
board.py - Board representation for Connect Four

The Board owns the 6x7 grid and knows how pieces fall into columns. It has no
notion of turns or results; those belong to the Game in rules.py.
"""

import numpy as np
from typing import Tuple

from connect4cli.debug import debug
from connect4cli.utils import ROWS, COLS, Player, render_board_ascii


class Board:
    """
    A fixed 6x7 Connect Four grid.

    Row 0 is the top row and row ROWS-1 the bottom, where pieces land first.
    Cells only ever go from empty to owned; nothing here empties a cell.
    """

    def __init__(self):
        """Initialize an empty board."""
        self._grid = np.zeros((ROWS, COLS), dtype=np.int8)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the grid holding Player values."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same cells
        """
        new_board = Board()
        new_board._grid = self._grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array the caller is free to modify
        """
        return self._grid.copy()

    def cell(self, row: int, col: int) -> Player:
        """Get the occupant of a cell."""
        return Player(int(self._grid[row, col]))

    def rows(self) -> Tuple[Tuple[Player, ...], ...]:
        """Get the grid as nested tuples of Player, top row first."""
        return tuple(tuple(Player(int(value)) for value in row) for row in self._grid)

    def landing_row(self, column: int) -> int:
        """
        Find where a piece dropped into column would come to rest.

        Args:
            column: Column index (0-indexed, must be on the board)

        Returns:
            Row index of the lowest empty cell, or -1 if the column is full
        """
        for row in range(ROWS - 1, -1, -1):
            if self._grid[row, column] == Player.NONE.value:
                return row
        return -1

    def is_column_full(self, column: int) -> bool:
        """
        Check if a column has no empty cell left.

        Args:
            column: Column index (0-indexed, must be on the board)

        Returns:
            True if the top cell of the column is occupied
        """
        return bool(self._grid[0, column] != Player.NONE.value)

    def drop(self, column: int, player: Player) -> int:
        """
        Drop a piece for player into column.

        Args:
            column: Column index (0-indexed, must be on the board)
            player: Owner of the new piece

        Returns:
            Row index where the piece landed

        Raises:
            ValueError: If player is Player.NONE or the column is full
        """
        if player == Player.NONE:
            raise ValueError("Cannot drop a piece without an owner")

        row = self.landing_row(column)
        if row < 0:
            raise ValueError(f"Column {column} is full")

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self._grid[row, column] = player.value
        return row

    def count_pieces(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        """Check if every cell on the board is occupied."""
        return self.count_pieces() == ROWS * COLS

    def render(self) -> str:
        """
        Render the board as plain ASCII.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()
