"""
utils.py - Constants, enumerations and scanning helpers for connect4cli

The board dimensions are fixed. Grids handled here are numpy arrays of shape
(ROWS, COLS) holding Player values, with row 0 at the top.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_MOVES_FOR_WIN = 2 * CONNECT_N - 1  # first player's fourth piece

Position = Tuple[int, int]


class Player(Enum):
    """Players, and the marker for an empty cell, no winner or a draw."""
    NONE = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the opposing player (NONE stays NONE)."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.NONE

    @property
    def label(self) -> str:
        """Name shown to people, e.g. 'Player 1'."""
        if self == Player.NONE:
            return "Nobody"
        return f"Player {self.value}"

    def __str__(self):
        if self == Player.ONE:
            return "X"
        elif self == Player.TWO:
            return "O"
        return " "


class Direction(Enum):
    """Axes probed during win detection, in scan order."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()  # bottom-left to top-right


# Direction vectors (row, col); dict order is the scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def run_from(grid: np.ndarray, row: int, col: int, direction: Direction) -> List[Position]:
    """
    Collect the run of same-owner cells starting at (row, col) and walking
    forward along direction, stopping at the edge, a different owner or
    once CONNECT_N cells have been collected.

    Args:
        grid: The game grid
        row: Row of the first cell
        col: Column of the first cell
        direction: Axis to walk along

    Returns:
        Positions in the run, origin first (empty if the origin is empty)
    """
    owner = grid[row, col]
    if owner == Player.NONE.value:
        return []

    dr, dc = DIRECTION_VECTORS[direction]
    run = [(row, col)]
    r, c = row + dr, col + dc
    while len(run) < CONNECT_N and is_valid_position(r, c) and grid[r, c] == owner:
        run.append((r, c))
        r += dr
        c += dc
    return run


def find_winning_line(grid: np.ndarray) -> Tuple[Player, List[Position]]:
    """
    Scan the grid for the first four-in-a-row.

    Cells are visited in row-major order and, for each occupied cell, the
    directions in DIRECTION_VECTORS order. The first run reaching CONNECT_N
    decides the result.

    Args:
        grid: The game grid

    Returns:
        (winner, positions of the line), or (Player.NONE, []) if there is none
    """
    for row in range(ROWS):
        for col in range(COLS):
            if grid[row, col] == Player.NONE.value:
                continue
            for direction in DIRECTION_VECTORS:
                line = run_from(grid, row, col, direction)
                if len(line) >= CONNECT_N:
                    return Player(int(grid[row, col])), line
    return Player.NONE, []


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art with 1-based column numbers underneath.

    Args:
        grid: The game grid

    Returns:
        Multi-line string representation
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    lines = [border]
    for row in range(ROWS):
        cells = [str(Player(int(value))) if value else "." for value in grid[row]]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col + 1) for col in range(COLS)) + "|")
    return "\n".join(lines)
