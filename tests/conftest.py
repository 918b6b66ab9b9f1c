import pytest

from connect4cli.debug import debug, DebugLevel
from connect4cli.game.rules import Game

# Column sequences (0-indexed) used across the test modules.
VERTICAL_WIN_ONE = [0, 1, 0, 1, 0, 1, 0]
HORIZONTAL_WIN_ONE = [0, 0, 1, 1, 2, 2, 3]
DIAGONAL_UP_WIN_ONE = [0, 1, 1, 2, 3, 2, 2, 3, 6, 3, 3]
# Player ONE opens in column 0, then TWO completes a top-left to bottom-right line
DIAGONAL_DOWN_WIN_TWO = [0, 6, 5, 5, 4, 3, 4, 4, 3, 0, 3, 3]


def _pair(a, b):
    return [a, b, b, a, a, b, b, a, a, b, b, a]


# Fills all 42 cells without ever connecting four.
DRAW_SEQUENCE = _pair(0, 2) + _pair(1, 3) + _pair(4, 6) + [5] * 6


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.NONE, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.NONE, enabled=True, components=[])


@pytest.fixture
def game():
    return Game()


def play(game, columns):
    for column in columns:
        game.apply_move(column)
    return game
