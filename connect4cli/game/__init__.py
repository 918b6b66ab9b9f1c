"""
connect4cli.game - Core game mechanics for Connect Four

This package contains the board representation and the game engine with
its move errors.
"""

from connect4cli.game.board import Board
from connect4cli.game.rules import (Game, MoveError, GameFinishedError,
                                    InvalidColumnError, ColumnFullError)

__all__ = ['Board', 'Game', 'MoveError', 'GameFinishedError',
           'InvalidColumnError', 'ColumnFullError']
