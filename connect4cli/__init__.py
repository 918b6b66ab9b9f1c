"""
connect4cli - Two-player Connect Four for the terminal

This package provides the Connect Four game engine (board, move validation,
win and draw detection) and a colored terminal front end for two players
sharing one keyboard.
"""

# Version number
__version__ = '0.1.0'
