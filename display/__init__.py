"""
Display module for TicTacToe.
Draws the board window and maps clicks to cells.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
