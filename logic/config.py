"""
Game configuration for TicTacToe.
Board constants, scoring, and play modes.
"""

from enum import Enum


class GameMode(Enum):
    """Who sits on the other side of the board."""
    VS_AI = "ai"
    VS_PLAYER = "pvp"


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3 - the win lines and the search depend on it.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, linear index 1-9

    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== AI SETTINGS ====================
    # The computer plays O (second) unless told otherwise
    DEFAULT_AI_PLAYER = "O"
    DEFAULT_MODE = GameMode.VS_AI

    # Minimax scores (no depth bonus)
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # Print a summary line after every search
    AI_VERBOSE = True
