"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

from .config import GameConfig, GameMode
from .game_state import GameState, Mark, Outcome, GameStatus, to_cell, to_index
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, best_move
from .game_session import GameSession
