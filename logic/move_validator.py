"""
Move validator for TicTacToe.
Validates that moves follow the rules and explains why they don't.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, Position, to_cell


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be 1-9, or (row, col) with both 0-2
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, position: Position) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            position: Linear index 1-9 or (row, col).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not game_state.outcome().is_ongoing:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        cell = to_cell(position)
        if cell is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Use 1-9 or (row, col) with 0-2."
            )

        row, col = cell
        if not game_state.legal(position):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {game_state.board[row][col].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Linear indices of empty cells, or [] once the game is over.
        """
        if not game_state.outcome().is_ongoing:
            return []

        return game_state.empty_positions()
