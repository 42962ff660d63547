"""
Win checker for TicTacToe.
Reports the winner, draws, and which line won, from GameState's own rules.
"""

from typing import Optional, List, Tuple
from .game_state import GameState, GameStatus, Mark, WINNING_LINES


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return game_state.outcome().winner

    def check_draw(self, game_state: GameState) -> bool:
        """True if the board is full and nobody has a line."""
        return game_state.outcome().status == GameStatus.DRAW

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        winner = self.check_winner(game_state)
        if winner is None:
            return None

        for line in self.WINNING_LINES:
            if all(game_state.board[row][col] == winner for row, col in line):
                return line
        return None
