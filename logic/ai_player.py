"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional
from .config import GameConfig
from .game_state import GameState, Mark, to_cell


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive: every continuation is played out to a win,
    loss or draw, with no pruning and no preference for faster wins. The
    AI never loses (at worst, draw), and among equally good moves it
    always picks the lowest-numbered cell.
    """

    def __init__(self, player: Mark = Mark(GameConfig.DEFAULT_AI_PLAYER), verbose: bool = GameConfig.AI_VERBOSE):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            verbose: Print a summary after each search.
        """
        self.player = player
        self.opponent = player.opposite()
        self.verbose = verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the AI in the current position.

        The board is searched in place and left exactly as it was found.
        If it isn't the AI's turn in game_state, the search still plays
        for self.player and the mover is restored afterwards.

        Args:
            game_state: Current game state.

        Returns:
            Linear index (1-9) of the best move, or None if the board is full.
        """
        self.positions_evaluated = 0

        valid_moves = game_state.empty_positions()
        if not valid_moves:
            return None

        original_mover = game_state.current_player
        game_state.current_player = self.player

        best_score = None
        best_move = None

        try:
            for position in valid_moves:
                score = self._score_move(game_state, position, maximizing=False)

                # Strictly greater keeps the first move on ties
                if best_score is None or score > best_score:
                    best_score = score
                    best_move = position
        finally:
            game_state.current_player = original_mover

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def _score_move(self, game_state: GameState, position: int, maximizing: bool) -> int:
        """Play position for the mover, score the result, then take it back."""
        game_state.apply_move(position)
        game_state.switch_turn()
        try:
            return self.evaluate(game_state, maximizing)
        finally:
            game_state.switch_turn()
            game_state.undo_move(position)

    def evaluate(self, game_state: GameState, maximizing: bool) -> int:
        """
        Minimax score of a position.

        The mark placed at this level follows the role: the AI's when
        maximizing, its opponent's when minimizing. The recorded mover is
        restored before returning.

        Args:
            game_state: State to evaluate (restored before returning).
            maximizing: True if it's the AI's move.

        Returns:
            WIN_SCORE, LOSS_SCORE or DRAW_SCORE under best play.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if game_state.has_win(self.player):
            return GameConfig.WIN_SCORE
        if game_state.has_win(self.opponent):
            return GameConfig.LOSS_SCORE
        if game_state.is_full():
            return GameConfig.DRAW_SCORE

        original_mover = game_state.current_player
        game_state.current_player = self.player if maximizing else self.opponent
        try:
            scores = [
                self._score_move(game_state, position, not maximizing)
                for position in game_state.empty_positions()
            ]
        finally:
            game_state.current_player = original_mover

        return max(scores) if maximizing else min(scores)

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)

        if move is None:
            return "No moves available!"

        row, col = to_cell(move)

        return f"Place {self.player.value} at {move} (row {row}, col {col})"


def best_move(game_state: GameState, computer_mark: Mark) -> Optional[int]:
    """Optimal move for computer_mark, or None on a full board."""
    return AIPlayer(computer_mark, verbose=False).get_best_move(game_state)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    game = GameState.from_string("XX. .O. ...", current_player=Mark.O)
    game.print_board()
    print("\nAI is O. X is about to win with 3!")

    move = ai.get_best_move(game)
    print(f"AI's move: {move}")
    assert move == 3, f"Expected 3, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = GameState.from_string("OO. XX. X..", current_player=Mark.O)
    game2.print_board()
    print("\nAI is O. Can win with 3!")

    move = ai.get_best_move(game2)
    print(f"AI's move: {move}")
    assert move == 3, f"Expected 3, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
