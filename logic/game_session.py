"""
Game session for TicTacToe.
The turn-taking loop shared by the console and window front ends.
"""

from typing import Optional
from .config import GameConfig, GameMode
from .game_state import GameState, Mark, Outcome, GameStatus, Position
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer


class GameSession:
    """
    One game of TicTacToe, human against human or against the AI.

    Game flow:
    1. The mover submits a move (human input or AI search)
    2. The move is validated and applied
    3. The mover who just played is checked for a win, then for a draw
    4. Turns switch only while the game is still going
    """

    def __init__(
        self,
        mode: GameMode = GameConfig.DEFAULT_MODE,
        ai_player: Mark = Mark(GameConfig.DEFAULT_AI_PLAYER),
        verbose: bool = GameConfig.AI_VERBOSE
    ):
        """
        Initialize the session.

        Args:
            mode: VS_AI or VS_PLAYER.
            ai_player: Which mark the AI plays in VS_AI mode.
            verbose: Let the AI print its search summary.
        """
        self.mode = mode
        self.ai_player = ai_player
        self.verbose = verbose

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.reset()

    def reset(self, mode: Optional[GameMode] = None):
        """Start a new game, optionally switching mode."""
        if mode is not None:
            self.mode = mode

        self.state = GameState()
        self.ai: Optional[AIPlayer] = None
        if self.mode == GameMode.VS_AI:
            self.ai = AIPlayer(self.ai_player, verbose=self.verbose)

    @property
    def current_player(self) -> Mark:
        return self.state.current_mover()

    def submit_move(self, position: Position) -> ValidationResult:
        """
        Play a move for the current player.

        Args:
            position: Linear index 1-9 or (row, col).

        Returns:
            ValidationResult; on failure nothing changed.
        """
        result = self.validator.validate_move(self.state, position)
        if not result:
            return result

        self.state.apply_move(position)

        # Outcome is checked before the turn passes on
        if self.state.outcome().is_ongoing:
            self.state.switch_turn()

        return result

    def is_ai_turn(self) -> bool:
        """True if the AI should move now."""
        return (
            self.ai is not None
            and not self.is_over()
            and self.state.current_mover() == self.ai_player
        )

    def play_ai_move(self) -> Optional[int]:
        """
        Let the AI move if it's its turn.

        Returns:
            The position played, or None if the AI had nothing to do.
        """
        if not self.is_ai_turn():
            return None

        move = self.ai.get_best_move(self.state)
        if move is None:
            return None

        self.submit_move(move)
        return move

    def outcome(self) -> Outcome:
        return self.state.outcome()

    def is_over(self) -> bool:
        return not self.state.outcome().is_ongoing

    def result_message(self) -> Optional[str]:
        """End-of-game message, or None while the game is running."""
        result = self.state.outcome()
        if result.status == GameStatus.WIN:
            return f"Player {result.winner.value} wins!"
        if result.status == GameStatus.DRAW:
            return "It's a draw!"
        return None
