"""
Main entry point for TicTacToe.

Launches the window UI by default, or plays in the console with --no-ui.
In the console, moves are typed either as a cell number (1-9) or as
"row col" (both 0-2), depending on --input.

Run this script to play TicTacToe against the computer or a friend!
"""

from typing import Callable

from logic.config import GameConfig, GameMode
from logic.game_state import Mark, Outcome, Position
from logic.game_session import GameSession


INPUT_INDEX = "index"
INPUT_ROWCOL = "rowcol"

QUIT_COMMANDS = ("q", "quit", "exit")


def parse_move(text: str, input_mode: str = INPUT_INDEX) -> Position:
    """
    Turn typed input into a position.

    Args:
        text: What the player typed, e.g. "5" or "1 2" / "1,2".
        input_mode: INPUT_INDEX or INPUT_ROWCOL.

    Returns:
        Linear index or (row, col). Range is checked later by the validator.

    Raises:
        ValueError: If the text isn't numbers in the expected shape.
    """
    parts = text.replace(",", " ").split()

    if input_mode == INPUT_ROWCOL:
        if len(parts) != 2:
            raise ValueError("Enter a row and a column, e.g. '1 2'")
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Not a row and column: {text.strip()!r}") from None

    if len(parts) != 1:
        raise ValueError("Enter a single cell number (1-9)")
    try:
        return int(parts[0])
    except ValueError:
        raise ValueError(f"Not a cell number: {text.strip()!r}") from None


class ConsoleGame:
    """
    Console front end for a GameSession.

    Game flow:
    1. Print the board
    2. If it's the AI's turn, let it move
    3. Otherwise ask the current player for a move (re-ask on bad input)
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        session: GameSession,
        input_mode: str = INPUT_INDEX,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            session: The game to drive.
            input_mode: INPUT_INDEX or INPUT_ROWCOL.
            input_func: Where moves come from (input() by default).
        """
        self.session = session
        self.input_mode = input_mode
        self.input_func = input_func

    def _prompt(self) -> str:
        player = self.session.current_player.value
        if self.input_mode == INPUT_ROWCOL:
            return f"Player {player}, enter row and column (0-2), or q to quit: "
        return f"Player {player}, enter a cell (1-9), or q to quit: "

    def run(self) -> Outcome:
        """Play until the game ends or the player quits."""
        print("\n" + "="*40)
        mode = "against AI" if self.session.mode == GameMode.VS_AI else "against Player"
        print(f"   Tic Tac Toe - Playing {mode}")
        print("="*40)

        while not self.session.is_over():
            self.session.state.print_board()

            if self.session.is_ai_turn():
                move = self.session.play_ai_move()
                print(f"\nAI ({self.session.ai_player.value}) plays {move}")
                continue

            try:
                text = self.input_func(self._prompt())
            except EOFError:
                print("\nNo more input.")
                break

            if text.strip().lower() in QUIT_COMMANDS:
                print("Game abandoned.")
                break

            try:
                position = parse_move(text, self.input_mode)
            except ValueError as e:
                print(f"  {e}")
                continue

            result = self.session.submit_move(position)
            if not result:
                print(f"  {result.error_message}")

        if self.session.is_over():
            self.session.state.print_board()
            print(f"\n{self.session.result_message()}")
            print("\n" + "="*40)

        return self.session.outcome()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE.value,
        help="ai: play against the computer, pvp: two players (console only)"
    )
    parser.add_argument(
        "--input",
        choices=[INPUT_INDEX, INPUT_ROWCOL],
        default=INPUT_INDEX,
        help="Console move format: cell number or row/column"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print AI search statistics"
    )

    args = parser.parse_args()

    ai_player = Mark.X if args.ai_first else Mark(GameConfig.DEFAULT_AI_PLAYER)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(ai_player=ai_player, verbose=not args.quiet)
        ui.run()
        return

    session = GameSession(
        mode=GameMode(args.mode),
        ai_player=ai_player,
        verbose=not args.quiet
    )
    game = ConsoleGame(session, input_mode=args.input)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
