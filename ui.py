"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board, drawn with OpenCV and displayed through Pillow
- Mode selection (against the AI or against another player)
- Game status and the result at the end
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.config import GameConfig, GameMode
from logic.game_state import Mark
from logic.game_session import GameSession

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Click a mode button to start, then click cells to play. In AI mode the
    computer answers straight after each human move.
    """

    def __init__(
        self,
        ai_player: Mark = Mark(GameConfig.DEFAULT_AI_PLAYER),
        verbose: bool = GameConfig.AI_VERBOSE
    ):
        """Initialize the UI."""
        self.config = DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.session = GameSession(ai_player=ai_player, verbose=verbose)

        # State
        self.in_menu = True
        self.showing_result = False
        self.message = ""
        self._menu_timer: Optional[str] = None

        self._create_ui()
        self._redraw()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Board canvas - the rendered image is exactly window sized
        self.canvas = tk.Canvas(
            main_frame,
            width=self.config.WINDOW_WIDTH,
            height=self.config.WINDOW_HEIGHT,
            highlightthickness=0
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self._on_click)

        self.status_label = ttk.Label(main_frame, text="Choose a mode to start")
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        ttk.Button(control_frame, text="Reset", command=self._reset_game).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Quit", command=self._quit).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Handle a mouse click on the board canvas."""
        if self.showing_result:
            return

        if self.in_menu:
            mode = self.renderer.button_at(event.x, event.y)
            if mode is not None:
                self._start_game(mode)
            return

        position = self.renderer.cell_at(event.x, event.y)
        if position is None:
            return

        result = self.session.submit_move(position)
        if not result:
            self.status_label.configure(text=result.error_message)
            return

        self._after_move()

    def _start_game(self, mode: GameMode):
        """Start a game in the chosen mode."""
        print(f"Starting game: {mode.value}")
        self.session.reset(mode)
        self.in_menu = False
        self.message = ""
        self._after_move()

    def _after_move(self):
        """Let the AI answer if it's its turn, then refresh the window."""
        move = self.session.play_ai_move()
        if move is not None:
            print(f"AI ({self.session.ai_player.value}) plays {move}")

        if self.session.is_over():
            self._show_result()
        else:
            self._update_status()
            self._redraw()

    def _show_result(self):
        """Show the result, then go back to the menu after a pause."""
        self.message = self.session.result_message()
        self.showing_result = True
        print(self.message)

        self.status_label.configure(text="Game over")
        self._redraw()
        self._menu_timer = self.root.after(self.config.END_MESSAGE_DELAY_MS, self._back_to_menu)

    def _back_to_menu(self):
        if self._menu_timer is not None:
            self.root.after_cancel(self._menu_timer)
            self._menu_timer = None

        self.showing_result = False
        self.in_menu = True
        self.message = ""
        self.session.reset()
        self.status_label.configure(text="Choose a mode to start")
        self._redraw()

    def _update_status(self):
        player = self.session.current_player.value
        if self.session.mode == GameMode.VS_AI:
            self.status_label.configure(text=f"Your turn ({player})")
        else:
            self.status_label.configure(text=f"Player {player}'s turn")

    def _redraw(self):
        """Render the board and put it on the canvas."""
        winning_line: Optional[list] = None
        if self.message:
            winning_line = self.session.win_checker.get_winning_line(self.session.state)

        frame = self.renderer.render(
            self.session.state,
            show_menu=self.in_menu,
            message=self.message,
            winning_line=winning_line
        )

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.canvas.image = photo  # Keep reference

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self._back_to_menu()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
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

    print("\n" + "="*40)
    print("   TicTacToe UI")
    print("="*40)
    print(f"   Computer plays: {ai_player.value}")
    print("="*40 + "\n")

    ui = TicTacToeUI(ai_player=ai_player, verbose=not args.quiet)
    ui.run()


if __name__ == "__main__":
    main()
