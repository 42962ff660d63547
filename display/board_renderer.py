"""
Board renderer for TicTacToe.
Draws the game window as an image and maps clicks back to cells and buttons.
"""

import cv2
import numpy as np
from typing import Optional, List, Tuple

from logic.config import GameMode
from logic.game_state import GameState, Mark, to_index
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a GameState to a BGR image the size of the window.

    Layout (default config):
    - 3x3 grid of 100px cells in the top 300px
    - Mode buttons below the grid while the menu is showing
    - End-of-game message near the bottom
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def render(
        self,
        game_state: GameState,
        show_menu: bool = False,
        message: str = "",
        winning_line: Optional[List[Tuple[int, int]]] = None
    ) -> np.ndarray:
        """
        Draw the whole window.

        Args:
            game_state: State whose board to draw.
            show_menu: Draw the mode selection buttons.
            message: Text to show under the board (e.g. "Player X wins!").
            winning_line: (row, col) cells to strike through.

        Returns:
            BGR image of shape (WINDOW_HEIGHT, WINDOW_WIDTH, 3).
        """
        cfg = self.config
        image = np.full((cfg.WINDOW_HEIGHT, cfg.WINDOW_WIDTH, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)

        for row in range(cfg.BOARD_SIZE):
            for col in range(cfg.BOARD_SIZE):
                mark = game_state.board[row][col]
                if mark != Mark.EMPTY:
                    self._draw_mark(image, row, col, mark)

        if winning_line:
            self._draw_winning_line(image, winning_line)

        if show_menu:
            self._draw_button(image, cfg.BUTTON_AI, cfg.BUTTON_AI_TEXT)
            self._draw_button(image, cfg.BUTTON_PLAYER, cfg.BUTTON_PLAYER_TEXT)

        if message:
            x, y = cfg.MESSAGE_POSITION
            (_, text_height), _ = cv2.getTextSize(message, cfg.FONT, cfg.MESSAGE_FONT_SCALE, cfg.FONT_THICKNESS)
            # putText anchors at the baseline, MESSAGE_POSITION is the top-left
            cv2.putText(image, message, (x, y + text_height), cfg.FONT,
                        cfg.MESSAGE_FONT_SCALE, cfg.TEXT_COLOR, cfg.FONT_THICKNESS)

        return image

    def _draw_grid(self, image: np.ndarray):
        cfg = self.config
        size = cfg.CELL_SIZE
        for row in range(cfg.BOARD_SIZE):
            for col in range(cfg.BOARD_SIZE):
                top_left = (col * size, row * size)
                bottom_right = ((col + 1) * size - 1, (row + 1) * size - 1)
                cv2.rectangle(image, top_left, bottom_right, cfg.CELL_COLOR, -1)
                cv2.rectangle(image, top_left, bottom_right, cfg.OUTLINE_COLOR, cfg.CELL_OUTLINE)

    def _cell_center(self, row: int, col: int) -> Tuple[int, int]:
        size = self.config.CELL_SIZE
        return col * size + size // 2, row * size + size // 2

    def _draw_mark(self, image: np.ndarray, row: int, col: int, mark: Mark):
        """Draw X as two crossed lines, O as a circle."""
        cfg = self.config
        cx, cy = self._cell_center(row, col)
        marker_size = cfg.CELL_SIZE // 2 - cfg.MARK_MARGIN

        if mark == Mark.X:
            cv2.line(image,
                     (cx - marker_size, cy - marker_size),
                     (cx + marker_size, cy + marker_size),
                     cfg.X_COLOR, cfg.MARK_THICKNESS)
            cv2.line(image,
                     (cx + marker_size, cy - marker_size),
                     (cx - marker_size, cy + marker_size),
                     cfg.X_COLOR, cfg.MARK_THICKNESS)
        else:
            cv2.circle(image, (cx, cy), marker_size, cfg.O_COLOR, cfg.MARK_THICKNESS)

    def _draw_winning_line(self, image: np.ndarray, line: List[Tuple[int, int]]):
        start = self._cell_center(*line[0])
        end = self._cell_center(*line[-1])
        cv2.line(image, start, end, self.config.WIN_LINE_COLOR, self.config.MARK_THICKNESS)

    def _draw_button(self, image: np.ndarray, rect: Tuple[int, int, int, int], text: str):
        cfg = self.config
        x, y, w, h = rect
        cv2.rectangle(image, (x, y), (x + w, y + h), cfg.BUTTON_COLOR, -1)
        cv2.rectangle(image, (x, y), (x + w, y + h), cfg.OUTLINE_COLOR, cfg.BUTTON_OUTLINE)

        # Centre the label in the button
        (text_width, text_height), _ = cv2.getTextSize(text, cfg.FONT, cfg.BUTTON_FONT_SCALE, cfg.FONT_THICKNESS)
        text_x = x + (w - text_width) // 2
        text_y = y + (h + text_height) // 2
        cv2.putText(image, text, (text_x, text_y), cfg.FONT,
                    cfg.BUTTON_FONT_SCALE, cfg.TEXT_COLOR, cfg.FONT_THICKNESS)

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Map a click to a board position.

        Args:
            x: Pixel column in the window.
            y: Pixel row in the window.

        Returns:
            Linear index 1-9, or None if the click missed the board.
        """
        cfg = self.config
        if not (0 <= x < cfg.BOARD_PIXELS and 0 <= y < cfg.BOARD_PIXELS):
            return None

        row = y // cfg.CELL_SIZE
        col = x // cfg.CELL_SIZE
        return to_index(row, col)

    def button_at(self, x: int, y: int) -> Optional[GameMode]:
        """Which menu button (if any) contains the click."""
        cfg = self.config
        for rect, mode in ((cfg.BUTTON_AI, GameMode.VS_AI), (cfg.BUTTON_PLAYER, GameMode.VS_PLAYER)):
            bx, by, bw, bh = rect
            if bx <= x <= bx + bw and by <= y <= by + bh:
                return mode
        return None
