"""
Display configuration for TicTacToe.
Window geometry, colours and fonts for the board image.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    All positions are in pixels from the top-left corner of the window.
    Colours are BGR, as OpenCV expects.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_WIDTH = 300
    WINDOW_HEIGHT = 500

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_SIZE = 100  # pixels per cell
    BOARD_PIXELS = CELL_SIZE * BOARD_SIZE  # 300

    CELL_OUTLINE = 2
    MARK_THICKNESS = 6
    MARK_MARGIN = CELL_SIZE // 5

    # ==================== MENU BUTTONS ====================
    # (x, y, width, height)
    BUTTON_AI = (50, 320, 200, 40)
    BUTTON_PLAYER = (50, 370, 200, 40)
    BUTTON_AI_TEXT = "Play against AI"
    BUTTON_PLAYER_TEXT = "Play against Player"
    BUTTON_OUTLINE = 2

    # Where the end-of-game message goes
    MESSAGE_POSITION = (50, 430)

    # How long the result stays up before the menu comes back
    END_MESSAGE_DELAY_MS = 3000

    # ==================== COLOURS (BGR) ====================
    BACKGROUND_COLOR = (255, 255, 255)
    CELL_COLOR = (255, 255, 255)
    OUTLINE_COLOR = (0, 0, 0)
    TEXT_COLOR = (0, 0, 0)
    BUTTON_COLOR = (200, 200, 200)
    X_COLOR = (255, 0, 0)     # Blue
    O_COLOR = (0, 0, 255)     # Red
    WIN_LINE_COLOR = (0, 180, 0)

    # ==================== FONT ====================
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    BUTTON_FONT_SCALE = 0.5
    MESSAGE_FONT_SCALE = 0.8
    FONT_THICKNESS = 2
