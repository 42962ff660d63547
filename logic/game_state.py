"""
Game state management for TicTacToe.
Tracks the board and whose turn it is, and knows the rules.
"""

from enum import Enum
from typing import Optional, List, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """What can sit in a cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY


class GameStatus(Enum):
    """Where the game stands."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a game position.

    winner is only set when status is WIN.
    """
    status: GameStatus
    winner: Optional[Mark] = None

    @property
    def is_ongoing(self) -> bool:
        return self.status == GameStatus.ONGOING


# A move is either a linear index (1-9) or a (row, col) pair
Position = Union[int, Tuple[int, int]]

SIZE = GameConfig.BOARD_SIZE

# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES: List[List[Tuple[int, int]]] = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]

# Characters used by to_string()/from_string()
_MARK_CHARS = {Mark.EMPTY: ".", Mark.X: "X", Mark.O: "O"}
_CHAR_MARKS = {char: mark for mark, char in _MARK_CHARS.items()}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def to_cell(position: Position) -> Optional[Tuple[int, int]]:
    """
    Convert a position to (row, col).

    Args:
        position: Linear index 1-9, or a (row, col) pair with both in 0-2.

    Returns:
        (row, col), or None if the position doesn't address a cell.
    """
    if _is_int(position):
        if not 1 <= position <= GameConfig.NUM_CELLS:
            return None
        return (position - 1) // SIZE, (position - 1) % SIZE

    if isinstance(position, tuple) and len(position) == 2:
        row, col = position
        if _is_int(row) and _is_int(col) and 0 <= row < SIZE and 0 <= col < SIZE:
            return row, col

    return None


def to_index(row: int, col: int) -> int:
    """Convert (row, col) to the 1-based linear index."""
    return row * SIZE + col + 1


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board (Mark.EMPTY, Mark.X or Mark.O per cell)
    - The player to move

    Turn switching is left to the caller: apply_move() only places a mark.
    """

    board: List[List[Mark]] = field(
        default_factory=lambda: [[Mark.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
    )

    current_player: Mark = Mark(GameConfig.FIRST_PLAYER)

    def legal(self, position: Position) -> bool:
        """True if position addresses an empty cell."""
        cell = to_cell(position)
        if cell is None:
            return False
        row, col = cell
        return self.board[row][col] == Mark.EMPTY

    def apply_move(self, position: Position) -> bool:
        """
        Place the current player's mark at position.

        Args:
            position: Linear index 1-9 or (row, col).

        Returns:
            True if the mark was placed, False (board untouched) if the
            position is out of range or already taken.
        """
        if not self.legal(position):
            return False

        row, col = to_cell(position)
        self.board[row][col] = self.current_player
        return True

    def undo_move(self, position: Position):
        """Clear a cell set by apply_move(). The cell must be occupied."""
        cell = to_cell(position)
        assert cell is not None, f"Cannot undo invalid position {position!r}"
        row, col = cell
        assert self.board[row][col] != Mark.EMPTY, f"Cannot undo empty cell {position!r}"
        self.board[row][col] = Mark.EMPTY

    def switch_turn(self):
        """Hand the move to the other player."""
        self.current_player = self.current_player.opposite()

    def current_mover(self) -> Mark:
        """Get the player to move."""
        return self.current_player

    def has_win(self, player: Mark) -> bool:
        """True if player holds a full row, column, or diagonal."""
        board = self.board
        for line in WINNING_LINES:
            if all(board[row][col] == player for row, col in line):
                return True
        return False

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return all(cell != Mark.EMPTY for row in self.board for cell in row)

    def empty_positions(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Linear indices in row-major order (1 first).
        """
        empty = []
        for row in range(SIZE):
            for col in range(SIZE):
                if self.board[row][col] == Mark.EMPTY:
                    empty.append(to_index(row, col))
        return empty

    def outcome(self) -> Outcome:
        """
        Work out the result of the current position.

        The player to move is checked first, since a win can only appear
        for whoever just played and turns switch after the check.
        """
        mover = self.current_player
        for player in (mover, mover.opposite()):
            if self.has_win(player):
                return Outcome(GameStatus.WIN, player)

        if self.is_full():
            return Outcome(GameStatus.DRAW)

        return Outcome(GameStatus.ONGOING)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[list(row) for row in self.board],
            current_player=self.current_player
        )

    def to_string(self) -> str:
        """Board as 9 characters, row-major: 'X', 'O' or '.'."""
        return "".join(_MARK_CHARS[cell] for row in self.board for cell in row)

    @classmethod
    def from_string(cls, cells: str, current_player: Mark = Mark.X) -> "GameState":
        """
        Build a state from a 9 character string (see to_string()).

        Whitespace is ignored, so "XX. / .O. / ..." style layouts work.

        Raises:
            ValueError: If the string isn't 9 valid cell characters.
        """
        chars = [c for c in cells if not c.isspace() and c != "/"]
        if len(chars) != GameConfig.NUM_CELLS:
            raise ValueError(f"Expected {GameConfig.NUM_CELLS} cells, got {len(chars)}")

        try:
            marks = [_CHAR_MARKS[c.upper()] for c in chars]
        except KeyError as e:
            raise ValueError(f"Unknown cell character {e.args[0]!r}") from None

        board = [marks[row * SIZE:(row + 1) * SIZE] for row in range(SIZE)]
        return cls(board=board, current_player=current_player)

    def print_board(self):
        """Print the board to console, with the move numbers beside it."""
        print()
        for row in range(SIZE):
            numbers = " ".join(str(to_index(row, col)) for col in range(SIZE))
            cells = " ".join(
                "-" if cell == Mark.EMPTY else cell.value for cell in self.board[row]
            )
            print(f"  {cells}    {numbers}")

        result = self.outcome()
        if result.status == GameStatus.WIN:
            print(f"\n{result.winner.value} WINS!")
        elif result.status == GameStatus.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    for position in [5, 1, 3, 7, 4, 6, 9]:
        print(f"\n{game.current_player.value} moves to {position}")
        game.apply_move(position)
        if game.outcome().is_ongoing:
            game.switch_turn()
        game.print_board()

    print("\nGame state test done!")
