"""
Game state management for console TicTacToe.
Tracks the board, current player, and game outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


Position = Tuple[int, int]


class Cell(Enum):
    """What can sit in a board cell."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def glyph(self) -> str:
        """Single character used when printing the board."""
        return GameConfig.CELL_GLYPHS[self.name.lower()]


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The cell value this player places."""
        return Cell.X if self == Player.X else Cell.O


class GameOutcome(Enum):
    """Status of the game, derived from the board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class TicTacToeError(Exception):
    """Base class for game rule errors."""


class CellOccupiedError(TicTacToeError):
    """The target cell already holds a mark."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Cell ({row}, {col}) is already occupied!")
        self.row = row
        self.col = col


class InvalidPositionError(TicTacToeError, ValueError):
    """The target position is off the board."""


class GameOverError(TicTacToeError):
    """A move was attempted after the game ended."""


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


def empty_board() -> np.ndarray:
    """Create a board with every cell EMPTY."""
    size = GameConfig.BOARD_SIZE
    return np.full((size, size), Cell.EMPTY.value, dtype=np.int8)


@dataclass(eq=False)
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (cell codes, see Cell)
    - Current player
    - Who made the last move
    - Move history
    - Game outcome (in progress, win, draw)

    The turn is never advanced by apply_move(); the driver calls
    switch_turn() once the outcome of a move has been read.
    """

    # The 3x3 board of Cell values
    board: np.ndarray = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Player who placed the most recent mark (None before the first move)
    last_player: Optional[Player] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    outcome: GameOutcome = GameOutcome.IN_PROGRESS

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.last_player == other.last_player
            and self.moves == other.moves
            and self.outcome == other.outcome
        )

    def _check_bounds(self, row: int, col: int):
        size = GameConfig.BOARD_SIZE
        if not (0 <= row < size and 0 <= col < size):
            raise InvalidPositionError(
                f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at (row, col).

        Raises:
            InvalidPositionError: The position is off the board.
        """
        self._check_bounds(row, col)
        return Cell(int(self.board[row, col]))

    def apply_move(self, position: Position) -> None:
        """
        Place the current player's mark at the given position.

        Args:
            position: (row, col) with both indices in 0-2.

        Raises:
            GameOverError: The game has already been won or drawn.
            InvalidPositionError: The position is off the board.
            CellOccupiedError: The cell already holds a mark.
        """
        row, col = position

        if self.is_over():
            raise GameOverError("Game is already over!")

        if self.get_cell(row, col) != Cell.EMPTY:
            raise CellOccupiedError(row, col)

        # Place the mark
        self.board[row, col] = self.current_player.mark.value

        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))
        self.last_player = self.current_player

        self.outcome = self.evaluate_outcome()

    def switch_turn(self):
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()

    def evaluate_outcome(self) -> GameOutcome:
        """Recompute the outcome from the board alone."""
        from .win_checker import WinChecker
        return WinChecker().evaluate(self.board)

    def is_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.outcome != GameOutcome.IN_PROGRESS

    def get_empty_cells(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        rows, cols = np.nonzero(self.board == Cell.EMPTY.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def render(self) -> str:
        """Board as printed: blank line, three rows, blank line."""
        lines = [
            GameConfig.CELL_SEPARATOR.join(Cell(int(v)).glyph for v in row)
            for row in self.board
        ]
        return "\n" + "\n".join(lines) + "\n"

    def print_board(self):
        """Print the board to console."""
        print(self.render())


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a game
    moves = [
        (1, 1),  # X center
        (0, 0),  # O top-left
        (0, 2),  # X top-right
        (2, 2),  # O bottom-right
        (2, 0),  # X bottom-left - this should be a win!
    ]

    for row, col in moves:
        print(f"\n{game.current_player.value} moves to ({row}, {col})")
        game.apply_move((row, col))
        game.print_board()
        if game.is_over():
            break
        game.switch_turn()

    print(f"Outcome: {game.outcome.value}, last player: {game.last_player.value}")
    assert game.outcome == GameOutcome.WIN

    print("\nGameState test done!")
