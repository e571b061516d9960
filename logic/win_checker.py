"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import Cell, GameOutcome


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
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

    def check_winner(self, board: np.ndarray) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: 3x3 array of Cell values.

        Returns:
            The winning mark (Cell.X or Cell.O), or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: np.ndarray,
        line: List[Tuple[int, int]]
    ) -> Optional[Cell]:
        """Return the mark filling the whole line, or None."""
        rows, cols = zip(*line)
        values = board[list(rows), list(cols)]

        if values[0] == Cell.EMPTY.value:
            return None  # Empty cell, no winner on this line

        if np.all(values == values[0]):
            return Cell(int(values[0]))

        return None

    def check_draw(self, board: np.ndarray) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return not np.any(board == Cell.EMPTY.value)

    def evaluate(self, board: np.ndarray) -> GameOutcome:
        """
        Classify the board.

        Args:
            board: 3x3 array of Cell values.

        Returns:
            WIN if any line is complete, DRAW if the board is full,
            IN_PROGRESS otherwise.
        """
        if self.check_winner(board) is not None:
            return GameOutcome.WIN
        if self.check_draw(board):
            return GameOutcome.DRAW
        return GameOutcome.IN_PROGRESS

    def get_winning_line(self, board: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    from .game_state import GameState

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Diagonal win
    game = GameState()
    for position in [(0, 0), (1, 1), (2, 2)]:
        game.apply_move(position)

    winner = checker.check_winner(game.board)
    print(f"Test 1 (diagonal): winner = {winner}, line = {checker.get_winning_line(game.board)}")
    assert winner == Cell.X

    # Test 2: Full board, no line
    board = np.array([[1, 2, 1], [1, 2, 2], [2, 1, 1]], dtype=np.int8)
    outcome = checker.evaluate(board)
    print(f"Test 2 (draw): outcome = {outcome}")
    assert outcome == GameOutcome.DRAW

    print("\nWinChecker test done!")
