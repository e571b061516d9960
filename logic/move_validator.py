"""
Move validator for console TicTacToe.
Turns keypad numbers into board positions and checks moves against the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Position


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    number: Optional[int] = None     # Parsed keypad number (1-9) when valid


def position_from_number(number: int) -> Position:
    """
    Map a keypad number to a board position.

    7 is the top-left cell and 3 the bottom-right, like a numeric keypad.
    Numbers outside 1-9 fall back to GameConfig.DEFAULT_POSITION.
    """
    return GameConfig.KEYPAD_LAYOUT.get(number, GameConfig.DEFAULT_POSITION)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be a whole number from 1 to 9
    2. Only empty cells are valid moves, and none once the game is over

    Placing the mark is left to GameState.apply_move(), which enforces
    the same rules by raising.
    """

    def parse_input(self, text: str) -> ValidationResult:
        """
        Validate one line of human input.

        Args:
            text: Raw line as typed (surrounding whitespace is ignored).

        Returns:
            ValidationResult with the parsed number, or the message to show.
        """
        try:
            number = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.NOT_A_NUMBER_MESSAGE
            )

        if not (GameConfig.KEYPAD_MIN <= number <= GameConfig.KEYPAD_MAX):
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.OUT_OF_RANGE_MESSAGE
            )

        return ValidationResult(is_valid=True, number=number)

    def get_valid_moves(self, game_state: GameState) -> List[Position]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_over():
            return []

        return game_state.get_empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    validator = MoveValidator()

    for text in ["abc", "10", "5"]:
        result = validator.parse_input(text)
        print(f"Input {text!r}: valid={result.is_valid}, error={result.error_message}")

    # Keypad layout
    for number in range(1, 10):
        print(f"  {number} -> {position_from_number(number)}")

    game = GameState()
    game.apply_move(position_from_number(5))
    print(f"Valid moves after centre: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
