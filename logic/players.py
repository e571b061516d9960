"""
Move sources for console TicTacToe.
A human typing keypad numbers, and a computer picking cells at random.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from .config import GameConfig
from .game_state import GameState, Player, Position
from .move_validator import MoveValidator, position_from_number


class MoveSource(ABC):
    """Something that proposes the next move for one player."""

    def __init__(self, player: Player):
        self.player = player

    @property
    @abstractmethod
    def is_human(self) -> bool:
        """True if moves come from a person at the terminal."""

    @abstractmethod
    def get_move(self, game_state: GameState) -> Position:
        """
        Propose a candidate position.

        The position may be occupied; the caller decides what to do then.
        """


class HumanPlayer(MoveSource):
    """
    Reads moves from the terminal.

    Keeps asking until a line parses as a number between 1 and 9.
    Errors from the input function (EOFError, OSError) are not handled here.
    """

    is_human = True

    def __init__(
        self,
        player: Player = Player.X,
        input_func: Callable[[], str] = input
    ):
        """
        Initialize the human player.

        Args:
            player: Which mark the human places (default: X)
            input_func: Returns one line of input per call.
        """
        super().__init__(player)
        self.input_func = input_func
        self.validator = MoveValidator()

    def read_number(self) -> int:
        """Block until the human types a valid keypad number."""
        while True:
            result = self.validator.parse_input(self.input_func())
            if result.is_valid:
                return result.number
            print(result.error_message)

    def get_move(self, game_state: GameState) -> Position:
        return position_from_number(self.read_number())


class RandomPlayer(MoveSource):
    """
    A computer opponent that picks a keypad number uniformly at random.

    Every call is independent; it does not avoid occupied cells.
    """

    is_human = False

    def __init__(
        self,
        player: Player = Player.O,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = GameConfig.RANDOM_SEED
    ):
        """
        Initialize the random player.

        Args:
            player: Which mark the computer places (default: O)
            rng: Anything with an integers(low, high) method. Defaults to
                a numpy Generator built from seed.
            seed: Seed for the default generator (None = random).
        """
        super().__init__(player)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def get_move(self, game_state: GameState) -> Position:
        number = int(self.rng.integers(GameConfig.KEYPAD_MIN, GameConfig.KEYPAD_MAX + 1))
        return position_from_number(number)


# Quick test
if __name__ == "__main__":
    print("Testing RandomPlayer...")

    computer = RandomPlayer(Player.O, seed=42)
    game = GameState()

    draws = [computer.get_move(game) for _ in range(10)]
    print(f"10 seeded draws: {draws}")
    assert all(0 <= row <= 2 and 0 <= col <= 2 for row, col in draws)

    print("\nRandomPlayer test done!")
