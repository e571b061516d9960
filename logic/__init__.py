"""
Logic module for console TicTacToe.
Handles game state, rules, and the human and computer players.
"""

from .config import GameConfig
from .game_state import (
    Cell,
    GameOutcome,
    GameState,
    Move,
    Player,
    TicTacToeError,
    CellOccupiedError,
    InvalidPositionError,
    GameOverError,
)
from .move_validator import MoveValidator, ValidationResult, position_from_number
from .win_checker import WinChecker
from .players import MoveSource, HumanPlayer, RandomPlayer
