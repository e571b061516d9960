"""
Main game loop for console TicTacToe.

This script ties together:
- Logic (game state, win checking)
- Players (human at the keyboard, random computer opponent)

Run this script to play TicTacToe against the computer!
"""

import sys
import time
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import GameState, GameOutcome, Player, CellOccupiedError
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.players import MoveSource, HumanPlayer, RandomPlayer


class TicTacToeGame:
    """
    Main controller for a human vs computer game.

    Game flow:
    1. Print the board and ask the current player for a move
    2. Apply it (human re-prompted, computer silently retried on a taken cell)
    3. Switch turns
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_player: Player = Player(GameConfig.HUMAN_PLAYER),
        human: Optional[MoveSource] = None,
        computer: Optional[MoveSource] = None,
        move_delay: float = GameConfig.COMPUTER_MOVE_DELAY,
        sleep_func: Callable[[float], None] = time.sleep,
        debug: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the game.

        Args:
            human_player: Which player the human controls.
            human: Move source for the human (default: reads stdin).
            computer: Move source for the computer (default: random).
            move_delay: Seconds to pause after the computer moves.
            sleep_func: Used for the pause.
            debug: Print [DEBUG] lines to stderr.
        """
        self.human_player = human_player
        self.computer_player = human_player.opposite()

        self.players = {
            self.human_player: human or HumanPlayer(self.human_player),
            self.computer_player: computer or RandomPlayer(self.computer_player),
        }

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.move_delay = move_delay
        self.sleep_func = sleep_func
        self.debug = debug

    def play(self) -> GameOutcome:
        """Run the game to the end and print the result."""
        while not self.game_state.is_over():
            self.game_state.print_board()

            source = self.players[self.game_state.current_player]
            if source.is_human:
                if not self._human_move(source):
                    continue
            else:
                self._computer_move(source)

            self.game_state.switch_turn()

        self._show_game_result()
        return self.game_state.outcome

    def _human_move(self, source: MoveSource) -> bool:
        """
        Ask the human for one move.

        Returns:
            True if a mark was placed, False if the cell was taken.
        """
        print(GameConfig.HUMAN_PROMPT.format(player=source.player.value))

        position = source.get_move(self.game_state)
        try:
            self.game_state.apply_move(position)
        except CellOccupiedError:
            print(GameConfig.CELL_OCCUPIED_MESSAGE)
            return False
        return True

    def _computer_move(self, source: MoveSource):
        """Draw random cells until one is free, then pause."""
        print(GameConfig.COMPUTER_PROMPT.format(player=source.player.value))

        while True:
            position = source.get_move(self.game_state)
            try:
                self.game_state.apply_move(position)
                break
            except CellOccupiedError:
                self._debug(
                    f"Computer drew {position}, occupied. "
                    f"Free cells: {self.validator.get_valid_moves(self.game_state)}"
                )

        if self.move_delay > 0:
            self.sleep_func(self.move_delay)

    def _show_game_result(self):
        """Print the final board and who won."""
        self.game_state.print_board()

        if self.game_state.outcome == GameOutcome.DRAW:
            print(GameConfig.DRAW_MESSAGE)
        else:
            print(GameConfig.WIN_MESSAGE.format(player=self.game_state.last_player.value))
            self._debug(f"Winning line: {WinChecker().get_winning_line(self.game_state.board)}")

    def _debug(self, message: str):
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause after the computer moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug information to stderr"
    )

    args = parser.parse_args(argv)

    # Determine players
    if args.computer_first:
        human_player = Player(GameConfig.COMPUTER_PLAYER)
    else:
        human_player = Player(GameConfig.HUMAN_PLAYER)

    game = TicTacToeGame(
        human_player=human_player,
        computer=RandomPlayer(human_player.opposite(), seed=args.seed),
        move_delay=0 if args.no_delay else GameConfig.COMPUTER_MOVE_DELAY,
        debug=args.debug or GameConfig.DEBUG_MODE
    )

    try:
        game.play()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    except (EOFError, OSError) as e:
        print(f"ERROR: Failed to read line: {str(e) or 'end of input'}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
