"""
Tests for the players and the main game loop.
Randomness, input, and sleeping are all injected so every game is scripted.
Run with pytest, or directly: python test_main.py
"""

import io
import sys
from contextlib import redirect_stdout, redirect_stderr

import numpy as np

from logic.game_state import Cell, GameOutcome, GameState, Player
from logic.players import HumanPlayer, RandomPlayer
from main import TicTacToeGame, main


class ScriptedRng:
    """Stands in for numpy's Generator, returning preset numbers."""

    def __init__(self, numbers):
        self.numbers = list(numbers)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.numbers.pop(0)


def scripted_input(lines):
    """Input function that returns the given lines, then hits EOF."""
    remaining = list(lines)

    def read():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def run_game(game):
    """Play a game, returning (outcome, captured stdout)."""
    out = io.StringIO()
    with redirect_stdout(out):
        outcome = game.play()
    return outcome, out.getvalue()


# ==================== PLAYERS ====================

def test_human_reprompts_until_valid():
    human = HumanPlayer(Player.X, input_func=scripted_input(["abc", "10", "5"]))
    game = GameState()

    out = io.StringIO()
    with redirect_stdout(out):
        position = human.get_move(game)

    assert position == (1, 1)
    assert out.getvalue().splitlines() == [
        "Please enter a number",
        "Please enter a number between 1 and 9",
    ]
    # Reading input never touches the board
    assert len(game.get_empty_cells()) == 9


def test_human_input_eof_propagates():
    human = HumanPlayer(Player.X, input_func=scripted_input([]))
    try:
        human.get_move(GameState())
    except EOFError:
        pass
    else:
        raise AssertionError("expected EOFError")


def test_random_player_uses_keypad():
    rng = ScriptedRng([7, 3])
    computer = RandomPlayer(Player.O, rng=rng)

    assert computer.get_move(GameState()) == (0, 0)
    assert computer.get_move(GameState()) == (2, 2)
    assert rng.calls == [(1, 10), (1, 10)]


def test_random_player_seeded_range():
    computer = RandomPlayer(Player.O, seed=1234)
    positions = {computer.get_move(GameState()) for _ in range(500)}
    assert positions == {(r, c) for r in range(3) for c in range(3)}

    # Same seed, same sequence
    a = RandomPlayer(seed=7)
    b = RandomPlayer(rng=np.random.default_rng(7))
    assert [a.get_move(GameState()) for _ in range(20)] == \
        [b.get_move(GameState()) for _ in range(20)]


def test_player_roles():
    assert HumanPlayer().is_human
    assert not RandomPlayer().is_human
    assert HumanPlayer().player == Player.X
    assert RandomPlayer().player == Player.O


# ==================== GAME LOOP ====================

def test_human_wins_bottom_row():
    sleeps = []
    game = TicTacToeGame(
        human=HumanPlayer(Player.X, input_func=scripted_input(["1", "2", "3"])),
        computer=RandomPlayer(Player.O, rng=ScriptedRng([7, 8])),
        sleep_func=sleeps.append
    )

    outcome, output = run_game(game)

    assert outcome == GameOutcome.WIN
    assert game.game_state.last_player == Player.X
    assert [game.game_state.get_cell(2, c) for c in range(3)] == [Cell.X] * 3
    assert output.splitlines()[-1] == "Player X won!"
    assert "\nO | O | _\n_ | _ | _\nX | X | X\n" in output
    assert output.count("Player X's turn: choose a number between 1 and 9:") == 3
    assert output.count("Player O's turn") == 2
    assert sleeps == [1.0, 1.0]


def test_draw_with_retries():
    # Human tries the taken centre once, computer draws a taken corner once
    human_lines = ["7", "5", "9", "4", "2", "3"]
    rng = ScriptedRng([5, 7, 8, 6, 1])
    sleeps = []
    game = TicTacToeGame(
        human=HumanPlayer(Player.X, input_func=scripted_input(human_lines)),
        computer=RandomPlayer(Player.O, rng=rng),
        sleep_func=sleeps.append
    )

    outcome, output = run_game(game)

    assert outcome == GameOutcome.DRAW
    assert output.count("Please choose an empty cell") == 1
    assert output.splitlines()[-1] == "It's a draw!"
    assert output.endswith("\nX | O | X\nX | O | O\nO | X | X\n\nIt's a draw!\n")
    assert rng.numbers == []
    assert len(sleeps) == 4
    assert len(game.game_state.moves) == 9


def test_computer_retry_is_silent():
    rng = ScriptedRng([5, 5, 9])
    game = TicTacToeGame(
        human=HumanPlayer(Player.X, input_func=scripted_input([])),
        computer=RandomPlayer(Player.O, rng=rng),
        move_delay=0
    )
    game.game_state.apply_move((1, 1))
    game.game_state.switch_turn()

    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        game._computer_move(game.players[Player.O])

    assert out.getvalue() == "Player O's turn\n"
    assert err.getvalue() == ""
    assert game.game_state.get_cell(0, 2) == Cell.O
    assert rng.numbers == []


def test_computer_retry_debug_output():
    game = TicTacToeGame(
        human=HumanPlayer(Player.X, input_func=scripted_input([])),
        computer=RandomPlayer(Player.O, rng=ScriptedRng([5, 1])),
        move_delay=0,
        debug=True
    )
    game.game_state.apply_move((1, 1))
    game.game_state.switch_turn()

    err = io.StringIO()
    with redirect_stdout(io.StringIO()), redirect_stderr(err):
        game._computer_move(game.players[Player.O])

    assert err.getvalue().startswith("[DEBUG] Computer drew (1, 1), occupied.")


def test_winning_line_debug_output():
    game = TicTacToeGame(
        human=HumanPlayer(Player.X, input_func=scripted_input(["1", "2", "3"])),
        computer=RandomPlayer(Player.O, rng=ScriptedRng([7, 8])),
        move_delay=0,
        debug=True
    )

    err = io.StringIO()
    with redirect_stdout(io.StringIO()), redirect_stderr(err):
        game.play()

    assert err.getvalue() == "[DEBUG] Winning line: [(2, 0), (2, 1), (2, 2)]\n"


def test_computer_first_wins():
    game = TicTacToeGame(
        human_player=Player.O,
        human=HumanPlayer(Player.O, input_func=scripted_input(["7", "8"])),
        computer=RandomPlayer(Player.X, rng=ScriptedRng([5, 1, 9])),
        move_delay=0
    )

    outcome, output = run_game(game)

    assert outcome == GameOutcome.WIN
    assert output.splitlines()[-1] == "Player X won!"
    assert "Player X's turn\n" in output
    assert "Player O's turn: choose a number between 1 and 9:" in output


def test_main_stdin_eof_is_fatal():
    old_stdin = sys.stdin
    sys.stdin = io.StringIO("")
    err = io.StringIO()
    try:
        with redirect_stdout(io.StringIO()), redirect_stderr(err):
            code = main(["--no-delay", "--seed", "3"])
    finally:
        sys.stdin = old_stdin

    assert code == 1
    assert err.getvalue().startswith("ERROR: Failed to read line:")


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Player and Game Loop Tests")
    print("=" * 60)

    tests = [
        (name, func) for name, func in globals().items()
        if name.startswith("test_") and callable(func)
    ]

    all_passed = True
    for name, func in tests:
        try:
            func()
            print(f"  {name}: ✓ PASS")
        except Exception as e:
            print(f"  {name}: ✗ FAIL ({e!r})")
            all_passed = False

    print("=" * 60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
