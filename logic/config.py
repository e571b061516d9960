"""
Game configuration for console TicTacToe.
All the settings for the board, players, and terminal output.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game plays and prints.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Numbers 1-9 are laid out like a numeric keypad:
    #   7 | 8 | 9
    #   4 | 5 | 6
    #   1 | 2 | 3
    KEYPAD_LAYOUT = {
        1: (2, 0),
        2: (2, 1),
        3: (2, 2),
        4: (1, 0),
        5: (1, 1),
        6: (1, 2),
        7: (0, 0),
        8: (0, 1),
        9: (0, 2),
    }
    KEYPAD_MIN = 1
    KEYPAD_MAX = 9

    # Where an unknown number lands (input validation never lets one through)
    DEFAULT_POSITION = (0, 0)

    # ==================== DISPLAY SETTINGS ====================
    CELL_GLYPHS = {
        "x": "X",
        "o": "O",
        "empty": "_",
    }
    CELL_SEPARATOR = " | "

    # ==================== PLAYER SETTINGS ====================
    # X always moves first
    HUMAN_PLAYER = "X"
    COMPUTER_PLAYER = "O"

    # Pause after the computer moves so the human can follow (seconds)
    COMPUTER_MOVE_DELAY = 1.0

    # None = fresh entropy every game
    RANDOM_SEED = None

    # ==================== MESSAGES ====================
    HUMAN_PROMPT = "Player {player}'s turn: choose a number between 1 and 9:"
    COMPUTER_PROMPT = "Player {player}'s turn"
    NOT_A_NUMBER_MESSAGE = "Please enter a number"
    OUT_OF_RANGE_MESSAGE = "Please enter a number between 1 and 9"
    CELL_OCCUPIED_MESSAGE = "Please choose an empty cell"
    DRAW_MESSAGE = "It's a draw!"
    WIN_MESSAGE = "Player {player} won!"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
