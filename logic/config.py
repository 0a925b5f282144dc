"""
Game configuration for TicTacToe.
All the tunable numbers for the board, the search, and the game loop.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags override the per-run values (see tictactoe_cli.py).
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major (index = row * 3 + col)
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # Opening move for the minimax player on an empty board
    CENTER_CELL = 4

    # ==================== SEARCH SETTINGS ====================
    # No depth discount: a win is worth the same however far away it is
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== GAME LOOP SETTINGS ====================
    # Consecutive rejected moves from one player before the game is aborted
    MAX_REJECTED_MOVES = 3

    DEFAULT_X_NAME = "Player X"
    DEFAULT_O_NAME = "Player O"

    # ==================== UI SETTINGS ====================
    # Pause before a computer move in the Tkinter window (milliseconds)
    COMPUTER_DELAY_MS = 400
