"""
Game configuration for TicTacToe.
All the settings for the board, the AI opponent, and console messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board size is fixed; only the wiring and messages are meant to change.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major (index = row * 3 + col)
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # Human input is 1-based (1-9), the board is 0-based (0-8)
    FIRST_CELL_NUMBER = 1
    LAST_CELL_NUMBER = NUM_CELLS

    # ==================== PLAYER SETTINGS ====================
    # X always moves first. These are Side values ("X" / "O").
    DEFAULT_HUMAN_SIDE = "X"
    DEFAULT_AI_SIDE = "O"

    # ==================== SEARCH SETTINGS ====================
    # Minimax scores from the searching side's point of view
    WIN_SCORE = 1
    DRAW_SCORE = 0
    LOSS_SCORE = -1

    # Print how many positions the AI looked at after each move
    SHOW_SEARCH_STATS = True

    # ==================== CONSOLE MESSAGES ====================
    PROMPT = "{side}: "
    AI_MOVE_MESSAGE = "{side}: {cell}"
    RETRY_MESSAGE = "{error}. Try Again!"
    WIN_MESSAGE = "{side} won!"
    DRAW_MESSAGE = "Draw!"
    BANNER_WIDTH = 60
