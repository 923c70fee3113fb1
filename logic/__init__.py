"""
Logic module for TicTacToe.
Handles game state, rules, and the Minimax AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import (
    Board,
    GameState,
    GameStatus,
    IllegalMoveError,
    Move,
    Side,
    apply_move,
    is_legal,
    new_board,
)
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WINNING_LINES, has_won, is_draw
from .ai_player import AIPlayer, MoveSource, best_move, evaluate, search
