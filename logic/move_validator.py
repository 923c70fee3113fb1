"""
Move validator for TicTacToe.
Validates that moves follow the rules, and parses typed cell numbers.
"""

import re
from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, GameState, is_legal


# Plain ASCII digits with an optional leading plus sign
CELL_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None     # 0-based cell index when valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty cells
    2. Cell must be on the board
    3. Game must not be over
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not (0 <= index < GameConfig.NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        # Check if cell is empty
        if not is_legal(game_state.board, index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index]}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True, index=index)

    def parse_input(self, board: Board, text: str) -> ValidationResult:
        """
        Parse a cell number typed by a human (1-9).

        Args:
            board: Current board.
            text: One raw line of input.

        Returns:
            ValidationResult whose index is the 0-based cell on success.
        """
        text = text.strip()
        if not CELL_NUMBER_PATTERN.fullmatch(text):
            return ValidationResult(is_valid=False, error_message="Invalid number")
        number = int(text)

        if not (GameConfig.FIRST_CELL_NUMBER <= number <= GameConfig.LAST_CELL_NUMBER):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Value must be in between {GameConfig.FIRST_CELL_NUMBER} "
                    f"and {GameConfig.LAST_CELL_NUMBER}"
                )
            )

        index = number - GameConfig.FIRST_CELL_NUMBER
        if not is_legal(board, index):
            return ValidationResult(is_valid=False, error_message="Not a valid move")

        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the side to move.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices, ascending.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
