"""
Win checker for TicTacToe.
Checks if a side has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .game_state import Board, GameState, GameStatus, Side


# All possible winning lines (as cell index triples)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def has_won(board: Board, side: Side) -> bool:
    """True if any winning line is filled entirely with side's mark."""
    return any(
        board[a] == side and board[b] == side and board[c] == side
        for a, b, c in WINNING_LINES
    )


def is_draw(board: Board) -> bool:
    """
    True if no cell is empty.

    Check has_won for both sides first: a full board with a completed
    line is a win, not a draw.
    """
    return all(cell is not None for cell in board)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Side]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning Side, or None if no winner yet.
        """
        for side in Side:
            if has_won(board, side):
                return side

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.

        Args:
            board: The game board.

        Returns:
            True if the game is a draw.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return is_draw(board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state.board)

        if winner is not None:
            game_state.status = GameStatus.win_for(winner)
        elif is_draw(game_state.board):
            game_state.status = GameStatus.DRAW

        return game_state

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The game board.

        Returns:
            The first completed line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            first = board[line[0]]
            if first is not None and all(board[i] == first for i in line):
                return line
        return None
