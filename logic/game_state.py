"""
Game state management for TicTacToe.
Tracks the board, the side to move, and the move history.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig


class Side(Enum):
    """The two sides in the game. X always moves first."""
    X = "X"
    O = "O"

    def opponent(self) -> "Side":
        """Get the opposite side."""
        return Side.O if self == Side.X else Side.X

    def __str__(self) -> str:
        return self.value


class GameStatus(Enum):
    """Where the game stands after the last applied move."""
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @classmethod
    def win_for(cls, side: Side) -> "GameStatus":
        return cls.X_WINS if side == Side.X else cls.O_WINS

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


# A cell is either empty (None) or holds a side's mark
Board = List[Optional[Side]]


class IllegalMoveError(ValueError):
    """Raised when a move is applied to an occupied cell or a finished game."""


def new_board() -> Board:
    """Create an empty 9-cell board."""
    return [None] * GameConfig.NUM_CELLS


def is_legal(board: Board, index: int) -> bool:
    """True if index is on the board and that cell is empty."""
    return (
        isinstance(index, int)
        and 0 <= index < GameConfig.NUM_CELLS
        and board[index] is None
    )


def apply_move(board: Board, index: int, side: Side) -> None:
    """
    Place side's mark on the board in place.

    Raises:
        IllegalMoveError: if the cell is off the board or already taken.
    """
    if not is_legal(board, index):
        raise IllegalMoveError(f"Cell {index} is not a legal move")
    board[index] = side


@dataclass
class Move:
    """
    A move in the game.
    """
    side: Side              # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is (0-8)

    @property
    def row(self) -> int:
        return self.index // GameConfig.BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % GameConfig.BOARD_SIZE


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9-cell board (None means empty, otherwise the Side that played there)
    - Side to move
    - Move history
    - Game status (in progress, won, draw)
    """

    board: Board = field(default_factory=new_board)

    # Side to move
    current_side: Side = Side.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result, set by WinChecker.update_game_state
    status: GameStatus = GameStatus.IN_PROGRESS

    def __post_init__(self):
        if len(self.board) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"Board must have exactly {GameConfig.NUM_CELLS} cells, got {len(self.board)}"
            )

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Optional[Side]:
        if self.status == GameStatus.X_WINS:
            return Side.X
        if self.status == GameStatus.O_WINS:
            return Side.O
        return None

    def make_move(self, index: int) -> Move:
        """
        Place the current side's mark at the given cell and pass the turn.

        Args:
            index: Cell index (0-8).

        Returns:
            The recorded Move.

        Raises:
            IllegalMoveError: if the game is over or the cell is not legal.
        """
        if self.is_game_over:
            raise IllegalMoveError("Game is already over!")

        apply_move(self.board, index, self.current_side)

        move = Move(
            side=self.current_side,
            index=index,
            move_number=len(self.moves),
        )
        self.moves.append(move)

        # Check for winner (done by external WinChecker)
        # Just switch turns here
        self.current_side = self.current_side.opponent()

        return move

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices, ascending."""
        return [index for index, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a copy of the game state that shares nothing mutable."""
        return GameState(
            board=list(self.board),
            current_side=self.current_side,
            moves=list(self.moves),
            status=self.status,
        )

    def reset(self):
        """Clear the board for a new game."""
        self.board = new_board()
        self.current_side = Side.X
        self.moves = []
        self.status = GameStatus.IN_PROGRESS
