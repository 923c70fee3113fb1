"""
TicTacToe console UI.
A text interface for playing against the Minimax AI.

Shows:
- The board, with free cells numbered 1-9
- Prompts for the human player's move
- Game result
"""

from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import Board, Side
from logic.move_validator import MoveValidator


class InputClosedError(Exception):
    """Raised when no more input can be read from the console."""


def render_board(board: Board) -> str:
    """
    Render the board as three text rows.

    Empty cells show their 1-based number, taken cells show X or O.
    """
    cells = [
        str(index + 1) if cell is None else str(cell)
        for index, cell in enumerate(board)
    ]
    size = GameConfig.BOARD_SIZE
    rows = [" ".join(cells[start:start + size]) for start in range(0, len(cells), size)]
    return "\n".join(rows)


class ConsoleUI:
    """
    Prints the board and game messages to the console.
    """

    def __init__(self, output_func: Callable[[str], None] = print):
        self.output = output_func

    def print_board(self, board: Board):
        """Print the board to console."""
        self.output("")
        self.output(render_board(board))

    def print_banner(self, title: str):
        self.output("=" * GameConfig.BANNER_WIDTH)
        self.output(f"   {title}")
        self.output("=" * GameConfig.BANNER_WIDTH)

    def print_result(self, winner: Optional[Side]):
        if winner is None:
            self.output(GameConfig.DRAW_MESSAGE)
        else:
            self.output(GameConfig.WIN_MESSAGE.format(side=winner))


class HumanPlayer:
    """
    Reads moves typed on the console.

    Keeps asking until the input names an empty cell 1-9.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the human player.

        Args:
            input_func: Reads one line after showing a prompt (default: input)
            output_func: Where retry messages go (default: print)
        """
        self.input = input_func or input
        self.output = output_func
        self.validator = MoveValidator()

    def choose_move(self, board: Board, side: Side) -> int:
        """
        Ask for a move until a legal one is typed.

        Args:
            board: Current board. Not modified.
            side: Side to move.

        Returns:
            0-based index of an empty cell.

        Raises:
            InputClosedError: if the console can not be read.
        """
        while True:
            try:
                line = self.input(GameConfig.PROMPT.format(side=side))
            except (EOFError, OSError) as e:
                raise InputClosedError(f"can not read user input ({e!r})") from e

            result = self.validator.parse_input(board, line)
            if result.is_valid:
                return result.index

            self.output(GameConfig.RETRY_MESSAGE.format(error=result.error_message))
