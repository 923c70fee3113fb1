"""
AI player for TicTacToe.
Uses an exhaustive Minimax search to choose the best move.
"""

from typing import Callable, Optional, Protocol, Tuple

from .config import GameConfig
from .game_state import Board, Side, is_legal
from .win_checker import has_won, is_draw


class MoveSource(Protocol):
    """Anything that can pick a move for a side: a human or the AI."""

    def choose_move(self, board: Board, side: Side) -> int:
        """
        Pick a move.

        Args:
            board: Current board. Must not be modified.
            side: Side to move.

        Returns:
            0-based index of an empty cell.
        """
        ...


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        side: Side = Side.O,
        show_stats: bool = GameConfig.SHOW_SEARCH_STATS,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the AI player.

        Args:
            side: Which side the AI controls (default: O)
            show_stats: Print search statistics after each move.
            output_func: Where announcements go (default: print)
        """
        self.side = side
        self.show_stats = show_stats
        self.output = output_func

        # Keep track of how many positions the last search visited (for debugging)
        self.positions_evaluated = 0
        self.last_score = None

    def choose_move(self, board: Board, side: Side) -> int:
        """
        Pick a move for side and announce it.

        Args:
            board: Current board. Not modified.
            side: Side to move.

        Returns:
            0-based index of the chosen cell.
        """
        index = self.get_best_move(board, side)
        self.output(GameConfig.AI_MOVE_MESSAGE.format(side=side, cell=index + 1))
        return index

    def get_best_move(self, board: Board, side: Optional[Side] = None) -> int:
        """
        Run the search without announcing the move.

        Args:
            board: Current board. Not modified.
            side: Side to move (default: the AI's own side).

        Returns:
            0-based index of the best cell.
        """
        if side is None:
            side = self.side

        index, self.last_score = self.search(board, side)

        if self.show_stats:
            self.output(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {index + 1} (score: {self.last_score})"
            )

        return index

    def search(self, board: Board, side: Side) -> Tuple[int, int]:
        """
        Find the optimal move for side and its Minimax score.

        Ties go to the lowest index. The caller's board is not modified.

        Returns:
            (index, score) of the best move.

        Raises:
            ValueError: if the board is already decided or full.
        """
        if has_won(board, side) or has_won(board, side.opponent()) or is_draw(board):
            raise ValueError("Cannot search a finished board")

        self.positions_evaluated = 0
        simulated_board = list(board)
        best_score = None
        best_index = None

        for index in range(GameConfig.NUM_CELLS):
            if not is_legal(simulated_board, index):
                continue
            simulated_board[index] = side
            score = self._minimax(False, simulated_board, side.opponent())
            simulated_board[index] = None

            if best_score is None or score > best_score:
                best_score = score
                best_index = index

        return best_index, best_score

    def _minimax(self, maximize: bool, board: Board, side: Side) -> int:
        """
        Score a position by exhaustive Minimax.

        side is the side about to move. The score is from the point of view
        of the searching side: maximize is True when side is the searching side.

        The board is mutated while searching and restored before returning.

        Args:
            maximize: True on the searching side's plies.
            board: Board to evaluate.
            side: Side to move in this position.

        Returns:
            +1, 0 or -1 for a win, draw or loss of the searching side.
        """
        self.positions_evaluated += 1

        # Terminal checks, wins before the draw
        if has_won(board, side):
            return GameConfig.WIN_SCORE if maximize else GameConfig.LOSS_SCORE
        if has_won(board, side.opponent()):
            return GameConfig.LOSS_SCORE if maximize else GameConfig.WIN_SCORE
        if is_draw(board):
            return GameConfig.DRAW_SCORE

        scores = []
        for index in range(GameConfig.NUM_CELLS):
            if not is_legal(board, index):
                continue
            board[index] = side
            scores.append(self._minimax(not maximize, board, side.opponent()))
            board[index] = None

        return max(scores) if maximize else min(scores)


def evaluate(maximize: bool, board: Board, side: Side) -> int:
    """Minimax score of a position; see AIPlayer._minimax."""
    return AIPlayer(side, show_stats=False)._minimax(maximize, board, side)


def search(board: Board, side: Side) -> Tuple[int, int]:
    """(index, score) of the optimal move for side; see AIPlayer.search."""
    return AIPlayer(side, show_stats=False).search(board, side)


def best_move(board: Board, side: Side) -> int:
    """Get the optimal move for side (lowest index on ties)."""
    index, _ = search(board, side)
    return index


# Quick demo: the AI plays both sides
if __name__ == "__main__":
    from .game_state import GameState
    from .win_checker import WinChecker

    game = GameState()
    checker = WinChecker()
    ai = AIPlayer(show_stats=False)

    while not game.is_game_over:
        game.make_move(ai.choose_move(game.board, game.current_side))
        checker.update_game_state(game)

    print(f"Self-play result: {game.status.value}")
