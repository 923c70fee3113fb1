"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (game state, win checking, Minimax AI)
- UI (console board, human input)

Run this script to play TicTacToe against the computer!
"""

import sys
from typing import Dict, Optional

from logic.config import GameConfig
from logic.game_state import GameState, GameStatus, Side
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer, MoveSource

from ui import ConsoleUI, HumanPlayer, InputClosedError


class TicTacToeGame:
    """
    Main controller for a TicTacToe game.

    Game flow:
    1. The board is shown
    2. The side to move (X first) picks a cell through its move source
    3. The move is applied and the board is checked for a win
    4. Repeat until someone wins or all 9 cells are taken (draw)
    """

    def __init__(self, players: Dict[Side, MoveSource], ui: Optional[ConsoleUI] = None):
        """
        Initialize the game.

        Args:
            players: Move source for each side. Anything with a
                choose_move(board, side) method works.
            ui: Console UI to print to.
        """
        self.players = players
        self.ui = ui or ConsoleUI()
        self.game_state = GameState()
        self.win_checker = WinChecker()

    def play(self) -> GameStatus:
        """
        Play one game to the end.

        Returns:
            The final GameStatus.
        """
        sides = [Side.X, Side.O]

        for round_number in range(GameConfig.NUM_CELLS):
            side = sides[round_number % 2]
            self.ui.print_board(self.game_state.board)

            index = self.players[side].choose_move(self.game_state.board, side)
            self.game_state.make_move(index)

            # Check for winner
            self.win_checker.update_game_state(self.game_state)

            if self.game_state.winner is not None:
                break

        self.ui.print_board(self.game_state.board)
        self.ui.print_result(self.game_state.winner)

        return self.game_state.status


def build_players(
    ai_first: bool = False,
    self_play: bool = False,
    show_stats: bool = GameConfig.SHOW_SEARCH_STATS
) -> Dict[Side, MoveSource]:
    """
    Wire a move source to each side.

    By default the human plays X and the AI plays O.
    """
    human_side = Side(GameConfig.DEFAULT_HUMAN_SIDE)
    ai_side = Side(GameConfig.DEFAULT_AI_SIDE)
    if ai_first:
        human_side, ai_side = ai_side, human_side

    if self_play:
        return {side: AIPlayer(side, show_stats=show_stats) for side in Side}

    return {
        human_side: HumanPlayer(),
        ai_side: AIPlayer(ai_side, show_stats=show_stats),
    }


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a Minimax AI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Let the AI play both sides"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print search statistics"
    )

    args = parser.parse_args(argv)

    players = build_players(
        ai_first=args.ai_first,
        self_play=args.self_play,
        show_stats=not args.quiet
    )
    game = TicTacToeGame(players)

    game.ui.print_banner("TicTacToe - Minimax AI")

    try:
        game.play()
    except InputClosedError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
