"""
Tests for the Minimax AI player.
"""

import random

import pytest
from hypothesis import assume, given, settings, strategies as st

from logic.ai_player import AIPlayer, best_move, evaluate, search
from logic.game_state import GameState, GameStatus, Side, is_legal, new_board
from logic.win_checker import WinChecker, has_won

X, O = Side.X, Side.O
_ = None


def play_out(game: GameState, players) -> GameState:
    checker = WinChecker()
    while not game.is_game_over:
        side = game.current_side
        game.make_move(players[side].choose_move(game.board, side))
        checker.update_game_state(game)
    return game


@pytest.fixture(scope="module")
def self_play_game():
    ai = AIPlayer(show_stats=False, output_func=lambda message: None)
    return play_out(GameState(), {X: ai, O: ai})


# ==================== KNOWN POSITIONS ====================

def test_takes_immediate_win():
    board = [X, X, _, O, O, _, _, _, _]
    assert best_move(board, X) == 2
    index, score = search(board, X)
    assert (index, score) == (2, 1)


def test_blocks_immediate_loss():
    board = [O, O, _, _, X, _, _, _, _]
    assert best_move(board, X) == 2


def test_blocks_for_second_side():
    # X threatens the top row; O holds the centre
    board = [X, X, _, _, O, _, _, _, _]
    assert search(board, O) == (2, 0)


def test_prefers_win_over_block():
    # O can block X at 2 or win at 5
    board = [X, X, _, O, O, _, X, _, _]
    assert best_move(board, O) == 5


def test_empty_board_is_deterministic_draw():
    first = best_move(new_board(), X)
    second, score = search(new_board(), X)
    assert first == second == 0
    assert score == 0


def test_lost_position_still_returns_legal_move():
    # X threatens both 2 and 7; O can only block one
    board = [X, X, _, O, X, _, _, _, O]
    index, score = search(board, O)
    assert score == -1
    assert index == 2


# ==================== CONTRACT ====================

def test_search_leaves_board_unchanged():
    board = [X, _, _, _, O, _, _, _, _]
    before = list(board)
    best_move(board, X)
    assert board == before


def test_evaluate_restores_board():
    board = [X, O, _, _, X, _, _, _, _]
    before = list(board)
    evaluate(True, board, O)
    assert board == before


def test_evaluate_terminal_scores():
    won_by_x = [X, X, X, O, O, _, _, _, _]
    assert evaluate(True, won_by_x, X) == 1
    assert evaluate(False, won_by_x, X) == -1
    assert evaluate(True, won_by_x, O) == -1
    assert evaluate(False, won_by_x, O) == 1

    drawn = [X, O, X, X, O, O, O, X, X]
    assert evaluate(True, drawn, X) == 0
    assert evaluate(False, drawn, O) == 0


@pytest.mark.parametrize(
    "board",
    [
        [X, X, X, O, O, _, _, _, _],
        [X, O, X, X, O, O, O, X, X],
    ],
)
def test_search_on_finished_board_raises(board):
    with pytest.raises(ValueError):
        best_move(board, O)


@settings(max_examples=30, deadline=None)
@given(st.permutations(range(9)), st.integers(min_value=2, max_value=8))
def test_best_move_is_always_legal(order, played):
    game = GameState()
    checker = WinChecker()
    for index in order[:played]:
        game.make_move(index)
        checker.update_game_state(game)
        assume(not game.is_game_over)

    index = best_move(game.board, game.current_side)
    assert is_legal(game.board, index)


# ==================== OPTIMAL PLAY ====================

def test_self_play_is_a_draw(self_play_game):
    assert self_play_game.status == GameStatus.DRAW
    assert len(self_play_game.moves) == 9
    assert None not in self_play_game.board
    assert not has_won(self_play_game.board, X)
    assert not has_won(self_play_game.board, O)


class RandomPlayer:
    def __init__(self, seed):
        self.rng = random.Random(seed)

    def choose_move(self, board, side):
        return self.rng.choice([i for i, cell in enumerate(board) if cell is None])


@settings(max_examples=10, deadline=None)
@given(st.integers(min_value=0, max_value=8), st.integers(min_value=0, max_value=10_000))
def test_ai_never_loses_as_second_side(opening, seed):
    game = GameState()
    game.make_move(opening)
    ai = AIPlayer(O, show_stats=False, output_func=lambda message: None)
    play_out(game, {X: RandomPlayer(seed), O: ai})
    assert game.winner != X


# ==================== AI PLAYER ====================

def test_choose_move_announces_one_based_cell():
    messages = []
    ai = AIPlayer(X, show_stats=False, output_func=messages.append)
    index = ai.choose_move([X, X, _, O, O, _, _, _, _], X)
    assert index == 2
    assert messages == ["X: 3"]


def test_search_stats_are_reported():
    messages = []
    ai = AIPlayer(O, show_stats=True, output_func=messages.append)
    board = [X, X, _, _, O, _, _, _, _]
    index = ai.get_best_move(board)

    assert index == 2
    assert ai.positions_evaluated > 0
    assert ai.last_score == 0
    assert messages[0].startswith(f"AI evaluated {ai.positions_evaluated} positions")


def test_position_count_restarts_each_search():
    ai = AIPlayer(O, show_stats=False, output_func=lambda message: None)
    board = [X, X, _, _, O, _, _, _, _]

    ai.get_best_move(board)
    first = ai.positions_evaluated
    ai.get_best_move(board)

    assert first > 0
    assert ai.positions_evaluated == first
