"""
Tests for classic_games.core.search

Tests the minimax / alpha-beta Tic-Tac-Toe search.
"""

import math
import time

import numpy as np
import pytest

from classic_games.core import search
from classic_games.core.types import Player, SearchResult
from conftest import make_board

X, O = Player.X, Player.O


class TestWinner:
    """Win detection tests."""

    @pytest.mark.parametrize("rows", [
        ("XXX", "OO.", "..."),  # Top row
        ("OO.", "XXX", "..."),  # Middle row
        ("OO.", "...", "XXX"),  # Bottom row
        ("XO.", "XO.", "X.."),  # Left column
        ("OX.", ".X.", "OX."),  # Middle column
        ("O.X", "O.X", "..X"),  # Right column
        ("XO.", "OX.", "..X"),  # Main diagonal
        ("O.X", "OX.", "X.."),  # Anti-diagonal
    ])
    def test_all_win_lines(self, rows):
        """All 8 win lines are detected."""
        assert search.winner(make_board(*rows)) is X

    def test_no_winner(self, empty_board):
        """Empty and undecided boards have no winner."""
        assert search.winner(empty_board) is None
        assert search.winner(make_board("XOX", "XOO", "OXX")) is None

    def test_o_wins(self):
        """Either side can be reported."""
        assert search.winner(make_board("OOO", "XX.", "X..")) is O


class TestBoardQueries:
    """is_full / available_moves tests."""

    def test_is_full(self, empty_board):
        assert not search.is_full(empty_board)
        assert search.is_full(make_board("XOX", "XOO", "OXX"))

    def test_available_moves_row_major(self):
        """Empty cells come back row by row, columns ascending."""
        board = make_board("X.O", "..X", "O..")
        assert search.available_moves(board) == [(0, 1), (1, 0), (1, 1), (2, 1), (2, 2)]

    def test_open_cells_flat_indices(self):
        """open_cells works on the flat board the recursion uses."""
        cells = [1, 0, 2, 0, 0, 1, 2, 0, 0]
        assert search.open_cells(cells) == [1, 3, 4, 7, 8]
        assert search.open_cells([1, 2, 1, 1, 2, 2, 2, 1, 1]) == []


class TestEvaluate:
    """Terminal evaluation tests."""

    def test_searching_side_win(self):
        """Win scores 10 - depth."""
        board = make_board("OOO", "XX.", "X..")
        assert search.evaluate(board, O, X, 0) == 10
        assert search.evaluate(board, O, X, 3) == 7

    def test_opponent_win(self):
        """Loss scores depth - 10."""
        board = make_board("OOO", "XX.", "X..")
        assert search.evaluate(board, X, O, 2) == -8

    def test_draw(self):
        """Full board without a line scores 0."""
        assert search.evaluate(make_board("XOX", "XOO", "OXX"), X, O, 5) == 0

    def test_not_terminal(self, empty_board):
        """Ongoing positions have no terminal score."""
        assert search.evaluate(empty_board, X, O, 0) is None


class TestMinimax:
    """Recursive minimax tests."""

    def test_terminal_board_returns_evaluation(self):
        """No recursion on a decided board."""
        board = make_board("OOO", "XX.", "X..")
        assert search.minimax(board, 4, True, -math.inf, math.inf, O, X) == 6

    @pytest.mark.parametrize("maximizing", [True, False])
    def test_empty_board_is_draw(self, empty_board, maximizing):
        """Perfect play from an empty board draws."""
        assert search.minimax(empty_board, 0, maximizing, -math.inf, math.inf, X, O) == 0

    def test_does_not_mutate(self):
        """minimax leaves its board untouched."""
        board = make_board("X..", ".O.", "...")
        before = board.copy()
        search.minimax(board, 0, True, -math.inf, math.inf, X, O)
        np.testing.assert_array_equal(board, before)

    def test_score_bounds(self):
        """Scores stay within [-10, 10]."""
        board = make_board("X..", "...", "...")
        score = search.minimax(board, 0, False, -math.inf, math.inf, X, O)
        assert -10 <= score <= 10


class TestBestMove:
    """best_move tests."""

    def test_returns_search_result(self, empty_board):
        """Result is a (row, col, score) named tuple."""
        result = search.best_move(empty_board, X, O)
        assert isinstance(result, SearchResult)

    def test_immediate_win_over_block(self):
        """Taking the win beats blocking the opponent's threat."""
        board = make_board("OO.", "XX.", "...")
        result = search.best_move(board, O, X)
        assert (result.row, result.col) == (0, 2)
        assert result.score == 10

    def test_forced_block(self):
        """The only non-losing move blocks the open line."""
        board = make_board("XX.", ".O.", "...")
        result = search.best_move(board, O, X)
        assert (result.row, result.col) == (0, 2)

    def test_diagonal_win(self):
        """AI completes the anti-diagonal."""
        board = make_board("X..", ".O.", "O..")
        result = search.best_move(board, O, X)
        assert (result.row, result.col) == (0, 2)
        assert result.score == 10

    def test_x_as_searching_side(self):
        """The search works for either mark."""
        board = make_board("X.X", "OO.", "...")
        result = search.best_move(board, X, O)
        assert (result.row, result.col) == (0, 1)

    def test_empty_board_first_cell_tie_break(self, empty_board):
        """All openings draw, so the first cell in row-major order wins the tie."""
        result = search.best_move(empty_board, X, O)
        assert (result.row, result.col, result.score) == (0, 0, 0)

    def test_lost_position_scores_fast_loss(self):
        """Against a double threat every reply loses on the next ply."""
        board = make_board("XX.", "XO.", "..O")
        result = search.best_move(board, O, X)
        assert result.score == -9
        assert (result.row, result.col) == (0, 2)

    def test_last_cell(self):
        """With one empty cell that cell is returned."""
        board = make_board("XOX", "XOO", "OX.")
        result = search.best_move(board, X, O)
        assert (result.row, result.col) == (2, 2)

    def test_does_not_mutate(self):
        """best_move leaves its board untouched."""
        board = make_board("X..", ".O.", "...")
        before = board.copy()
        search.best_move(board, O, X)
        np.testing.assert_array_equal(board, before)

    def test_completes_quickly(self, empty_board):
        """A full search from an empty board finishes within 200 ms."""
        start = time.perf_counter()
        search.best_move(empty_board, X, O)
        assert time.perf_counter() - start < 0.2


class TestNeverLoses:
    """Exhaustive check that the AI never loses to any opponent line."""

    @staticmethod
    def _play_out(board, ai, human, to_move, cache, outcomes):
        w = search.winner(board)
        if w is not None or search.is_full(board):
            outcomes[w] = outcomes.get(w, 0) + 1
            return

        if to_move is ai:
            key = board.tobytes()
            if key not in cache:
                cache[key] = search.best_move(board, ai, human)
            r = cache[key]
            child = board.copy()
            child[r.row, r.col] = ai
            TestNeverLoses._play_out(child, ai, human, human, cache, outcomes)
            return

        for r, c in search.available_moves(board):
            child = board.copy()
            child[r, c] = human
            TestNeverLoses._play_out(child, ai, human, ai, cache, outcomes)

    @pytest.mark.parametrize("ai, first", [
        (X, X),
        (X, O),
        (O, X),
        (O, O),
    ])
    def test_ai_never_loses(self, empty_board, ai, first):
        """Every opponent strategy ends in an AI win or a draw."""
        outcomes = {}
        self._play_out(empty_board, ai, ai.opponent, first, {}, outcomes)
        assert outcomes.get(ai.opponent, 0) == 0
        assert sum(outcomes.values()) > 0
