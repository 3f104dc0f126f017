"""
Tic-Tac-Toe search: full minimax with alpha-beta pruning.

The maximizing player is always the searching side and the minimizing player
is always its opponent. Terminal positions score ``10 - depth`` for a win and
``depth - 10`` for a loss, so the search prefers the fastest win and the
slowest loss. Draws score 0.

Boards are int8 arrays of shape (3, 3):
    0 = empty
    1 = X
    2 = O

The public functions take a board snapshot and never write into it. The
recursion works on a flat list of cells, placing and lifting marks in place.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from classic_games.core.types import (
    BOARD_SIZE,
    DRAW_SCORE,
    EMPTY,
    WIN_SCORE,
    Player,
    SearchResult,
)

# Winning lines as indices into the flattened board, checked in this order
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)


# ---------------------------------------------------------------------------
# Flat-board helpers (used inside the recursion)
# ---------------------------------------------------------------------------

def _line_winner(cells: Sequence[int]) -> int:
    for a, b, c in WIN_LINES:
        v = cells[a]
        if v != EMPTY and cells[b] == v and cells[c] == v:
            return v
    return EMPTY


def _evaluate(cells: Sequence[int], searching: int, opponent: int, depth: int) -> Optional[int]:
    w = _line_winner(cells)
    if w == searching:
        return WIN_SCORE - depth
    if w == opponent:
        return depth - WIN_SCORE
    if EMPTY not in cells:
        return DRAW_SCORE
    return None


def open_cells(cells: Sequence[int]) -> List[int]:
    """Indices of empty cells in a flat board, ascending (row-major)."""
    return [i for i, v in enumerate(cells) if v == EMPTY]


def _minimax(
    cells: List[int],
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    searching: int,
    opponent: int,
) -> int:
    score = _evaluate(cells, searching, opponent, depth)
    if score is not None:
        return score

    if maximizing:
        best = -math.inf
        for i in open_cells(cells):
            cells[i] = searching
            value = _minimax(cells, depth + 1, False, alpha, beta, searching, opponent)
            cells[i] = EMPTY
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return int(best)

    best = math.inf
    for i in open_cells(cells):
        cells[i] = opponent
        value = _minimax(cells, depth + 1, True, alpha, beta, searching, opponent)
        cells[i] = EMPTY
        best = min(best, value)
        beta = min(beta, value)
        if beta <= alpha:
            break
    return int(best)


def _flatten(board: np.ndarray) -> List[int]:
    return [int(v) for v in np.asarray(board).ravel()]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def winner(board: np.ndarray) -> Optional[Player]:
    """Return the side with three in a row (rows, then columns, then diagonals)."""
    w = _line_winner(_flatten(board))
    return Player(w) if w != EMPTY else None


def is_full(board: np.ndarray) -> bool:
    return bool(np.all(np.asarray(board) != EMPTY))


def available_moves(board: np.ndarray) -> List[Tuple[int, int]]:
    """Empty cells in row-major order."""
    return [divmod(i, BOARD_SIZE) for i in open_cells(_flatten(board))]


def evaluate(board: np.ndarray, searching: Player, opponent: Player, depth: int) -> Optional[int]:
    """
    Terminal score of a position, or None if the game is not over.

    Returns 10 - depth if searching has three in a row, depth - 10 if the
    opponent does, 0 for a full board with no winner.
    """
    return _evaluate(_flatten(board), int(searching), int(opponent), depth)


def minimax(
    board: np.ndarray,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    searching: Player,
    opponent: Player,
) -> int:
    """
    Minimax value of a position with alpha-beta pruning.

    Args:
        board: Position to score. Not modified.
        depth: Plies already simulated below the root position.
        maximizing: True when the searching side is to move.
        alpha: Best score the maximizer can already guarantee.
        beta: Best score the minimizer can already guarantee.
        searching: Side the score is computed for (maximizer).
        opponent: Adversary (minimizer).
    """
    return _minimax(
        _flatten(board), depth, maximizing, alpha, beta, int(searching), int(opponent)
    )


def best_move(board: np.ndarray, searching: Player, opponent: Player) -> SearchResult:
    """
    Optimal move for the searching side, assuming optimal opposition.

    Each empty cell is tried in row-major order; the first cell with the
    highest score wins ties.

    The board must have at least one empty cell and no winner. This is not
    checked.
    """
    cells = _flatten(board)
    s, o = int(searching), int(opponent)

    best_index = -1
    best_score = -math.inf

    for i in open_cells(cells):
        cells[i] = s
        score = _minimax(cells, 0, False, -math.inf, math.inf, s, o)
        cells[i] = EMPTY
        if score > best_score:
            best_score = score
            best_index = i

    row, col = divmod(best_index, BOARD_SIZE)
    return SearchResult(row, col, int(best_score) if best_index >= 0 else DRAW_SCORE)
