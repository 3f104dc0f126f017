"""
Core module - types, errors, and the two pure engines.

    grid    - 2048 slide/merge/spawn/classify functions
    search  - Tic-Tac-Toe minimax with alpha-beta pruning
"""

from classic_games.core.types import (
    Direction,
    GameStatus,
    MoveOutcome,
    Player,
    TicTacToeStatus,
    GameMode,
    PlayerType,
    SearchResult,
    GRID_SIZE,
    BOARD_SIZE,
    WINNING_TILE,
    WIN_SCORE,
)
from classic_games.core.errors import (
    GameError,
    Game2048Error,
    InvalidDirectionError,
    GameOverError,
    UndoNotAvailableError,
    TicTacToeError,
    InvalidMoveError,
    GameCompletedError,
    NotAITurnError,
)
from classic_games.core import grid, search

__all__ = [
    # Types
    "Direction",
    "GameStatus",
    "MoveOutcome",
    "Player",
    "TicTacToeStatus",
    "GameMode",
    "PlayerType",
    "SearchResult",
    # Constants
    "GRID_SIZE",
    "BOARD_SIZE",
    "WINNING_TILE",
    "WIN_SCORE",
    # Errors
    "GameError",
    "Game2048Error",
    "InvalidDirectionError",
    "GameOverError",
    "UndoNotAvailableError",
    "TicTacToeError",
    "InvalidMoveError",
    "GameCompletedError",
    "NotAITurnError",
    # Engines
    "grid",
    "search",
]
