"""
Immutable game state snapshots.

A wrapper never edits a snapshot: every accepted move or undo produces a new
one. Boards stored here are read-only arrays, so accidental writes raise
instead of silently changing history.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from classic_games.core.grid import as_grid
from classic_games.core.types import GameMode, GameStatus, Player, TicTacToeStatus


def frozen_copy(board: np.ndarray, dtype) -> np.ndarray:
    """Copy board into a new read-only array."""
    out = np.array(board, dtype=dtype, copy=True)
    out.flags.writeable = False
    return out


@dataclass(frozen=True, eq=False)
class GameState:
    """
    2048 snapshot.

    score and moves only grow across accepted moves; start_time is fixed
    when the game is created. time_elapsed is in seconds.
    """
    grid: np.ndarray
    score: int = 0
    moves: int = 0
    time_elapsed: float = 0.0
    status: GameStatus = GameStatus.PLAYING
    start_time: float = 0.0
    can_undo: bool = False

    def __post_init__(self):
        grid = as_grid(self.grid)
        grid.flags.writeable = False
        object.__setattr__(self, "grid", grid)

    def evolve(self, **changes) -> "GameState":
        """New snapshot with some fields replaced."""
        return replace(self, **changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.grid, other.grid)
            and self.score == other.score
            and self.moves == other.moves
            and self.time_elapsed == other.time_elapsed
            and self.status == other.status
            and self.start_time == other.start_time
            and self.can_undo == other.can_undo
        )

    def __hash__(self) -> int:
        return hash((
            self.grid.tobytes(), self.score, self.moves, self.time_elapsed,
            self.status, self.start_time, self.can_undo,
        ))


@dataclass(frozen=True, eq=False)
class BoardState:
    """Tic-Tac-Toe snapshot."""
    board: np.ndarray
    current_player: Player = Player.X
    status: TicTacToeStatus = TicTacToeStatus.ONGOING
    winner: Optional[Player] = None
    mode: GameMode = GameMode.HUMAN_VS_HUMAN
    ai_player: Optional[Player] = None

    def __post_init__(self):
        object.__setattr__(self, "board", frozen_copy(self.board, np.int8))

    def evolve(self, **changes) -> "BoardState":
        return replace(self, **changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.status == other.status
            and self.winner == other.winner
            and self.mode == other.mode
            and self.ai_player == other.ai_player
        )

    def __hash__(self) -> int:
        return hash((
            self.board.shape, self.board.tobytes(), self.current_player,
            self.status, self.winner, self.mode, self.ai_player,
        ))

