"""
Core types, constants, and data structures.

This module contains the fundamental types shared by the engines and the
game wrappers:
- Direction / status / player enums
- Board geometry and scoring constants
- Result tuples returned by the engines
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple

import numpy as np


# ─── 2048 ─────────────────────────────────────────────────────────────────────

GRID_SIZE = 4
WINNING_TILE = 2048

# Tile spawn probabilities (90% for 2, 10% for 4)
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# Tiles placed on a fresh grid
INITIAL_TILES = 2


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class MoveOutcome(NamedTuple):
    """Result of sliding a grid in one direction (before any tile spawns)."""

    new_grid: np.ndarray
    moved: bool
    points_scored: int


# ─── Tic-Tac-Toe ──────────────────────────────────────────────────────────────

BOARD_SIZE = 3
EMPTY = 0

# Terminal score for a win found at depth 0; shaped by depth in the search
WIN_SCORE = 10
DRAW_SCORE = 0


class Player(IntEnum):
    """Board marks. The integer value is what gets written into the board."""

    X = 1
    O = 2

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class TicTacToeStatus(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human_vs_human"
    HUMAN_VS_AI = "human_vs_ai"


class PlayerType(Enum):
    HUMAN = "human"
    AI = "ai"


class SearchResult(NamedTuple):
    """Best move found by the search, with its minimax score in [-10, 10]."""

    row: int
    col: int
    score: int
