"""
Shared test fixtures for classic_games tests.

Design principles:
- Deterministic randomness (seeded generators, fake clock)
- Grids and boards written out literally so expectations are readable
- Minimal, focused fixtures
"""

from typing import Callable, Optional, Sequence

import numpy as np
import pytest
from numpy.random import Generator, default_rng

from classic_games.core.types import Player
from classic_games.games.game_state import GameState
from classic_games.games.tic_tac_toe import TicTacToe
from classic_games.games.twenty_forty_eight import TwentyFortyEight


# =============================================================================
# Helpers
# =============================================================================

class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


_MARKS = {".": 0, "_": 0, "X": int(Player.X), "O": int(Player.O)}


def make_board(*rows: str) -> np.ndarray:
    """make_board("XO.", "...", "..X") -> int8 3x3 board."""
    return np.array([[_MARKS[ch] for ch in row] for row in rows], dtype=np.int8)


# =============================================================================
# Randomness / time
# =============================================================================

@pytest.fixture
def rng() -> Generator:
    return default_rng(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# 2048 Fixtures
# =============================================================================

@pytest.fixture
def stuck_grid() -> np.ndarray:
    """Full grid with no equal neighbours: no direction changes it."""
    return np.array([
        [2, 4, 8, 16],
        [4, 8, 16, 32],
        [8, 16, 32, 64],
        [16, 32, 64, 128],
    ], dtype=np.int64)


@pytest.fixture
def game_from_grid(rng: Generator, clock: FakeClock) -> Callable[..., TwentyFortyEight]:
    """Factory for a TwentyFortyEight game resumed from a literal grid."""

    def _make(
        grid: Sequence[Sequence[int]],
        max_history: Optional[int] = None,
        **fields,
    ) -> TwentyFortyEight:
        state = GameState(grid=np.array(grid, dtype=np.int64), start_time=clock(), **fields)
        return TwentyFortyEight(rng=rng, clock=clock, initial_state=state, max_history=max_history)

    return _make


@pytest.fixture
def new_2048(rng: Generator, clock: FakeClock) -> TwentyFortyEight:
    """Fresh seeded 2048 game."""
    return TwentyFortyEight(rng=rng, clock=clock)


# =============================================================================
# Tic-Tac-Toe Fixtures
# =============================================================================

@pytest.fixture
def ttt() -> TicTacToe:
    """Fresh human-vs-human game, X to move."""
    return TicTacToe()


@pytest.fixture
def empty_board() -> np.ndarray:
    return make_board("...", "...", "...")
