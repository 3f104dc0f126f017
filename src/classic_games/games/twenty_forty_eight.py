"""
2048 game wrapper with move history and undo.

Drives the pure grid engine: validates input, spawns a tile after every
accepted move, classifies the result and keeps the stack of previous
snapshots.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple, Union

from numpy.random import Generator, default_rng

from classic_games.core import grid as engine
from classic_games.core.errors import GameOverError, UndoNotAvailableError
from classic_games.core.types import (
    INITIAL_TILES,
    Direction,
    GameStatus,
)
from classic_games.games.game_base import GameBase
from classic_games.games.game_state import GameState

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    """Outcome of a wrapper-level move."""
    game_state: GameState
    moved: bool
    points_scored: int


class TwentyFortyEight(GameBase):
    """
    2048 on a fixed 4x4 grid.

    Each accepted move replaces the current GameState with a new one and
    pushes the previous snapshot onto the history. undo() pops it back.
    """

    def __init__(
        self,
        rng: Optional[Generator] = None,
        clock: Callable[[], float] = time.time,
        initial_state: Optional[GameState] = None,
        history: Optional[Iterable[GameState]] = None,
        max_history: Optional[int] = None,
    ):
        """
        Args:
            rng: Random source for tile spawns (inject a seeded one for tests).
            clock: Returns the current time in seconds.
            initial_state: Resume from this snapshot instead of a new game.
            history: Previous snapshots, oldest first.
            max_history: Keep at most this many snapshots (None = unbounded).
        """
        if max_history is not None and max_history < 0:
            raise ValueError(f"max_history must be >= 0, got {max_history}")

        self._rng = rng if rng is not None else default_rng()
        self._clock = clock
        self._max_history = max_history
        self._history: List[GameState] = list(history or [])
        self._trim_history()

        if initial_state is not None:
            self._state = initial_state.evolve(can_undo=self.can_undo)
        else:
            self._state = self._fresh_state()

    # ------------------------------------------------------------------
    # GameBase
    # ------------------------------------------------------------------

    def game_id(self) -> str:
        return "2048"

    def num_players(self) -> int:
        return 1

    def reset(self) -> None:
        self._history.clear()
        self._state = self._fresh_state()
        logger.debug("New 2048 game started")

    def is_over(self) -> bool:
        return self._state.status is not GameStatus.PLAYING

    def get_cell_strings(self) -> dict[int, str]:
        values = {0: "."}
        for v in self._state.grid.flat:
            if v:
                values[int(v)] = str(int(v))
        return values

    def state_string(self) -> str:
        cells = self.get_cell_strings()
        width = max(4, max(len(s) for s in cells.values()))
        rows = [
            " ".join(cells[int(v)].rjust(width) for v in row)
            for row in self._state.grid
        ]
        header = (
            f"Score: {self._state.score}  Moves: {self._state.moves}  "
            f"Status: {self._state.status.value}"
        )
        return "\n".join([header, *rows])

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    @property
    def history(self) -> Tuple[GameState, ...]:
        """Previous snapshots, oldest first."""
        return tuple(self._history)

    @property
    def max_history(self) -> Optional[int]:
        return self._max_history

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Slide the tiles in one direction.

        Raises:
            InvalidDirectionError: direction is not up/down/left/right.
            GameOverError: the game is already won or lost.
        """
        direction = engine.parse_direction(direction)

        if self.is_over():
            raise GameOverError(
                f"Cannot move: the game is already {self._state.status.value}"
            )

        outcome = engine.move(self._state.grid, direction)
        if not outcome.moved:
            return MoveResult(self._state, False, 0)

        grid = engine.spawn_tiles(outcome.new_grid, 1, self._rng)
        status = engine.classify(grid)

        previous = self._state
        self._history.append(previous)
        self._trim_history()

        self._state = GameState(
            grid=grid,
            score=previous.score + outcome.points_scored,
            moves=previous.moves + 1,
            time_elapsed=self._clock() - previous.start_time,
            status=status,
            start_time=previous.start_time,
            can_undo=self.can_undo,
        )

        logger.debug(
            "Move %s scored %d (score=%d, moves=%d)",
            direction.value, outcome.points_scored, self._state.score, self._state.moves,
        )
        if status is not GameStatus.PLAYING:
            logger.info("2048 game %s with score %d", status.value, self._state.score)

        return MoveResult(self._state, True, outcome.points_scored)

    def undo(self) -> GameState:
        """
        Revert to the snapshot before the last accepted move.

        Every field is restored verbatim except can_undo, which reflects the
        history left after the pop.

        Raises:
            UndoNotAvailableError: there is no history.
        """
        if not self._history:
            raise UndoNotAvailableError("No moves available to undo")

        previous = self._history.pop()
        self._state = previous.evolve(can_undo=self.can_undo)
        logger.debug("Undo to move %d (%d left in history)", previous.moves, len(self._history))
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fresh_state(self) -> GameState:
        grid = engine.spawn_tiles(engine.new_grid(), INITIAL_TILES, self._rng)
        return GameState(
            grid=grid,
            score=0,
            moves=0,
            time_elapsed=0.0,
            status=GameStatus.PLAYING,
            start_time=self._clock(),
            can_undo=False,
        )

    def _trim_history(self) -> None:
        if self._max_history is None:
            return
        excess = len(self._history) - self._max_history
        if excess > 0:
            del self._history[:excess]