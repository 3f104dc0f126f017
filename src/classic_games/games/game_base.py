"""
GameBase - abstract base class for the game wrappers.
"""

from abc import ABC, abstractmethod


class GameBase(ABC):
    """
    Abstract base class for all game wrappers.

    ARCHITECTURE NOTE:
    ------------------
    - Wrappers own validation, history and the current snapshot.
    - Engines (classic_games.core.grid / search) are pure functions and hold
      no state between calls.
    - Snapshots are immutable; a wrapper swaps in a new one per move.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Start a fresh game, discarding the current state and any history."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
