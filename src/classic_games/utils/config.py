"""
Configuration and game registry.
"""

from typing import Optional

from classic_games.core.types import GameMode, Player
from classic_games.games import TicTacToe, TwentyFortyEight


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "2048": TwentyFortyEight,
    "tic_tac_toe": TicTacToe,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "2048",
        seed: Optional[int] = None,
        mode: GameMode = GameMode.HUMAN_VS_AI,
        human_player: Player = Player.X,
        max_history: Optional[int] = None,
    ):
        # Unknown names fail here, like a registry lookup
        self.game_class = GAMES[game_name]
        self.game_name = game_name
        self.seed = seed
        self.mode = GameMode(mode)
        self.human_player = Player(human_player)

        if max_history is not None and max_history < 0:
            raise ValueError(f"max_history must be >= 0, got {max_history}")
        self.max_history = max_history

    def game_kwargs(self) -> dict:
        """Constructor arguments for the configured game."""
        if self.game_class is TwentyFortyEight:
            return {"max_history": self.max_history}
        return {"mode": self.mode, "human_player": self.human_player}


# Default configuration
DEFAULT_CONFIG = Config()
