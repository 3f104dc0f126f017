"""
Factory functions for creating games.
"""

import random
from typing import Optional

from numpy.random import default_rng

from classic_games.games.game_base import GameBase
from classic_games.games.tic_tac_toe import determine_first_player
from classic_games.utils.config import GAMES, Config


def create_game(game_name: str, seed: Optional[int] = None, **kwargs) -> GameBase:
    """
    Create a game instance ready to play.

    Args:
        game_name: Key from GAMES registry (e.g., "2048")
        seed: Seeds the random source (tile spawns / first player)
        **kwargs: Passed through to the game constructor

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]

    if game_name == "2048":
        kwargs.setdefault("rng", default_rng(seed))
    else:
        kwargs.setdefault("first_player", determine_first_player(random.Random(seed)))

    return game_class(**kwargs)


def create_game_from_config(config: Config) -> GameBase:
    """Create the game described by a Config."""
    return create_game(config.game_name, seed=config.seed, **config.game_kwargs())
