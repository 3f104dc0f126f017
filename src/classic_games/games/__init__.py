"""
Games module - stateful wrappers around the pure engines.
"""

from classic_games.games.game_state import GameState, BoardState
from classic_games.games.game_base import GameBase
from classic_games.games.twenty_forty_eight import TwentyFortyEight, MoveResult
from classic_games.games.tic_tac_toe import TicTacToe, determine_first_player

__all__ = [
    "GameState",
    "BoardState",
    "GameBase",
    "TwentyFortyEight",
    "MoveResult",
    "TicTacToe",
    "determine_first_player",
]
