"""
Classic Games - pure-logic engines for 2048 and Tic-Tac-Toe.

Both games keep their state in immutable snapshots; the wrappers swap in a
new snapshot per move and raise a specific GameError subclass for anything
they refuse.

Quick Start:
    from classic_games import TwentyFortyEight, TicTacToe, GameMode, Player

    game = TwentyFortyEight()
    result = game.move("left")
    if result.moved:
        print(result.game_state.score)

    ttt = TicTacToe(mode=GameMode.HUMAN_VS_AI, human_player=Player.X)
    ttt.apply_move(1, 1)
    ttt.make_ai_move()

Modules:
    core   - Types, errors, the 2048 grid engine and the minimax search
    games  - Stateful wrappers (TwentyFortyEight, TicTacToe)
    utils  - Game registry, configuration and factory
    api    - Interactive terminal loops
"""

from classic_games.api import play, play_2048, play_tic_tac_toe

from classic_games.core import (
    Direction,
    GameStatus,
    Player,
    TicTacToeStatus,
    GameMode,
    PlayerType,
    SearchResult,
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
from classic_games.games import (
    GameState,
    BoardState,
    MoveResult,
    TwentyFortyEight,
    TicTacToe,
)

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play",
    "play_2048",
    "play_tic_tac_toe",
    "TwentyFortyEight",
    "TicTacToe",
    # Types
    "Direction",
    "GameStatus",
    "Player",
    "TicTacToeStatus",
    "GameMode",
    "PlayerType",
    "SearchResult",
    "GameState",
    "BoardState",
    "MoveResult",
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
]
