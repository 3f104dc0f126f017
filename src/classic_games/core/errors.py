"""
Error hierarchy for the game engines and wrappers.

Each concrete error also derives from the builtin a caller would expect
(``ValueError`` for bad input, ``RuntimeError`` for an operation the current
game state does not allow), so ``except ValueError`` keeps working.
"""


class GameError(Exception):
    """Base class for every error raised by classic_games."""


# ---------------------------------------------------------------------------
# 2048
# ---------------------------------------------------------------------------

class Game2048Error(GameError):
    """Base class for 2048 errors."""


class InvalidDirectionError(Game2048Error, ValueError):
    """A move was requested with something other than up/down/left/right."""


class GameOverError(Game2048Error, RuntimeError):
    """A move was requested after the game was already won or lost."""


class UndoNotAvailableError(Game2048Error, RuntimeError):
    """Undo was requested with an empty history."""


# ---------------------------------------------------------------------------
# Tic-Tac-Toe
# ---------------------------------------------------------------------------

class TicTacToeError(GameError):
    """Base class for Tic-Tac-Toe errors."""


class InvalidMoveError(TicTacToeError, ValueError):
    """Out-of-bounds coordinates or an occupied cell."""


class GameCompletedError(TicTacToeError, RuntimeError):
    """A move was requested on a game that is already won or drawn."""


class NotAITurnError(TicTacToeError, RuntimeError):
    """The AI was asked to move when it is not the AI's turn."""
