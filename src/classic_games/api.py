"""
Public API for terminal play.

Usage:
    from classic_games import TwentyFortyEight, TicTacToe, play_2048, play_tic_tac_toe

    play_2048(TwentyFortyEight())
    play_tic_tac_toe(TicTacToe(mode=GameMode.HUMAN_VS_AI, human_player=Player.X))
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple, TYPE_CHECKING

import numpy as np

from classic_games.core import grid as engine
from classic_games.core.errors import GameError, InvalidMoveError
from classic_games.core.types import Direction

if TYPE_CHECKING:
    from classic_games.games.tic_tac_toe import TicTacToe
    from classic_games.games.twenty_forty_eight import TwentyFortyEight

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

# Keyboard shortcuts accepted in addition to the direction names
KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}
UNDO_KEYS = {"u", "undo"}
QUIT_KEYS = {"q", "quit", "exit"}


def parse_coordinates(raw: str) -> Tuple[int, int]:
    """Parse "row,col" into a pair of ints."""
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if len(parts) != 2:
        raise InvalidMoveError(f"Expected 2 comma-separated values, got '{raw}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidMoveError(f"Coordinates must be integers, got '{raw}'") from e


# ---------------------------------------------------------------------------
# 2048
# ---------------------------------------------------------------------------

def play_2048(
    game: "TwentyFortyEight",
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> "TwentyFortyEight":
    """
    Play 2048 interactively until the game ends or the player quits.

    Accepts w/a/s/d, the direction names, u (undo) and q (quit).
    Returns the game so callers can inspect the final state.
    """
    output_fn(game.state_string())
    output_fn("Moves: w/a/s/d or up/left/down/right, u = undo, q = quit")

    try:
        while not game.is_over():
            raw = input_fn("Move: ").strip().lower()

            if raw in QUIT_KEYS:
                output_fn("Quit.")
                return game

            try:
                if raw in UNDO_KEYS:
                    game.undo()
                else:
                    result = game.move(KEY_DIRECTIONS.get(raw, raw))
                    if not result.moved:
                        output_fn("Nothing moved, try another direction.")
                        legal = engine.legal_directions(game.state.grid)
                        output_fn("Legal moves: " + ", ".join(d.value for d in legal))
                        continue
                    if result.points_scored:
                        output_fn(f"+{result.points_scored}")
            except GameError as e:
                output_fn(f"Illegal move: {e}")
                continue

            output_fn(game.state_string())

    except (KeyboardInterrupt, EOFError):
        output_fn("\nInterrupted.")
        return game

    output_fn("\n" + "=" * 40)
    output_fn(f"GAME OVER - {game.state.status.value.upper()}")
    output_fn("=" * 40)
    output_fn(f"Final score: {game.state.score} in {game.state.moves} moves")
    return game


# ---------------------------------------------------------------------------
# Tic-Tac-Toe
# ---------------------------------------------------------------------------

def _ai_turn(game: "TicTacToe", output_fn: OutputFn) -> None:
    """AI selects and applies its move."""
    player = game.current_player
    before = game.board
    game.make_ai_move()
    row, col = (int(v) for v in np.argwhere(before != game.board)[0])
    output_fn(f"\nAI ({player.name}) played: {row},{col}")


def _human_turn(game: "TicTacToe", input_fn: InputFn, output_fn: OutputFn) -> Tuple[int, int]:
    """Prompt human for move, apply it, return move."""
    valid = game.valid_moves()
    if valid:
        example = valid[0]
        output_fn(f"\nYour turn (Player {game.current_player.name})")
        output_fn(f"Format: row,col (e.g., {example[0]},{example[1]})")

    while True:
        raw = input_fn("Move: ").strip()
        try:
            row, col = parse_coordinates(raw)
            game.apply_move(row, col)
            return row, col
        except GameError as e:
            output_fn(f"Illegal move: {e}")


def play_tic_tac_toe(
    game: "TicTacToe",
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> "TicTacToe":
    """
    Play Tic-Tac-Toe interactively until the game ends.

    In HUMAN_VS_AI mode the AI moves automatically on its turns.
    """
    output_fn(game.state_string())

    try:
        while not game.is_over():
            if game.is_ai_turn:
                _ai_turn(game, output_fn)
            else:
                row, col = _human_turn(game, input_fn, output_fn)
                output_fn(f"\nYou played: {row},{col}")
            output_fn(game.state_string())
    except (KeyboardInterrupt, EOFError):
        output_fn("\nInterrupted.")
        return game
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    output_fn("\n" + "=" * 40)
    if game.winner is not None:
        output_fn(f"GAME OVER - {game.winner.name} wins")
    else:
        output_fn("GAME OVER - draw")
    output_fn("=" * 40)
    return game


def play(game, input_fn: InputFn = input, output_fn: OutputFn = print):
    """Dispatch to the right terminal loop for game."""
    if game.game_id() == "2048":
        return play_2048(game, input_fn, output_fn)
    if game.game_id() == "tic_tac_toe":
        return play_tic_tac_toe(game, input_fn, output_fn)
    raise ValueError(f"No terminal loop for game: {game.game_id()}")


__all__ = [
    "play",
    "play_2048",
    "play_tic_tac_toe",
    "parse_coordinates",
]
