"""
TicTacToe game implementation with an optional minimax opponent.

Uses int8 board:
    0 = empty
    1 = player X
    2 = player O
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from classic_games.core import search
from classic_games.core.errors import GameCompletedError, InvalidMoveError, NotAITurnError
from classic_games.core.types import (
    BOARD_SIZE,
    EMPTY,
    GameMode,
    Player,
    PlayerType,
    SearchResult,
    TicTacToeStatus,
)
from classic_games.games.game_base import GameBase
from classic_games.games.game_state import BoardState

logger = logging.getLogger(__name__)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}


def _is_index(value) -> bool:
    # bool is an int subclass but True/False are not coordinates
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def determine_first_player(rng: Optional[random.Random] = None) -> Player:
    """Pick X or O with equal probability."""
    return (rng or random).choice([Player.X, Player.O])


class TicTacToe(GameBase):
    """
    Tic-Tac-Toe with human-vs-human and human-vs-AI modes.

    Every accepted move replaces the current BoardState with a new snapshot.
    In HUMAN_VS_AI mode the AI plays the side opposite human_player and
    picks its moves with the alpha-beta search.
    """

    __slots__ = ('_state', '_first_player')

    def __init__(
        self,
        mode: GameMode = GameMode.HUMAN_VS_HUMAN,
        human_player: Player = Player.X,
        first_player: Player = Player.X,
        board: Optional[np.ndarray] = None,
    ):
        mode = GameMode(mode)
        self._first_player = Player(first_player)
        ai_player = Player(human_player).opponent if mode is GameMode.HUMAN_VS_AI else None

        board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8) if board is None else board
        if np.shape(board) != (BOARD_SIZE, BOARD_SIZE):
            raise InvalidMoveError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {np.shape(board)}")
        if not np.isin(board, list(CELL_STRINGS)).all():
            raise InvalidMoveError("Board cells must be 0 (empty), 1 (X) or 2 (O)")

        self._state = BoardState(
            board=board,
            current_player=self._first_player,
            mode=mode,
            ai_player=ai_player,
        )
        self._state = self._with_outcome(self._state)

    # ------------------------------------------------------------------
    # GameBase
    # ------------------------------------------------------------------

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "tic_tac_toe"

    def num_players(self) -> int:
        return 2

    def reset(self) -> None:
        self._state = BoardState(
            board=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8),
            current_player=self._first_player,
            mode=self._state.mode,
            ai_player=self._state.ai_player,
        )

    def is_over(self) -> bool:
        return self._state.status is not TicTacToeStatus.ONGOING

    def state_string(self) -> str:
        board = self._state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(BOARD_SIZE):
            row = "│ " + " │ ".join(CELL_STRINGS[int(board[i, j])] for j in range(BOARD_SIZE)) + " │"
            lines.append(row)
            if i < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def board(self) -> np.ndarray:
        """Writable copy of the board."""
        return self._state.board.copy()

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def status(self) -> TicTacToeStatus:
        return self._state.status

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def ai_player(self) -> Optional[Player]:
        return self._state.ai_player

    @property
    def human_player(self) -> Optional[Player]:
        if self._state.ai_player is None:
            return None
        return self._state.ai_player.opponent

    def player_type(self, player: Player) -> PlayerType:
        if self._state.ai_player is not None and Player(player) is self._state.ai_player:
            return PlayerType.AI
        return PlayerType.HUMAN

    @property
    def is_ai_turn(self) -> bool:
        return (
            self._state.mode is GameMode.HUMAN_VS_AI
            and not self.is_over()
            and self._state.current_player is self._state.ai_player
        )

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells in row-major order (none once the game is over)."""
        if self.is_over():
            return []
        return search.available_moves(self._state.board)

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def apply_move(self, row: int, col: int) -> BoardState:
        """
        Place the current player's mark at (row, col).

        Raises:
            GameCompletedError: the game is already won or drawn.
            InvalidMoveError: coordinates outside 0-2 or cell occupied.
        """
        if self.is_over():
            raise GameCompletedError("Cannot make a move on a completed game")

        if not _is_index(row) or not 0 <= row < BOARD_SIZE:
            raise InvalidMoveError(f"Row must be between 0 and {BOARD_SIZE - 1}")
        if not _is_index(col) or not 0 <= col < BOARD_SIZE:
            raise InvalidMoveError(f"Column must be between 0 and {BOARD_SIZE - 1}")

        r, c = int(row), int(col)
        if self._state.board[r, c] != EMPTY:
            raise InvalidMoveError(f"Cell at position ({r}, {c}) is already occupied")

        player = self._state.current_player
        board = self._state.board.copy()
        board[r, c] = player

        self._state = self._with_outcome(
            self._state.evolve(board=board, current_player=player.opponent)
        )
        logger.debug("%s played (%d, %d)", player.name, r, c)
        if self.is_over():
            logger.info(
                "Tic-tac-toe %s%s",
                self._state.status.value,
                f" by {self._state.winner.name}" if self._state.winner else "",
            )
        return self._state

    def best_move(self) -> SearchResult:
        """Optimal move for the AI side on the current board."""
        ai = self._state.ai_player
        if ai is None:
            raise NotAITurnError("No AI player in a human-vs-human game")
        return search.best_move(self._state.board, ai, ai.opponent)

    def make_ai_move(self) -> BoardState:
        """
        Let the AI play its turn through the normal apply_move path.

        Raises:
            NotAITurnError: it is not the AI's turn.
        """
        if self.is_over():
            raise GameCompletedError("Cannot make a move on a completed game")
        if not self.is_ai_turn:
            raise NotAITurnError("Cannot make AI move when it is human player turn")

        result = self.best_move()
        logger.debug("AI chose (%d, %d) with score %d", result.row, result.col, result.score)
        return self.apply_move(result.row, result.col)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _with_outcome(state: BoardState) -> BoardState:
        """Recompute winner/status from the board."""
        w = search.winner(state.board)
        if w is not None:
            return state.evolve(status=TicTacToeStatus.WON, winner=w)
        if search.is_full(state.board):
            return state.evolve(status=TicTacToeStatus.DRAW, winner=None)
        return state.evolve(status=TicTacToeStatus.ONGOING, winner=None)
