"""Game state: board, side to move, result, and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from atomchess.core.board import Board
from atomchess.core.enums import Color, GameResult
from atomchess.core.explosion import resolve_capture
from atomchess.core.rules import Rules

if TYPE_CHECKING:
    from atomchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """What happened on the board when a move was applied."""

    origin: Square
    destination: Square
    captured: bool
    destroyed: tuple[Square, ...]


@dataclass
class GameState:
    """Board, side to move and result of one game.

    This is a pure data/logic class: no validation, no events.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    result: GameResult = GameResult.IN_PROGRESS

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, from the standard arrangement by default."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.result = GameResult.IN_PROGRESS

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, origin: Square, destination: Square) -> AppliedMove:
        """Apply a validated move, resolve any explosion, update the outcome.

        Caller is responsible for legality check.
        """
        board = self.board
        piece = board[origin]
        board[origin] = None

        if board[destination] is not None:
            destroyed = tuple(resolve_capture(destination, board))
            _LOGGER.debug(
                "Explosion at %s cleared %s",
                destination,
                ", ".join(str(sq) for sq in destroyed),
            )
            applied = AppliedMove(origin, destination, True, destroyed)
        else:
            board[destination] = piece
            applied = AppliedMove(origin, destination, False, ())

        self._update_outcome()
        return applied

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_outcome(self) -> None:
        result = Rules.game_result(self.board)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            _LOGGER.info("Game over: %s", result.name)
            return
        self.side_to_move = self.side_to_move.opposite
