"""High-level rules: terminal-state detection by king presence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atomchess.core.enums import Color, DoubleKingPolicy, GameResult
from atomchess.core.explosion import resolve_capture

if TYPE_CHECKING:
    from atomchess.core.board import Board
    from atomchess.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - No check/checkmate: a game ends only when a king is destroyed.
    # - Losing both kings at once is governed by DoubleKingPolicy.

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the result from which kings are still standing."""
        white_alive = board.has_king(Color.WHITE)
        black_alive = board.has_king(Color.BLACK)

        if white_alive and black_alive:
            return GameResult.IN_PROGRESS
        if white_alive:
            return GameResult.WHITE_WINS
        if black_alive:
            return GameResult.BLACK_WINS
        return GameResult.DRAW

    @staticmethod
    def destroys_both_kings(board: Board, origin: Square, destination: Square) -> bool:
        """Whether capturing into *destination* would leave no king at all.

        Simulated on a copy; *board* is untouched.
        """
        if board[destination] is None:
            return False
        trial = board.copy()
        trial[origin] = None
        resolve_capture(destination, trial)
        return not trial.has_king(Color.WHITE) and not trial.has_king(Color.BLACK)

    @staticmethod
    def is_allowed_by_policy(
        board: Board,
        origin: Square,
        destination: Square,
        policy: DoubleKingPolicy,
    ) -> bool:
        """Apply *policy* to a move that has already passed geometry checks."""
        if policy == DoubleKingPolicy.DRAW:
            return True
        return not Rules.destroys_both_kings(board, origin, destination)
