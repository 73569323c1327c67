"""Per-piece move legality under atomic chess rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atomchess.core.enums import Color, PieceType
from atomchess.core.piece import Piece
from atomchess.core.types import Square, is_on_board

if TYPE_CHECKING:
    from atomchess.core.board import Board


KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

# Row direction a pawn advances in, and the row it starts from.
PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveValidator:
    """Stateless legality checker; reads the board, never mutates it."""

    @staticmethod
    def owns_piece(piece: Piece | None, active_player: Color) -> bool:
        """Whether *piece* exists and belongs to *active_player*."""
        return piece is not None and piece.color == active_player

    @staticmethod
    def is_legal(
        piece: Piece,
        origin: Square,
        destination: Square,
        board: Board,
        active_player: Color,
    ) -> bool:
        """Decide whether *piece* may go from *origin* to *destination*."""
        if not is_on_board(origin) or not is_on_board(destination):
            return False
        if piece.color != active_player:
            return False

        target = board[destination]
        if target is not None and target.color == piece.color:
            return False

        d_row = destination.row - origin.row
        d_col = destination.col - origin.col
        abs_row, abs_col = abs(d_row), abs(d_col)

        ptype = piece.piece_type
        if ptype == PieceType.ROOK:
            return MoveValidator._is_straight(abs_row, abs_col) and (
                MoveValidator.path_clear(origin, destination, board)
            )

        if ptype == PieceType.BISHOP:
            return MoveValidator._is_diagonal(abs_row, abs_col) and (
                MoveValidator.path_clear(origin, destination, board)
            )

        if ptype == PieceType.QUEEN:
            if not (
                MoveValidator._is_straight(abs_row, abs_col)
                or MoveValidator._is_diagonal(abs_row, abs_col)
            ):
                return False
            return MoveValidator.path_clear(origin, destination, board)

        if ptype == PieceType.KNIGHT:
            return (abs_row, abs_col) in KNIGHT_DELTAS

        if ptype == PieceType.KING:
            if max(abs_row, abs_col) != 1:
                return False
            # A capturing king would be caught in its own blast.
            return target is None

        if ptype == PieceType.PAWN:
            return MoveValidator._is_legal_pawn_move(
                piece, origin, d_row, d_col, target, board
            )

        return False

    # ── Geometry helpers ─────────────────────────────────────────────────

    @staticmethod
    def _is_straight(abs_row: int, abs_col: int) -> bool:
        return (abs_row == 0) != (abs_col == 0)

    @staticmethod
    def _is_diagonal(abs_row: int, abs_col: int) -> bool:
        return abs_row == abs_col != 0

    @staticmethod
    def path_clear(origin: Square, destination: Square, board: Board) -> bool:
        """Whether every square strictly between the endpoints is empty.

        Only meaningful for straight or diagonal lines. The destination
        itself is never inspected.
        """
        step_row = _sign(destination.row - origin.row)
        step_col = _sign(destination.col - origin.col)
        sq = origin.offset(step_row, step_col)
        while sq != destination:
            if board[sq] is not None:
                return False
            sq = sq.offset(step_row, step_col)
        return True

    @staticmethod
    def _is_legal_pawn_move(
        pawn: Piece,
        origin: Square,
        d_row: int,
        d_col: int,
        target: Piece | None,
        board: Board,
    ) -> bool:
        forward = PAWN_FORWARD[pawn.color]

        # Diagonal capture: always exactly one row forward, enemy required.
        if abs(d_col) == 1:
            return d_row == forward and target is not None

        if d_col != 0 or target is not None:
            return False

        if d_row == forward:
            return True

        if d_row == 2 * forward and origin.row == PAWN_START_ROW[pawn.color]:
            return board[origin.offset(forward, 0)] is None

        return False
