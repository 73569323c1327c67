"""Atomic explosion: capture resolution and blast radius."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atomchess.core.piece import Piece
from atomchess.core.types import Square

if TYPE_CHECKING:
    from atomchess.core.board import Board


BLAST_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def blast_squares(destination: Square, board: Board) -> list[Square]:
    """Squares an explosion at *destination* would clear, without mutating.

    The destination comes first whenever it is occupied; ring squares follow
    in :data:`BLAST_OFFSETS` order. Pawns in the ring survive.
    """
    cleared: list[Square] = []
    if board.piece_at(destination) is not None:
        cleared.append(destination)

    for d_row, d_col in BLAST_OFFSETS:
        sq = destination.offset(d_row, d_col)
        piece = board.piece_at(sq)
        if isinstance(piece, Piece) and not piece.is_pawn:
            cleared.append(sq)
    return cleared


def resolve_capture(destination: Square, board: Board) -> list[Square]:
    """Destroy the captured piece and detonate its 3x3 neighborhood.

    The capturing piece must already have been lifted from its origin; it is
    never placed on *destination*. Returns the squares that were cleared.
    """
    cleared = blast_squares(destination, board)
    board.place(destination, None)
    for sq in cleared:
        board.place(sq, None)
    return cleared
