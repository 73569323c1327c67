"""Core domain layer: pure atomic chess logic with zero external dependencies.

Quick start::

    from atomchess.core import Board, MoveValidator, parse_square

    board = Board.initial()
    pawn = board[parse_square("e2")]
    MoveValidator.is_legal(pawn, parse_square("e2"), parse_square("e4"), board, pawn.color)
"""

from atomchess.core.board import Board
from atomchess.core.enums import (
    OFF_BOARD,
    Color,
    DoubleKingPolicy,
    GameResult,
    MoveError,
    OffBoard,
    PieceType,
)
from atomchess.core.explosion import blast_squares, resolve_capture
from atomchess.core.piece import Piece
from atomchess.core.rules import Rules
from atomchess.core.types import (
    Square,
    all_squares,
    is_on_board,
    parse_square,
    square_name,
)
from atomchess.core.validator import MoveValidator

__all__ = [
    # Enums / sentinels
    "Color",
    "DoubleKingPolicy",
    "GameResult",
    "MoveError",
    "OFF_BOARD",
    "OffBoard",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveValidator",
    "Piece",
    "Rules",
    # Explosion
    "blast_squares",
    "resolve_capture",
]
