"""Core enumerations for the atomic chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3  # only reachable with DoubleKingPolicy.DRAW


class MoveError(IntEnum):
    """Why a move request was rejected."""

    NOT_YOUR_PIECE = auto()
    ILLEGAL_MOVE = auto()
    GAME_ALREADY_FINISHED = auto()
    MALFORMED_NOTATION = auto()


class DoubleKingPolicy(IntEnum):
    """What to do with a capture whose blast would destroy both kings."""

    REJECT = 0
    DRAW = 1


class OffBoard(Enum):
    """Sentinel type returned for coordinates outside the board."""

    OFF_BOARD = auto()

    def __repr__(self) -> str:
        return "OFF_BOARD"


OFF_BOARD = OffBoard.OFF_BOARD
