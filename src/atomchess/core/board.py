"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from atomchess.core.enums import OFF_BOARD, Color, OffBoard, PieceType
from atomchess.core.piece import Piece
from atomchess.core.types import BOARD_SIZE, Square, is_on_board

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of pieces, stored rank 8 first."""

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None | OffBoard:
        """Piece on *sq*, ``None`` if empty, ``OFF_BOARD`` if out of range."""
        if not is_on_board(sq):
            return OFF_BOARD
        return self._rows[sq.row][sq.col]

    def place(self, sq: Square, piece: Piece | None) -> None:
        """Put *piece* (or ``None``) on *sq*; off-board squares are ignored."""
        if is_on_board(sq):
            self._rows[sq.row][sq.col] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square off board: {tuple(sq)!r}")
        return self._rows[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_on_board(sq):
            raise IndexError(f"Square off board: {tuple(sq)!r}")
        self._rows[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty square."""
        for r, row in enumerate(self._rows):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield Square(r, c), piece

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    def has_king(self, color: Color) -> bool:
        """Whether *color* still has a king anywhere on the board."""
        king = Piece(color, PieceType.KING)
        return any(piece == king for _, piece in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def clear(self) -> None:
        self._rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_diagram(cls, text: str) -> Board:
        """Build a board from 8 lines of piece letters and dots, rank 8 first.

        Whitespace inside a line is ignored, so both ``"r...k..r"`` and
        ``"r . . . k . . r"`` are accepted.
        """
        lines = [line.split() for line in text.strip().splitlines()]
        rows = ["".join(parts) for parts in lines if parts]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram needs {BOARD_SIZE} ranks, got {len(rows)}")

        b = cls()
        for r, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Diagram rank {BOARD_SIZE - r} has {len(row)} files")
            for c, char in enumerate(row):
                if char != ".":
                    b[Square(r, c)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - r} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
