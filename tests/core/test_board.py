"""Tests for Board."""

import pytest

from atomchess.core.board import Board
from atomchess.core.enums import OFF_BOARD, Color, PieceType
from atomchess.core.piece import Piece
from atomchess.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4,
    A8, B8, C8, D8, E8, F8, G8, H8,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(1, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[Square(row, col)] is None

    def test_piece_count(self) -> None:
        assert Board.initial().piece_count() == 32


class TestBoardAccess:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_piece_at_off_board_is_sentinel(self) -> None:
        board = Board.initial()
        sentinel = board.piece_at(Square(-1, 4))
        assert sentinel is OFF_BOARD
        assert sentinel is not None
        assert board.piece_at(Square(4, 4)) is None

    def test_place_off_board_is_ignored(self) -> None:
        board = Board.initial()
        before = board.copy()
        board.place(Square(8, 0), Piece(Color.WHITE, PieceType.QUEEN))
        board.place(Square(0, -1), None)
        assert board == before

    def test_place_on_board(self) -> None:
        board = Board()
        board.place(E4, Piece(Color.BLACK, PieceType.KNIGHT))
        assert board.piece_at(E4) == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_strict_index_off_board_raises(self) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[Square(8, 8)]
        with pytest.raises(IndexError):
            board[Square(-1, 0)] = None


class TestBoardOperations:
    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_has_king(self) -> None:
        board = Board.initial()
        assert board.has_king(Color.WHITE)
        assert board.has_king(Color.BLACK)
        board[E8] = None
        assert not board.has_king(Color.BLACK)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.piece_count() == 0

    def test_occupied_lists_every_piece(self) -> None:
        board = Board.initial()
        occupied = dict(board.occupied())
        assert len(occupied) == 32
        assert occupied[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestDiagram:
    def test_initial_diagram_matches_factory(self) -> None:
        board = Board.from_diagram(
            """
            r n b q k b n r
            p p p p p p p p
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            P P P P P P P P
            R N B Q K B N R
            """
        )
        assert board == Board.initial()

    def test_compact_rows(self) -> None:
        board = Board.from_diagram("....k...\n" + "........\n" * 6 + "....K...")
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.piece_count() == 2

    def test_wrong_rank_count(self) -> None:
        with pytest.raises(ValueError, match="8 ranks"):
            Board.from_diagram("........\n........")

    def test_wrong_file_count(self) -> None:
        with pytest.raises(ValueError, match="files"):
            Board.from_diagram("....\n" * 8)

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram("x.......\n" + "........\n" * 7)
