"""Tests for Square and coordinate helpers."""

import pytest

from atomchess.core.types import (
    A1, A8, E2, E4, H1, H8,
    Square,
    all_squares,
    is_on_board,
    parse_square,
    square_name,
)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(Square(0, 0)) == "a8"
        assert square_name(Square(0, 7)) == "h8"
        assert square_name(Square(7, 0)) == "a1"
        assert square_name(Square(7, 7)) == "h1"

    def test_constants_match_names(self) -> None:
        assert parse_square("a1") == A1
        assert parse_square("h8") == H8
        assert parse_square("e2") == E2
        assert E4 == Square(4, 4)
        assert str(H1) == "h1"
        assert A8 == Square(0, 0)

    def test_every_square_round_trips(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert len({square_name(sq) for sq in squares}) == 64
        for sq in squares:
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E2", "e22", "e0", "22"])
    def test_invalid_names_raise(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_non_string_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_square(None)  # type: ignore[arg-type]

    def test_name_of_off_board_square_raises(self) -> None:
        with pytest.raises(ValueError, match="off board"):
            square_name(Square(8, 0))


class TestBounds:
    def test_on_board(self) -> None:
        assert is_on_board(Square(0, 0))
        assert is_on_board(Square(7, 7))

    @pytest.mark.parametrize("sq", [Square(-1, 0), Square(0, -1), Square(8, 3), Square(3, 8)])
    def test_off_board(self, sq: Square) -> None:
        assert not is_on_board(sq)

    def test_offset(self) -> None:
        assert E4.offset(-1, 1) == parse_square("f5")
        assert not is_on_board(A1.offset(1, 0))
