"""Tests for square helpers and Move notation."""

import pytest

from chesster.core.move import Move
from chesster.core.types import (
    A1,
    A8,
    E2,
    E4,
    H1,
    H8,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquares:
    def test_corners(self) -> None:
        assert parse_square("a8") == A8 == 0
        assert parse_square("h8") == H8 == 7
        assert parse_square("a1") == A1 == 56
        assert parse_square("h1") == H1 == 63

    def test_rank_maps_to_row(self) -> None:
        sq = parse_square("e2")
        assert row_of(sq) == 6
        assert col_of(sq) == 4
        assert sq == make_square(6, 4) == E2

    def test_square_name_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e", "e9", "i2", "E2", "e22", "2e"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_is_valid_square(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(63)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)


class TestMoveNotation:
    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)

    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        assert Move(E2, E4).uci == "e2e4"

    def test_surrounding_whitespace_ignored(self) -> None:
        assert Move.from_uci(" e2e4\n") == Move(E2, E4)

    @pytest.mark.parametrize("text", ["e2e", "e2e4q", ""])
    def test_wrong_length(self, text: str) -> None:
        with pytest.raises(ValueError, match="expected 4 characters"):
            Move.from_uci(text)

    @pytest.mark.parametrize("text", ["e9e4", "i2e4", "e2e0", "2e4e"])
    def test_out_of_range(self, text: str) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Move.from_uci(text)
