"""Tests for Coordinate, square names and the active-colour rule."""

import pytest

from chesspane.core.enums import Color, active_color
from chesspane.core.types import (
    ALL_COORDINATES,
    Coordinate,
    parse_square,
    square_name,
)


class TestCoordinate:
    def test_structural_equality(self) -> None:
        assert Coordinate(6, 4) == Coordinate(6, 4)
        assert Coordinate(6, 4) == (6, 4)
        assert Coordinate(6, 4) != Coordinate(4, 6)

    def test_hashable_in_sets(self) -> None:
        assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2

    @pytest.mark.parametrize(
        ("rank", "file", "valid"),
        [(0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False)],
    )
    def test_is_valid(self, rank: int, file: int, valid: bool) -> None:
        assert Coordinate(rank, file).is_valid is valid

    def test_parity(self) -> None:
        assert Coordinate(0, 0).is_light
        assert not Coordinate(0, 1).is_light
        assert not Coordinate(7, 0).is_light
        assert Coordinate(7, 7).is_light

    def test_offset(self) -> None:
        assert Coordinate(6, 4).offset(-2, 0) == Coordinate(4, 4)

    def test_all_coordinates_cover_board_once(self) -> None:
        assert len(ALL_COORDINATES) == 64
        assert len(set(ALL_COORDINATES)) == 64


class TestSquareNames:
    def test_name_of_white_king_pawn(self) -> None:
        assert square_name(Coordinate(6, 4)) == "e2"
        assert str(Coordinate(4, 4)) == "e4"

    def test_corners(self) -> None:
        assert square_name(Coordinate(0, 0)) == "a8"
        assert square_name(Coordinate(7, 7)) == "h1"

    def test_parse(self) -> None:
        assert parse_square("e2") == Coordinate(6, 4)
        assert parse_square("a8") == Coordinate(0, 0)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e22", "E2"])
    def test_parse_rejects_garbage(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestActiveColor:
    def test_even_turns_are_white(self) -> None:
        assert active_color(0) == Color.WHITE
        assert active_color(2) == Color.WHITE

    def test_odd_turns_are_black(self) -> None:
        assert active_color(1) == Color.BLACK
        assert active_color(41) == Color.BLACK

    def test_negative_turn_rejected(self) -> None:
        with pytest.raises(ValueError):
            active_color(-1)

    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert Color.EMPTY.opposite == Color.EMPTY
