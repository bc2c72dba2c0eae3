"""Tests for square notation helpers."""

import pytest

from antichess.core.types import (
    ALL_SQUARES,
    coords_to_square,
    is_valid_square,
    normalize_square,
    square_to_coords,
)


class TestSquareToCoords:
    def test_corners(self) -> None:
        assert square_to_coords("a1") == (0, 0)
        assert square_to_coords("h1") == (0, 7)
        assert square_to_coords("a8") == (7, 0)
        assert square_to_coords("h8") == (7, 7)

    def test_e4(self) -> None:
        assert square_to_coords("e4") == (3, 4)

    def test_uppercase_file(self) -> None:
        assert square_to_coords("E4") == (3, 4)

    @pytest.mark.parametrize("name", ["i1", "a0", "a9", "e", "e44", "", "4e"])
    def test_invalid_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            square_to_coords(name)


class TestCoordsToSquare:
    def test_corners(self) -> None:
        assert coords_to_square(0, 0) == "a1"
        assert coords_to_square(7, 7) == "h8"

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid coordinates"):
            coords_to_square(8, 0)
        with pytest.raises(ValueError):
            coords_to_square(0, -1)

    def test_round_trip_all_squares(self) -> None:
        for name in ALL_SQUARES:
            assert coords_to_square(*square_to_coords(name)) == name

    def test_round_trip_normalises_case(self) -> None:
        assert coords_to_square(*square_to_coords("C7")) == "c7"


class TestIsValidSquare:
    @pytest.mark.parametrize("name", ["a1", "h8", "E2", "d5"])
    def test_valid(self, name: str) -> None:
        assert is_valid_square(name)

    @pytest.mark.parametrize("name", ["", "a", "a10", "i5", "a0", "a9", "11", "aa"])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_square(name)

    def test_non_string(self) -> None:
        assert not is_valid_square(None)
        assert not is_valid_square(("a", "1"))


class TestScanOrder:
    def test_sixty_four_squares(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64

    def test_rank_major(self) -> None:
        assert ALL_SQUARES[:3] == ("a1", "b1", "c1")
        assert ALL_SQUARES[8] == "a2"
        assert ALL_SQUARES[-1] == "h8"


def test_normalize_square() -> None:
    assert normalize_square("H3") == "h3"
    with pytest.raises(ValueError):
        normalize_square("z3")
