"""Tests for location helpers, piece letters and enums."""

import pytest

from sanparse.core.enums import CastleSide, PieceType
from sanparse.core.piece import PROMOTION_PIECES, expand_piece_abbr
from sanparse.core.types import is_file, is_rank, is_square_name, split_location


class TestSplitLocation:
    def test_empty(self) -> None:
        assert split_location(None) == (None, None)
        assert split_location("") == (None, None)

    def test_square(self) -> None:
        assert split_location("e4") == ("e", "4")

    def test_two_chars_are_not_validated(self) -> None:
        assert split_location("z9") == ("z", "9")

    def test_file(self) -> None:
        assert split_location("a") == ("a", None)

    def test_rank(self) -> None:
        assert split_location("5") == (None, "5")

    @pytest.mark.parametrize("token", ["x", "9", "O", "-"])
    def test_unknown_single_char(self, token: str) -> None:
        assert split_location(token) == (None, None)


class TestPredicates:
    def test_files(self) -> None:
        assert all(is_file(ch) for ch in "abcdefgh")
        assert not is_file("i")
        assert not is_file("A")
        assert not is_file("ab")
        assert not is_file("")

    def test_ranks(self) -> None:
        assert all(is_rank(ch) for ch in "12345678")
        assert not is_rank("0")
        assert not is_rank("9")
        assert not is_rank("12")

    @pytest.mark.parametrize("name", ["a1", "h8", "e4"])
    def test_square_names(self, name: str) -> None:
        assert is_square_name(name)

    @pytest.mark.parametrize("name", ["a9", "i1", "4e", "e", "e44", ""])
    def test_not_square_names(self, name: str) -> None:
        assert not is_square_name(name)


class TestPieceLetters:
    @pytest.mark.parametrize(
        ("char", "piece"),
        [
            ("Q", PieceType.QUEEN),
            ("K", PieceType.KING),
            ("N", PieceType.KNIGHT),
            ("R", PieceType.ROOK),
            ("B", PieceType.BISHOP),
            ("P", PieceType.PAWN),
        ],
    )
    def test_expand(self, char: str, piece: PieceType) -> None:
        assert expand_piece_abbr(char) == piece

    @pytest.mark.parametrize("char", ["q", "X", "", "QN"])
    def test_unknown(self, char: str) -> None:
        assert expand_piece_abbr(char) is None

    def test_king_and_pawn_are_not_promotion_targets(self) -> None:
        assert "K" not in PROMOTION_PIECES
        assert "P" not in PROMOTION_PIECES
        assert {expand_piece_abbr(ch) for ch in PROMOTION_PIECES} == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }


class TestEnums:
    def test_piece_type_compares_to_name(self) -> None:
        assert PieceType.KNIGHT == "knight"
        assert str(PieceType.KNIGHT) == "knight"

    def test_castle_side(self) -> None:
        assert CastleSide("short") is CastleSide.SHORT
        assert str(CastleSide.LONG) == "long"
