"""Piece letter lookups."""

from __future__ import annotations

from sanparse.core.enums import PieceType

# SAN letter ↔ PieceType
_CHAR_MAP: dict[str, PieceType] = {
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
    "N": PieceType.KNIGHT,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "P": PieceType.PAWN,
}

PROMOTION_PIECES = "QNRB"


def expand_piece_abbr(char: str) -> PieceType | None:
    """Expand a SAN piece letter, e.g. ``'N'`` → knight. Unknown → ``None``."""
    return _CHAR_MAP.get(char)
