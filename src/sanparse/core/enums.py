"""Core enumerations for move notation."""

from __future__ import annotations

from enum import Enum


class PieceType(str, Enum):
    """Chess piece types, valued by their lowercase English name."""

    PAWN = "pawn"
    KING = "king"
    QUEEN = "queen"
    KNIGHT = "knight"
    ROOK = "rook"
    BISHOP = "bishop"

    def __str__(self) -> str:
        return self.value


class CastleSide(str, Enum):
    """Castling direction."""

    SHORT = "short"
    LONG = "long"

    def __str__(self) -> str:
        return self.value
