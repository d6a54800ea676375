"""Notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sanparse.core.enums import CastleSide, PieceType


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Immutable description of a single SAN move token.

    ``input`` always echoes the argument handed to the parser, even when the
    token is rejected. Every other field keeps its default unless
    ``is_valid`` is true.
    """

    is_valid: bool = False
    input: Any = None
    piece: PieceType | None = None

    from_: str | None = None
    from_file: str | None = None
    from_rank: str | None = None

    to: str | None = None
    to_file: str | None = None
    to_rank: str | None = None

    is_capture: bool = False
    is_check: bool = False
    is_checkmate: bool = False
    is_castle: bool = False
    is_promoted: bool = False
    promote_piece: PieceType | None = None
    castle_side: CastleSide | None = None

    @classmethod
    def invalid(cls, value: Any = None) -> ParseResult:
        """All-default rejection echoing *value*."""
        return cls(input=value)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with camelCase keys and string enum values."""
        return {
            "isValid": self.is_valid,
            "input": self.input,
            "piece": _enum_value(self.piece),
            "from": self.from_,
            "fromFile": self.from_file,
            "fromRank": self.from_rank,
            "to": self.to,
            "toFile": self.to_file,
            "toRank": self.to_rank,
            "isCapture": self.is_capture,
            "isCheck": self.is_check,
            "isCheckmate": self.is_checkmate,
            "isCastle": self.is_castle,
            "isPromoted": self.is_promoted,
            "promotePiece": _enum_value(self.promote_piece),
            "castleSide": _enum_value(self.castle_side),
        }


def _enum_value(member: PieceType | CastleSide | None) -> str | None:
    return None if member is None else member.value
