"""sanparse: Standard Algebraic Notation move parser."""

from sanparse.core import (
    CastleSide,
    ParseResult,
    PieceType,
    expand_piece_abbr,
    is_valid_san,
    parse_san,
    split_location,
)

__all__ = [
    "CastleSide",
    "ParseResult",
    "PieceType",
    "expand_piece_abbr",
    "is_valid_san",
    "parse_san",
    "split_location",
]
