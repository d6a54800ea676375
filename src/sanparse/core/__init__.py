"""Core domain layer: board-free SAN parsing with zero external dependencies.

Quick start::

    from sanparse.core import parse_san

    result = parse_san("Nbxd2+")
    if result.is_valid:
        print(result.piece, result.from_file, result.to)
"""

from sanparse.core.enums import CastleSide, PieceType
from sanparse.core.notation import ParseResult, is_valid_san, parse_san
from sanparse.core.piece import PROMOTION_PIECES, expand_piece_abbr
from sanparse.core.types import (
    FILES,
    RANKS,
    is_file,
    is_rank,
    is_square_name,
    split_location,
)

__all__ = [
    # Enums
    "CastleSide",
    "PieceType",
    # Types / helpers
    "FILES",
    "RANKS",
    "PROMOTION_PIECES",
    "expand_piece_abbr",
    "is_file",
    "is_rank",
    "is_square_name",
    "split_location",
    # Notation
    "ParseResult",
    "is_valid_san",
    "parse_san",
]
