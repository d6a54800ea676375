"""Notation package: SAN move token parsing."""

from sanparse.core.notation.models import ParseResult
from sanparse.core.notation.san import is_valid_san, parse_san

__all__ = [
    "ParseResult",
    "is_valid_san",
    "parse_san",
]
