"""SAN (Standard Algebraic Notation) move token parsing.

The parser works on a single token such as ``"Nbxd2"`` or ``"e8=Q#"`` and
knows nothing about the board. A token is reduced in a fixed order: check
suffix, checkmate suffix, capture marker, promotion suffix. Whatever is left
(the *core*) is then classified as a castle, a pawn move or a piece move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sanparse.core.enums import CastleSide, PieceType
from sanparse.core.notation.models import ParseResult
from sanparse.core.piece import PROMOTION_PIECES, expand_piece_abbr
from sanparse.core.types import is_file, is_square_name, split_location

_LOGGER = logging.getLogger(__name__)

_ACCEPTED_CHARS = frozenset("x+#=KQBNRPabcdefgh12345678O-")
_MIN_LENGTH = 2
_MAX_LENGTH = 8
_POWER_PIECES = "QKNRB"
_DISAMBIGUATED_PIECES = (PieceType.ROOK, PieceType.KNIGHT)
_CASTLES: dict[str, CastleSide] = {
    "O-O": CastleSide.SHORT,
    "O-O-O": CastleSide.LONG,
}


@dataclass(frozen=True, slots=True)
class _Annotations:
    """Token core plus the markers stripped from around it."""

    core: str
    is_check: bool = False
    is_checkmate: bool = False
    is_capture: bool = False
    promote_piece: PieceType | None = None


def parse_san(value: Any = None) -> ParseResult:
    """Parse a single SAN move token.

    Never raises: anything that is not a well-formed token, including
    non-string arguments, yields ``ParseResult.invalid(value)``.
    """
    try:
        _check_token(value)
        notes = _strip_annotations(value)
        fields = _classify(notes.core)
    except ValueError as exc:
        _LOGGER.debug("Rejected SAN %r: %s", value, exc)
        return ParseResult.invalid(value)

    return ParseResult(
        is_valid=True,
        input=value,
        is_check=notes.is_check,
        is_checkmate=notes.is_checkmate,
        is_capture=notes.is_capture,
        is_promoted=notes.promote_piece is not None,
        promote_piece=notes.promote_piece,
        **fields,
    )


def is_valid_san(value: Any = None) -> bool:
    """Shorthand for ``parse_san(value).is_valid``."""
    return parse_san(value).is_valid


# ── Input gate ──────────────────────────────────────────────────────────────


def _check_token(value: Any) -> None:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    if not (_MIN_LENGTH <= len(value) <= _MAX_LENGTH):
        raise ValueError(f"length {len(value)} outside {_MIN_LENGTH}-{_MAX_LENGTH}")
    bad = set(value) - _ACCEPTED_CHARS
    if bad:
        raise ValueError(f"unexpected characters {''.join(sorted(bad))!r}")


# ── Suffix stripping ────────────────────────────────────────────────────────


def _strip_annotations(token: str) -> _Annotations:
    """Strip ``+``, ``#``, ``x`` and ``=P`` in that order."""
    text, is_check = _strip_trailing(token, "+")
    text, is_checkmate = _strip_trailing(text, "#")
    text, is_capture = _strip_capture(text)
    text, promote_piece = _strip_promotion(text)
    return _Annotations(text, is_check, is_checkmate, is_capture, promote_piece)


def _strip_trailing(text: str, marker: str) -> tuple[str, bool]:
    """Remove *marker*, which may only appear as the final character."""
    if marker not in text:
        return text, False
    if text[-1] != marker:
        raise ValueError(f"{marker!r} must be the last character")
    return text.replace(marker, "", 1), True


def _strip_capture(text: str) -> tuple[str, bool]:
    # At most one character (file or piece letter) plus one disambiguator
    # may precede the capture marker.
    if "x" not in text:
        return text, False
    if "x" not in text[1:3]:
        raise ValueError("capture marker out of place")
    return text.replace("x", "", 1), True


def _strip_promotion(text: str) -> tuple[str, PieceType | None]:
    if "=" not in text:
        return text, None
    if len(text) < 2 or text[-2] != "=":
        raise ValueError("promotion must be '=' followed by a piece letter")
    letter = text[-1]
    if letter not in PROMOTION_PIECES:
        raise ValueError(f"cannot promote to {letter!r}")
    return text[: text.index("=")], expand_piece_abbr(letter)


# ── Shape classification ────────────────────────────────────────────────────


def _classify(core: str) -> dict[str, Any]:
    """Map the stripped core to the shape-specific result fields."""
    side = _CASTLES.get(core)
    if side is not None:
        return {"is_castle": True, "castle_side": side}

    if len(core) == 2:
        if not is_square_name(core):
            raise ValueError(f"{core!r} is not a square")
        return _move_fields(PieceType.PAWN, None, core)
    if len(core) < 2:
        raise ValueError("nothing left after stripping annotations")

    first = core[0]
    to = core[-2:]

    # Pawn capture, e.g. "dxe5" reduced to "de5"
    if is_file(first):
        return _move_fields(PieceType.PAWN, first, to)

    if first not in _POWER_PIECES:
        raise ValueError(f"unknown piece letter {first!r}")
    piece = expand_piece_abbr(first)
    assert piece is not None

    if len(core) == 3:
        return _move_fields(piece, None, to)

    if piece not in _DISAMBIGUATED_PIECES:
        raise ValueError(f"{piece} moves take no disambiguator")
    # Only one disambiguating character is read; "Rd1d4" reads as from "d".
    return _move_fields(piece, core[1], to)


def _move_fields(piece: PieceType, origin: str | None, to: str) -> dict[str, Any]:
    from_file, from_rank = split_location(origin)
    to_file, to_rank = split_location(to)
    return {
        "piece": piece,
        "from_": origin,
        "from_file": from_file,
        "from_rank": from_rank,
        "to": to,
        "to_file": to_file,
        "to_rank": to_rank,
    }
