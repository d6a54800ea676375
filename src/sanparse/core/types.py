"""File/rank alphabets and location token helpers.

A location token is whatever sits on either side of a move: a full square
name such as ``"e4"``, a lone file (``"a"``) or a lone rank (``"5"``).
"""

from __future__ import annotations

from typing import TypeAlias

FILES = "abcdefgh"
RANKS = "12345678"

Location: TypeAlias = tuple[str | None, str | None]  # (file, rank)


def is_file(ch: str) -> bool:
    """True for a single file letter a–h."""
    return len(ch) == 1 and ch in FILES


def is_rank(ch: str) -> bool:
    """True for a single rank digit 1–8."""
    return len(ch) == 1 and ch in RANKS


def is_square_name(name: str) -> bool:
    """Check whether *name* is a square such as ``"e4"``."""
    return len(name) == 2 and is_file(name[0]) and is_rank(name[1])


def split_location(token: str | None) -> Location:
    """Split a 0–2 character location token into ``(file, rank)``.

    Two-character tokens are split positionally without validation; the
    caller is expected to have checked the square where it matters.
    """
    if not token:
        return None, None
    if len(token) == 2:
        return token[0], token[1]
    if is_file(token):
        return token, None
    if is_rank(token):
        return None, token
    return None, None
