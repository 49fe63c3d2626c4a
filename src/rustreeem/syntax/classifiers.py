"""Character classifiers for the Rustreeem lexer.

Pure predicates over a single lookahead slot. Every classifier accepts
``None`` (end of input) and returns False for it, so callers can pass a
cursor slot straight through.

Only ASCII is classified: str.isalpha() and str.isdigit() accept Unicode
letters and digits (like é or ²), which the language does not allow.
"""

from typing import TypeGuard

from rustreeem.constants import DECIMAL_RADIX

from .tokens import OPERATORS

__all__ = [
    "is_decimal_digit",
    "is_identifier_char",
    "is_identifier_start",
    "is_operator_start",
]

_ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# ASCII digits only. str.isdigit() returns True for Unicode digits which
# the integer parser would then reject.
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


def is_identifier_start(ch: str | None) -> TypeGuard[str]:
    """ASCII letter or underscore."""
    return ch is not None and (ch in _ASCII_LETTERS or ch == "_")


def is_identifier_char(ch: str | None) -> TypeGuard[str]:
    """ASCII letter, digit, or underscore.

    Accepts digits in any position. The "identifiers do not start with a
    digit" rule comes from dispatch order: the lexer routes a leading digit
    to numeric lexing before identifier lexing is considered.
    """
    return ch is not None and (ch in _ASCII_LETTERS or ch in _ASCII_DIGITS or ch == "_")


def is_decimal_digit(ch: str | None, radix: int = DECIMAL_RADIX) -> TypeGuard[str]:
    """ASCII ``0``-``9``.

    Args:
        ch: Character to classify (None at end of input)
        radix: Numeric base; only 10 is implemented

    Raises:
        NotImplementedError: For any radix other than 10
    """
    if radix != DECIMAL_RADIX:
        msg = f"Radix not implemented: {radix}"
        raise NotImplementedError(msg)
    return ch is not None and ch in _ASCII_DIGITS


def is_operator_start(ch: str | None) -> TypeGuard[str]:
    """Character begins an operator in the longest-match table."""
    return ch is not None and ch in OPERATORS
