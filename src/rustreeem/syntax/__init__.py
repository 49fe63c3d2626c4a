"""Rustreeem syntax package.

Provides the lexer, its cursor and classifiers, token definitions, and
source positions. Separate from diagnostics so that tooling (parsers,
highlighters, IDE plugins) can depend on tokens alone.

Python 3.13+.
"""

from .cursor import Cursor
from .keywords import KEYWORDS
from .lexer import Lexer, LexerState, parse_decimal, tokenize
from .position import Position, Span, span_text
from .tokens import OPERATORS, OperatorRule, SpannedToken, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "Cursor",
    "Lexer",
    "LexerState",
    "OperatorRule",
    "Position",
    "Span",
    "SpannedToken",
    "Token",
    "TokenKind",
    "parse_decimal",
    "span_text",
    "tokenize",
]
