"""Rustreeem - lexical analysis for the Rustreeem expression language.

Turns a stream of source characters into located tokens for a parser.

Public API:
    Lexer - Pull-based tokenizer yielding (start, token, end) triples
    tokenize - Lex a whole source into a list of tokens
    Token, TokenKind - Closed token-kind set with payloads
    SpannedToken - Token stamped with its start and end positions
    Position, Span - Row/column source locations
    KEYWORDS - Default reserved-word table

Exceptions:
    RustreeemError - Base exception class
    LexicalError - Character or literal the lexer cannot tokenize

Submodules:
    rustreeem.syntax.tokens - Token kinds and operator table
    rustreeem.syntax.cursor - Two-slot lookahead cursor
    rustreeem.syntax.classifiers - Character predicates
    rustreeem.diagnostics - Error codes, templates, and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import LexicalError, LexicalErrorKind, RustreeemError
from .syntax import (
    KEYWORDS,
    Lexer,
    Position,
    Span,
    SpannedToken,
    Token,
    TokenKind,
    tokenize,
)

try:
    __version__ = _get_version("rustreeem")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "KEYWORDS",
    "Lexer",
    "LexicalError",
    "LexicalErrorKind",
    "Position",
    "RustreeemError",
    "Span",
    "SpannedToken",
    "Token",
    "TokenKind",
    "__version__",
    "tokenize",
]
