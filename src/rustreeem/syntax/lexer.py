"""Lexing Rustreeem source code.

This module provides the pull-based :class:`Lexer` that turns a character
source into located tokens for the parser.

Architecture:
    A :class:`~rustreeem.syntax.cursor.Cursor` buffers the current and next
    character. Each pull dispatches on the current character to one
    producer, which consumes greedily and returns a
    :class:`~rustreeem.syntax.tokens.SpannedToken`:

    - digit: integer literal (arbitrary precision)
    - letter or ``_``: identifier, or keyword when the full text matches
    - operator start: longest-match operator (one character of lookahead)

    Dispatch checks digits first, so identifiers never start with a digit.

Errors:
    A character with no rule, or an integer literal over the digit limit,
    raises :class:`~rustreeem.diagnostics.LexicalError` carrying the failing
    position. The session is exhausted afterwards; there is no resync.

Security:
    Includes configurable source size and literal length limits to prevent
    DoS via unbounded memory or quadratic int conversion.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import StrEnum

from rustreeem.constants import (
    DECIMAL_RADIX,
    INTEGER_CHUNK_DIGITS,
    MAX_INTEGER_DIGITS,
    MAX_SOURCE_SIZE,
)
from rustreeem.diagnostics import ErrorTemplate, LexicalError, LexicalErrorKind

from .classifiers import (
    is_decimal_digit,
    is_identifier_char,
    is_identifier_start,
    is_operator_start,
)
from .cursor import Cursor
from .keywords import KEYWORDS
from .tokens import OPERATORS, SpannedToken, Token

__all__ = ["Lexer", "LexerState", "parse_decimal", "tokenize"]

logger = logging.getLogger(__name__)


def parse_decimal(digits: str) -> int:
    """Convert a string of ASCII decimal digits to int, at any length.

    int() alone refuses strings longer than the interpreter's int/str
    conversion limit. Converting fixed-size chunks and shifting the
    accumulator keeps every int() call under that limit.

    Example:
        >>> parse_decimal("0042")
        42
        >>> parse_decimal("9" * 5000) == 10**5000 - 1
        True
    """
    if len(digits) <= INTEGER_CHUNK_DIGITS:
        return int(digits)
    value = 0
    for offset in range(0, len(digits), INTEGER_CHUNK_DIGITS):
        chunk = digits[offset : offset + INTEGER_CHUNK_DIGITS]
        value = value * DECIMAL_RADIX ** len(chunk) + int(chunk)
    return value


class LexerState(StrEnum):
    """Lifecycle of a lexing session."""

    SCANNING = "scanning"
    EXHAUSTED = "exhausted"


class Lexer:
    """Pull-based tokenizer over a one-shot character source.

    Iterating yields :class:`SpannedToken` triples until the input ends.
    The iterator is lazy, finite, and cannot be restarted; create a new
    Lexer from the original input to lex it again.

    Example:
        >>> [str(t.token) for t in Lexer("x+=12")]
        ['x', '+=', '12']
        >>> lexer = Lexer("+@")
        >>> next(lexer).token
        Token(kind=<TokenKind.PLUS: 'plus'>, value=None)
        >>> next(lexer)
        Traceback (most recent call last):
        ...
        rustreeem.diagnostics.errors.LexicalError: error[UNHANDLED_CHARACTER]: ...

    Attributes:
        max_source_size: Maximum source length for str sources (0 = no limit)
        max_integer_digits: Maximum digits per integer literal (0 = no limit)
    """

    __slots__ = (
        "_cursor",
        "_keywords",
        "_max_integer_digits",
        "_max_source_size",
        "_parse_integer",
        "_state",
        "_token_count",
    )

    def __init__(
        self,
        source: Iterable[str],
        *,
        keywords: Mapping[str, Token] | None = None,
        parse_integer: Callable[[str], int] = parse_decimal,
        max_source_size: int | None = None,
        max_integer_digits: int | None = None,
    ) -> None:
        """Create a lexing session.

        Args:
            source: Characters to lex; a str or any iterable of single
                characters. Consumed once, lazily.
            keywords: Spelling -> keyword token table (default: KEYWORDS).
                Only read, never mutated.
            parse_integer: Converts a non-empty decimal digit string to int
                (default: parse_decimal, which has no length limit).
            max_source_size: Maximum length of a str source (default: 10 MB).
                Set to 0 to disable the limit.
            max_integer_digits: Maximum digits in one integer literal
                (default: 4300). Set to 0 to disable the limit.

        Raises:
            ValueError: If a str source exceeds max_source_size
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_integer_digits = (
            max_integer_digits if max_integer_digits is not None else MAX_INTEGER_DIGITS
        )

        if (
            isinstance(source, str)
            and self._max_source_size > 0
            and len(source) > self._max_source_size
        ):
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        self._keywords = keywords if keywords is not None else KEYWORDS
        self._parse_integer = parse_integer
        self._cursor = Cursor(source)
        self._state = LexerState.SCANNING
        self._token_count = 0
        logger.debug("Lexer session started at %s", self._cursor.location)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed length of a str source."""
        return self._max_source_size

    @property
    def max_integer_digits(self) -> int:
        """Maximum allowed digits in one integer literal."""
        return self._max_integer_digits

    @property
    def state(self) -> LexerState:
        """Current lifecycle state."""
        return self._state

    def __iter__(self) -> Iterator[SpannedToken]:
        return self

    def __next__(self) -> SpannedToken:
        """Lex one token.

        Raises:
            StopIteration: When input is exhausted (or after a lexical error)
            LexicalError: On a character with no rule or an oversized literal
        """
        if self._state is LexerState.EXHAUSTED:
            raise StopIteration

        ch = self._cursor.peek()
        if ch is None:
            self._state = LexerState.EXHAUSTED
            logger.debug(
                "Lexer exhausted at %s after %d token(s)",
                self._cursor.location,
                self._token_count,
            )
            raise StopIteration

        try:
            spanned = self._dispatch(ch)
        except LexicalError as e:
            self._state = LexerState.EXHAUSTED
            logger.debug("Lexer stopped at %s: %s", e.position, e.kind)
            raise

        self._token_count += 1
        return spanned

    def results(self) -> Iterator[SpannedToken | LexicalError]:
        """Drain the session as values instead of exceptions.

        Yields every token, then the lexical error (if one occurs) as the
        final element.

        Example:
            >>> [type(r).__name__ for r in Lexer("a@b").results()]
            ['SpannedToken', 'LexicalError']
        """
        try:
            yield from self
        except LexicalError as error:
            yield error

    def _dispatch(self, ch: str) -> SpannedToken:
        if is_decimal_digit(ch):
            return self._lex_number()
        if is_identifier_start(ch):
            return self._lex_identifier()
        if is_operator_start(ch):
            return self._lex_operator(ch)
        raise self._unhandled_character()

    def _lex_identifier(self) -> SpannedToken:
        """Lex an identifier, then check the full text against the keywords."""
        start = self._cursor.location
        chars: list[str] = []
        while is_identifier_char(ch := self._cursor.peek()):
            chars.append(ch)
            self._cursor.advance()
        end = self._cursor.location

        text = "".join(chars)
        keyword = self._keywords.get(text)
        token = keyword if keyword is not None else Token.identifier(text)
        return SpannedToken(start, token, end)

    def _lex_number(self) -> SpannedToken:
        start = self._cursor.location
        digits: list[str] = []
        while is_decimal_digit(ch := self._cursor.peek()):
            digits.append(ch)
            self._cursor.advance()
        end = self._cursor.location

        text = "".join(digits)
        if self._max_integer_digits > 0 and len(text) > self._max_integer_digits:
            diagnostic = ErrorTemplate.integer_literal_too_long(
                len(text), self._max_integer_digits, start.row, start.column
            )
            raise LexicalError(
                diagnostic,
                kind=LexicalErrorKind.MALFORMED_LITERAL,
                position=start,
                text=text,
            )

        # Only ASCII digits reach the parser and parse_decimal accepts any
        # length, so a rejection here is a bug in the parser or the
        # accumulation loop, not bad input.
        try:
            value = self._parse_integer(text)
        except ValueError as e:
            msg = f"Integer parser rejected a {len(text)}-digit decimal string at {start}"
            raise RuntimeError(msg) from e
        return SpannedToken(start, Token.integer(value), end)

    def _lex_operator(self, ch: str) -> SpannedToken:
        """Longest match over one character of lookahead; never backtracks."""
        start = self._cursor.location
        rule = OPERATORS[ch]
        follow = self._cursor.peek_next()
        if follow is not None and follow in rule.continuations:
            token = rule.continuations[follow]
            self._cursor.advance()
        else:
            token = rule.single
        self._cursor.advance()
        return SpannedToken(start, token, self._cursor.location)

    def _unhandled_character(self) -> LexicalError:
        start = self._cursor.location
        char = self._cursor.advance() or ""
        diagnostic = ErrorTemplate.unhandled_character(char, start.row, start.column)
        return LexicalError(
            diagnostic,
            kind=LexicalErrorKind.UNHANDLED_CHARACTER,
            position=start,
            text=char,
        )


def tokenize(
    source: Iterable[str],
    *,
    keywords: Mapping[str, Token] | None = None,
    parse_integer: Callable[[str], int] = parse_decimal,
    max_source_size: int | None = None,
    max_integer_digits: int | None = None,
) -> list[SpannedToken]:
    """Lex a whole source into a list of tokens.

    Convenience function for ``list(Lexer(source, ...))``.

    Raises:
        LexicalError: On the first lexical error
        ValueError: If a str source exceeds max_source_size

    Example:
        >>> from rustreeem.syntax import tokenize
        >>> [str(t.token) for t in tokenize("lambda|>x")]
        ['lambda', '->', 'x']
    """
    lexer = Lexer(
        source,
        keywords=keywords,
        parse_integer=parse_integer,
        max_source_size=max_source_size,
        max_integer_digits=max_integer_digits,
    )
    return list(lexer)
