"""Rustreeem token definitions.

Source code is tokenized into a sequence of these tokens. The token-kind
set is closed: a Token is a kind tag plus an optional payload, matched
exhaustively by consumers rather than extended through subclassing.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from .position import Position, Span

__all__ = [
    "ARROW",
    "LAMBDA",
    "MINUS",
    "MINUS_EQUAL",
    "OPERATORS",
    "PIPE_BAR",
    "PLUS",
    "PLUS_EQUAL",
    "SLASH",
    "SLASH_EQUAL",
    "STAR",
    "STAR_EQUAL",
    "VBAR",
    "OperatorRule",
    "SpannedToken",
    "Token",
    "TokenKind",
]


class TokenKind(StrEnum):
    """Kind tag of a token.

    StrEnum provides automatic string conversion: str(TokenKind.PLUS) == "plus"
    """

    # Payload-carrying kinds
    IDENTIFIER = "identifier"
    INTEGER = "integer"

    # Operators
    PLUS = "plus"
    MINUS = "minus"
    STAR = "star"
    SLASH = "slash"
    PLUS_EQUAL = "plus_equal"
    MINUS_EQUAL = "minus_equal"
    STAR_EQUAL = "star_equal"
    SLASH_EQUAL = "slash_equal"
    ARROW = "arrow"
    PIPE_BAR = "pipe_bar"
    VBAR = "vbar"

    # Keywords (alphabetically)
    LAMBDA = "lambda"

    @property
    def spelling(self) -> str | None:
        """Fixed source spelling, or None for identifiers and literals."""
        return _SPELLINGS.get(self)


# ARROW has two spellings ("->" and "|>"); "->" is canonical.
# PIPE_BAR is part of the closed set but no lexing rule produces it,
# so it has no spelling.
_SPELLINGS: dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.PLUS_EQUAL: "+=",
    TokenKind.MINUS_EQUAL: "-=",
    TokenKind.STAR_EQUAL: "*=",
    TokenKind.SLASH_EQUAL: "/=",
    TokenKind.ARROW: "->",
    TokenKind.VBAR: "|",
    TokenKind.LAMBDA: "lambda",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token kind with its optional payload.

    Attributes:
        kind: The token's kind tag
        value: Identifier text (str), integer value (int), or None

    Example:
        >>> Token.identifier("x")
        Token(kind=<TokenKind.IDENTIFIER: 'identifier'>, value='x')
        >>> Token.integer(3) == Token(TokenKind.INTEGER, 3)
        True
        >>> str(PLUS_EQUAL)
        '+='
    """

    kind: TokenKind
    value: str | int | None = None

    def __post_init__(self) -> None:
        """Validate that the payload matches the kind."""
        match self.kind:
            case TokenKind.IDENTIFIER:
                if not isinstance(self.value, str) or not self.value:
                    msg = f"Identifier token requires non-empty str value, got {self.value!r}"
                    raise ValueError(msg)
            case TokenKind.INTEGER:
                # bool is an int subclass but never a literal value
                if not isinstance(self.value, int) or isinstance(self.value, bool):
                    msg = f"Integer token requires int value, got {self.value!r}"
                    raise ValueError(msg)
            case _:
                if self.value is not None:
                    msg = f"{self.kind.name} token takes no value, got {self.value!r}"
                    raise ValueError(msg)

    def __str__(self) -> str:
        if self.value is not None:
            return str(self.value)
        return self.kind.spelling or self.kind.value

    @classmethod
    def identifier(cls, text: str) -> "Token":
        """Create an IDENTIFIER token."""
        return cls(TokenKind.IDENTIFIER, text)

    @classmethod
    def integer(cls, value: int) -> "Token":
        """Create an INTEGER token."""
        return cls(TokenKind.INTEGER, value)


PLUS = Token(TokenKind.PLUS)
MINUS = Token(TokenKind.MINUS)
STAR = Token(TokenKind.STAR)
SLASH = Token(TokenKind.SLASH)
PLUS_EQUAL = Token(TokenKind.PLUS_EQUAL)
MINUS_EQUAL = Token(TokenKind.MINUS_EQUAL)
STAR_EQUAL = Token(TokenKind.STAR_EQUAL)
SLASH_EQUAL = Token(TokenKind.SLASH_EQUAL)
ARROW = Token(TokenKind.ARROW)
PIPE_BAR = Token(TokenKind.PIPE_BAR)
VBAR = Token(TokenKind.VBAR)
LAMBDA = Token(TokenKind.LAMBDA)


@dataclass(frozen=True, slots=True)
class SpannedToken:
    """A token stamped with the positions it was read from.

    Unpacks like the (start, token, end) triple parsers expect:

        >>> start, token, end = SpannedToken(Position(1, 1), PLUS, Position(1, 2))
        >>> token
        Token(kind=<TokenKind.PLUS: 'plus'>, value=None)

    Attributes:
        start: Position of the first character
        token: The token
        end: Position immediately after the last character
    """

    start: Position
    token: Token
    end: Position

    def __iter__(self) -> Iterator[Position | Token]:
        yield self.start
        yield self.token
        yield self.end

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


@dataclass(frozen=True, slots=True)
class OperatorRule:
    """Longest-match rule for one operator start character.

    Attributes:
        single: Token emitted when no continuation matches
        continuations: Second character -> two-character token
    """

    single: Token
    continuations: Mapping[str, Token]


# Start character -> rule. Each start character has at most the listed
# continuations, so the one-character lookahead is never ambiguous.
OPERATORS: Mapping[str, OperatorRule] = MappingProxyType(
    {
        "+": OperatorRule(PLUS, MappingProxyType({"=": PLUS_EQUAL})),
        "-": OperatorRule(MINUS, MappingProxyType({"=": MINUS_EQUAL, ">": ARROW})),
        "*": OperatorRule(STAR, MappingProxyType({"=": STAR_EQUAL})),
        "/": OperatorRule(SLASH, MappingProxyType({"=": SLASH_EQUAL})),
        "|": OperatorRule(VBAR, MappingProxyType({">": ARROW})),
    }
)
