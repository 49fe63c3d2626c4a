"""Rustreeem exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from rustreeem.syntax.position import Position

__all__ = ["LexicalError", "LexicalErrorKind", "RustreeemError"]


class RustreeemError(Exception):
    """Base exception for all Rustreeem errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RustreeemError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LexicalErrorKind(StrEnum):
    """Kind of lexical failure.

    StrEnum provides automatic string conversion:
    str(LexicalErrorKind.UNHANDLED_CHARACTER) == "unhandled-character"
    """

    MALFORMED_LITERAL = "malformed-literal"
    """A recognized literal form whose value conversion failed."""

    UNHANDLED_CHARACTER = "unhandled-character"
    """A character that no lexing rule accepts."""


class LexicalError(RustreeemError):
    """Lexing stopped on input the lexer cannot turn into a token.

    The lexer does not recover: once raised (or yielded), the session is
    exhausted. Callers that want to continue must build their own
    skip-and-resync policy on top.

    Attributes:
        kind: Which lexical rule failed
        position: Where the failing character or literal starts
        text: The offending character, or the literal's text
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: LexicalErrorKind,
        position: "Position",
        text: str = "",
    ) -> None:
        """Initialize LexicalError.

        Args:
            message: Error message string OR Diagnostic object
            kind: Which lexical rule failed
            position: Where the failure starts
            text: The offending character or literal text
        """
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.text = text
