"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Lexical errors (character and literal failures)
        1100-1199: Input errors (rejected before lexing starts)
    """

    # Lexical errors (1000-1099)
    UNHANDLED_CHARACTER = 1001
    INTEGER_LITERAL_TOO_LONG = 1002

    # Input errors (1100-1199)
    SOURCE_TOO_LARGE = 1101


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source range for error reporting.

    Rows and columns are counted the way the lexer cursor counts them:
    both start at 1 and columns advance once per consumed character.

    Attributes:
        line: Starting row (1-indexed)
        column: Starting column (1-indexed)
        end_line: Ending row (1-indexed)
        end_column: Column just past the last character (exclusive)
    """

    line: int
    column: int
    end_line: int
    end_column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1 (1-indexed), or the
                end precedes the start.
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)
        if (self.end_line, self.end_column) < (self.line, self.column):
            msg = (
                f"SourceSpan end ({self.end_line}:{self.end_column}) must not "
                f"precede start ({self.line}:{self.column})"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (IDEs, LSP servers).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors raised before lexing)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNHANDLED_CHARACTER]: Unexpected character '@'
              --> line 1, column 2
              = help: Only letters, digits, '_' and the operators + - * / | are valid

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
