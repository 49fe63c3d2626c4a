"""Source positions for Rustreeem tokens.

Positions are (row, column) pairs counted the way the lexer cursor counts
them: both start at 1, and the column advances once per consumed character.
Rows are never advanced by the cursor itself.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Position", "Span", "span_text"]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable row/column snapshot.

    Ordering compares row first, then column.

    Example:
        >>> start = Position(1, 1)
        >>> start.advance_column()
        Position(row=1, column=2)
        >>> str(Position(3, 7))
        '3:7'
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        """Validate position invariants."""
        if self.row < 0:
            msg = f"Position row must be >= 0, got {self.row}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"Position column must be >= 0, got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.row}:{self.column}"

    def advance_column(self, count: int = 1) -> "Position":
        """Return a new position ``count`` columns to the right."""
        return Position(self.row, self.column + count)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of positions a token was read from.

    Attributes:
        start: Position of the first consumed character
        end: Position immediately after the last consumed character

    Example:
        Source: "abc+1"
        Identifier "abc" span: Span(Position(1, 1), Position(1, 4))
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    @property
    def length(self) -> int:
        """Number of columns covered (single-row spans)."""
        return self.end.column - self.start.column


def span_text(source: str, span: Span) -> str:
    """Extract the source text covered by a single-row span.

    Columns are 1-based, so column ``c`` maps to ``source[c - 1]``.

    Args:
        source: Complete source text the span was produced from
        span: Span on row 1

    Returns:
        The covered substring

    Raises:
        ValueError: If the span covers more than one row, or starts before
            column 1

    Example:
        >>> span_text("abc+1", Span(Position(1, 1), Position(1, 4)))
        'abc'
    """
    if span.start.row != span.end.row:
        msg = f"Span {span} covers more than one row"
        raise ValueError(msg)
    if span.start.column < 1:
        msg = f"Span start column must be >= 1, got {span.start.column}"
        raise ValueError(msg)
    return source[span.start.column - 1 : span.end.column - 1]
