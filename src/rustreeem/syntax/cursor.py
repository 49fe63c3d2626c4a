"""Two-slot lookahead cursor over a forward-only character source.

The cursor is the single source of truth for "what character am I looking
at" and "where am I". It keeps exactly two characters buffered (current and
next) so that two-character operators can be recognized without
re-reading the source, which may be a one-shot iterator.

Position Tracking:
    - Starts at row 1, column 1 once primed
    - Column advances by one on every advance(), including past end of input
    - Row is never advanced; newlines get no special treatment here

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator

from .position import Position

__all__ = ["Cursor"]


class Cursor:
    """Mutable lookahead window over a character source.

    Only advance() mutates state. Past end of input advance() keeps
    returning None and keeps counting columns; callers must not read the
    column as a count of real characters beyond that point.

    Example:
        >>> cursor = Cursor("ab")
        >>> cursor.peek(), cursor.peek_next(), str(cursor.location)
        ('a', 'b', '1:1')
        >>> cursor.advance()
        'a'
        >>> cursor.peek(), cursor.peek_next(), str(cursor.location)
        ('b', None, '1:2')
        >>> cursor.advance(), cursor.advance()
        ('b', None)
        >>> cursor.is_eof, str(cursor.location)
        (True, '1:4')
    """

    __slots__ = ("_chars", "_current", "_next", "_position")

    def __init__(self, source: Iterable[str]) -> None:
        """Wrap a source and prime the two lookahead slots.

        Args:
            source: Any iterable of single characters; a str works directly.
                It is consumed once, left to right.
        """
        self._chars: Iterator[str] = iter(source)
        self._current: str | None = None
        self._next: str | None = None
        self._position = Position(0, 0)
        # Fill both slots, then start at the top row (=1), left column (=1).
        self.advance()
        self.advance()
        self._position = Position(1, 1)

    def advance(self) -> str | None:
        """Consume the current character.

        Returns:
            The character that was current, or None at end of input
        """
        consumed = self._current
        self._current = self._next
        self._next = next(self._chars, None)
        self._position = self._position.advance_column()
        return consumed

    def peek(self) -> str | None:
        """Current character without consuming it (None at end of input)."""
        return self._current

    def peek_next(self) -> str | None:
        """Character after the current one without consuming anything."""
        return self._next

    @property
    def location(self) -> Position:
        """Snapshot of the current position."""
        return self._position

    @property
    def is_eof(self) -> bool:
        """True once the current slot is empty."""
        return self._current is None
