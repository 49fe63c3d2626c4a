"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://rustreeem.dev/reference/lexical"

    @staticmethod
    def unhandled_character(char: str, row: int, column: int) -> Diagnostic:
        """Character with no lexing rule.

        Args:
            char: The offending character
            row: Row of the character (1-indexed)
            column: Column of the character (1-indexed)

        Returns:
            Diagnostic for UNHANDLED_CHARACTER
        """
        msg = f"Unexpected character {char!r}"
        return Diagnostic(
            code=DiagnosticCode.UNHANDLED_CHARACTER,
            message=msg,
            span=SourceSpan(line=row, column=column, end_line=row, end_column=column + 1),
            hint="Only ASCII letters, digits, '_' and the operators + - * / | are valid",
            help_url=f"{ErrorTemplate._DOCS_BASE}/tokens.html",
        )

    @staticmethod
    def integer_literal_too_long(
        digit_count: int, max_digits: int, row: int, column: int
    ) -> Diagnostic:
        """Integer literal exceeds the configured digit limit.

        The literal text itself is not embedded: it may be thousands of
        characters long.

        Args:
            digit_count: Number of digits in the literal
            max_digits: The configured maximum
            row: Row where the literal starts
            column: Column where the literal starts

        Returns:
            Diagnostic for INTEGER_LITERAL_TOO_LONG
        """
        msg = f"Integer literal has {digit_count:,} digits (maximum {max_digits:,})"
        return Diagnostic(
            code=DiagnosticCode.INTEGER_LITERAL_TOO_LONG,
            message=msg,
            span=SourceSpan(
                line=row, column=column, end_line=row, end_column=column + digit_count
            ),
            hint="Raise max_integer_digits on the Lexer, or pass 0 to disable the limit",
            help_url=f"{ErrorTemplate._DOCS_BASE}/literals.html",
        )

    @staticmethod
    def source_too_large(source_size: int, max_size: int) -> Diagnostic:
        """Source rejected before lexing because of its size.

        Args:
            source_size: Length of the source in characters
            max_size: The configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({source_size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in the Lexer constructor to increase the limit",
        )
