"""Shared constants for the Rustreeem lexer.

Centralized limits used by the syntax layer. Placing them here keeps a
single source of truth that the lexer and its tests both read.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Literal limits: bounds on numeric literal conversion
- Numeric radix: the only radix the classifiers understand

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Literal limits
    "MAX_INTEGER_DIGITS",
    "INTEGER_CHUNK_DIGITS",
    # Numeric radix
    "DECIMAL_RADIX",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Only enforced when the source is a str; iterators have no length up front.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LITERAL LIMITS
# ============================================================================

# Maximum digits in a single integer literal.
# Matches CPython's default int/str conversion limit (sys.int_info). Raising
# or disabling it is safe: the default integer parser converts any length.
MAX_INTEGER_DIGITS: int = 4300

# Digits converted per int() call by the default integer parser.
# The lowest value sys.set_int_max_str_digits() accepts, so no chunk can
# trip the interpreter's conversion limit whatever it is set to.
INTEGER_CHUNK_DIGITS: int = 640

# ============================================================================
# NUMERIC RADIX
# ============================================================================

DECIMAL_RADIX: int = 10
