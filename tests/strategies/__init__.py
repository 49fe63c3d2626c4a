"""Hypothesis strategies for Rustreeem property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- lexer: source text, identifiers, digit strings, and operator spellings
- diagnostics: source spans and diagnostics

Usage:
    from tests.strategies import lexable_sources, identifier_texts
    from tests.strategies.diagnostics import diagnostics

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - lexable_sources, digit_strings, operator_spellings, diagnostics
"""

from .diagnostics import diagnostics, source_spans
from .lexer import (
    IDENTIFIER_ALPHABET,
    LEXABLE_ALPHABET,
    OPERATOR_SPELLINGS,
    digit_strings,
    identifier_texts,
    lexable_sources,
    non_keyword_identifiers,
    operator_spellings,
    unhandled_characters,
)

__all__ = [
    "IDENTIFIER_ALPHABET",
    "LEXABLE_ALPHABET",
    "OPERATOR_SPELLINGS",
    "diagnostics",
    "digit_strings",
    "identifier_texts",
    "lexable_sources",
    "non_keyword_identifiers",
    "operator_spellings",
    "source_spans",
    "unhandled_characters",
]
