"""Reserved words of the Rustreeem language.

The table is built once at import time and is read-only afterwards, so a
single instance is shared by every lexer session without synchronization.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .tokens import LAMBDA, Token

__all__ = ["KEYWORDS"]

# Spelling -> keyword token. Lookup is exact and case-sensitive.
KEYWORDS: Mapping[str, Token] = MappingProxyType(
    {
        "lambda": LAMBDA,
    }
)
