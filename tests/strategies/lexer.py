"""Hypothesis strategies for lexer testing.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - lexable_size: Source length classification (empty|short|long)
    - digit_len: Digit string length vs. 64-bit range (fits|exceeds)
    - operator: Operator spelling width (single|double)
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from rustreeem.syntax.keywords import KEYWORDS

IDENTIFIER_ALPHABET: str = string.ascii_letters + string.digits + "_"

# Every character some rule accepts. "=" and ">" only appear as the second
# half of an operator, so sources mixing them freely can still hit the
# unhandled-character path; lexable_sources avoids that.
LEXABLE_ALPHABET: str = IDENTIFIER_ALPHABET + "+-*/|"

OPERATOR_SPELLINGS: tuple[str, ...] = (
    "+", "-", "*", "/", "|", "+=", "-=", "->", "*=", "/=", "|>",
)


@st.composite
def lexable_sources(draw: st.DrawFn, max_size: int = 80) -> str:
    """Source text built only from characters that start a token.

    Events emitted:
    - lexable_size={empty|short|long}
    """
    source = draw(st.text(alphabet=LEXABLE_ALPHABET, max_size=max_size))
    if not source:
        event("lexable_size=empty")
    elif len(source) <= 10:
        event("lexable_size=short")
    else:
        event("lexable_size=long")
    return source


identifier_texts = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,30}", fullmatch=True)

non_keyword_identifiers = identifier_texts.filter(lambda s: s not in KEYWORDS)


@st.composite
def digit_strings(draw: st.DrawFn, max_size: int = 60) -> str:
    """Non-empty ASCII decimal digit strings, leading zeros allowed.

    Events emitted:
    - digit_len={fits|exceeds}: vs. the 18 digits of a signed 64-bit int
    """
    digits = draw(st.text(alphabet=string.digits, min_size=1, max_size=max_size))
    event("digit_len=fits" if len(digits) <= 18 else "digit_len=exceeds")
    return digits


@st.composite
def operator_spellings(draw: st.DrawFn) -> str:
    """Any operator spelling from the longest-match table.

    Events emitted:
    - operator={single|double}
    """
    spelling = draw(st.sampled_from(OPERATOR_SPELLINGS))
    event("operator=single" if len(spelling) == 1 else "operator=double")
    return spelling


# Characters with no lexing rule. "=" and ">" are also unhandled when they
# lead, but after an operator start they may complete it, so they are left out
# to keep prefix + character sources predictable.
unhandled_characters = st.characters(
    codec="utf-8",
    exclude_characters=LEXABLE_ALPHABET + "=>",
)
