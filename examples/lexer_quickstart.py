"""Lexer Examples - Tokenizing Rustreeem Source.

Demonstrates the lexer's public API:

1. Tokenize a whole source
2. Pull tokens lazily from a one-shot character stream
3. Match on token kinds
4. Handle lexical errors as exceptions or as values
5. Render diagnostics for terminals and tooling

Python 3.13+.
"""

from __future__ import annotations


def example_1_tokenize() -> None:
    """Lex a whole source into (start, token, end) triples."""
    from rustreeem import tokenize

    print("=" * 60)
    print("Example 1: Tokenize")
    print("=" * 60)

    for start, token, end in tokenize("lambda->x+=12345678901234567890"):
        print(f"  {start}-{end}  {token.kind:<12} {token}")
    print()


def example_2_lazy_stream() -> None:
    """Pull tokens one at a time from a generator of characters."""
    from rustreeem import Lexer

    print("=" * 60)
    print("Example 2: Lazy Stream")
    print("=" * 60)

    def characters():
        for ch in "a|>b":
            print(f"  (read {ch!r})")
            yield ch

    lexer = Lexer(characters())
    for spanned in lexer:
        print(f"  token: {spanned.token}")
    print(f"  state: {lexer.state}")
    print()


def example_3_matching() -> None:
    """Dispatch on token kinds with structural pattern matching."""
    from rustreeem import Token, TokenKind, tokenize

    print("=" * 60)
    print("Example 3: Matching Token Kinds")
    print("=" * 60)

    for spanned in tokenize("f->x*2"):
        match spanned.token:
            case Token(kind=TokenKind.IDENTIFIER, value=name):
                print(f"  identifier {name}")
            case Token(kind=TokenKind.INTEGER, value=number):
                print(f"  integer    {number}")
            case Token(kind=kind):
                print(f"  operator   {kind.spelling}")
    print()


def example_4_errors() -> None:
    """Lexical errors as exceptions, or as the last element of results()."""
    from rustreeem import Lexer, LexicalError, tokenize

    print("=" * 60)
    print("Example 4: Lexical Errors")
    print("=" * 60)

    try:
        tokenize("x+@")
    except LexicalError as e:
        print(f"  {e.kind} at {e.position}: {e.text!r}")

    for result in Lexer("a*b c").results():
        match result:
            case LexicalError(position=position):
                print(f"  stopped at {position}")
            case _:
                print(f"  token {result.token}")
    print()


def example_5_diagnostics() -> None:
    """Format the structured diagnostic attached to an error."""
    from rustreeem import LexicalError, tokenize
    from rustreeem.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 5: Diagnostics")
    print("=" * 60)

    try:
        tokenize("1+$")
    except LexicalError as e:
        assert e.diagnostic is not None
        print(DiagnosticFormatter(color=True).format(e.diagnostic))
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
    print()


def main() -> None:
    """Run all lexer examples."""
    print()
    print("Rustreeem Lexer Examples")
    print()

    example_1_tokenize()
    example_2_lazy_stream()
    example_3_matching()
    example_4_errors()
    example_5_diagnostics()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
