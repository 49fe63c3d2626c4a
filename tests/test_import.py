"""Tests for the public package surface."""

from __future__ import annotations

import rustreeem
from rustreeem import syntax


class TestPublicApi:
    """Top-level exports."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is importable."""
        for name in rustreeem.__all__:
            assert hasattr(rustreeem, name), name

    def test_syntax_exports_resolve(self) -> None:
        """Every name in rustreeem.syntax.__all__ is importable."""
        for name in syntax.__all__:
            assert hasattr(syntax, name), name

    def test_version_is_string(self) -> None:
        """__version__ is set whether or not the package is installed."""
        assert isinstance(rustreeem.__version__, str)
        assert rustreeem.__version__

    def test_quick_lex(self) -> None:
        """The top-level tokenize() works end to end."""
        tokens = rustreeem.tokenize("lambda->x")

        assert [str(t.token) for t in tokens] == ["lambda", "->", "x"]
        assert tokens[0].token == rustreeem.KEYWORDS["lambda"]
