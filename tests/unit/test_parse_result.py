"""
Unit Tests for src.parsers.base

Tests ParseResult validation, retrieval helpers and wire rendering.
"""

import pytest
from src.config import GLOBAL_SCOPE_KEY
from src.parsers.base import BaseParser, ParseResult


@pytest.fixture
def result() -> ParseResult:
    return ParseResult(
        scopes={GLOBAL_SCOPE_KEY: ["Intro line"], "RULES": ["- do X", "- do Y"]},
        available_scopes=[GLOBAL_SCOPE_KEY, "RULES"],
    )


class TestParseResultValidation:
    """Tests for ParseResult.__post_init__()"""

    def test_default(self):
        """Default result holds only the empty global scope"""
        result = ParseResult()
        assert result.scopes == {GLOBAL_SCOPE_KEY: []}
        assert result.available_scopes == [GLOBAL_SCOPE_KEY]

    def test_missing_global(self):
        """Global scope is required"""
        with pytest.raises(ValueError):
            ParseResult(scopes={"A": []}, available_scopes=["A"])

    def test_order_mismatch(self):
        """available_scopes must match key order"""
        with pytest.raises(ValueError):
            ParseResult(
                scopes={GLOBAL_SCOPE_KEY: [], "A": []},
                available_scopes=["A", GLOBAL_SCOPE_KEY],
            )

    def test_global_not_first(self):
        """Global scope must come first"""
        with pytest.raises(ValueError):
            ParseResult(
                scopes={"A": [], GLOBAL_SCOPE_KEY: []},
                available_scopes=["A", GLOBAL_SCOPE_KEY],
            )

    def test_scopes_type(self):
        """scopes must be a dict"""
        with pytest.raises(TypeError):
            ParseResult(scopes=[GLOBAL_SCOPE_KEY], available_scopes=[GLOBAL_SCOPE_KEY])


class TestParseResultRetrieval:
    """Tests for get_scope(), has_scope() and global_lines"""

    def test_get_scope_normalizes_name(self, result):
        """Lookup ignores case and surrounding whitespace"""
        assert result.get_scope("  rules ") == ["- do X", "- do Y"]

    def test_get_missing_scope(self, result):
        """Missing scopes return an empty list"""
        assert result.get_scope("nothing here") == []
        assert result.get_scope(None) == []

    def test_get_scope_returns_copy(self, result):
        """Callers cannot mutate the result through get_scope()"""
        result.get_scope("RULES").append("extra")
        assert result.scopes["RULES"] == ["- do X", "- do Y"]

    def test_has_scope(self, result):
        """Membership uses the same normalization"""
        assert result.has_scope("Rules") is True
        assert result.has_scope("global context") is True
        assert result.has_scope("Bonus") is False

    def test_global_lines(self, result):
        """global_lines exposes unscoped content"""
        assert result.global_lines == ["Intro line"]


class TestParseResultToDict:
    """Tests for to_dict()"""

    def test_wire_form(self, result):
        """Renders scopes and availableScopes"""
        assert result.to_dict() == {
            "scopes": {GLOBAL_SCOPE_KEY: ["Intro line"], "RULES": ["- do X", "- do Y"]},
            "availableScopes": [GLOBAL_SCOPE_KEY, "RULES"],
        }

    def test_wire_form_preserves_order(self, result):
        """Key order follows first appearance"""
        assert list(result.to_dict()["scopes"].keys()) == [GLOBAL_SCOPE_KEY, "RULES"]


class TestBaseParser:
    """Tests for BaseParser"""

    def test_abstract(self):
        """BaseParser cannot be instantiated directly"""
        with pytest.raises(TypeError):
            BaseParser()

    def test_subclass(self):
        """Subclasses implementing parse() work"""
        class EmptyParser(BaseParser):
            def parse(self, raw_text):
                return ParseResult()

        assert EmptyParser().parse("anything").available_scopes == [GLOBAL_SCOPE_KEY]
