"""
Unit Tests for src.utils.tokenization

Tests use fake or locally built encodings so no encoding files are fetched.
"""

from unittest.mock import MagicMock, patch

import pytest
import tiktoken
from src.config import GLOBAL_SCOPE_KEY
from src.parsers import parse_scopes
from src.utils import tokenization
from src.utils.tokenization import (
    count_tokens,
    count_scope_tokens,
    get_tokenizer,
    reset_tokenizer_cache,
)


@pytest.fixture
def word_tokenizer() -> MagicMock:
    """Fake encoding that yields one token per whitespace-separated word."""
    tokenizer = MagicMock()
    tokenizer.encode.side_effect = lambda text, **kwargs: text.split()
    return tokenizer


@pytest.fixture(autouse=True)
def clean_cache():
    reset_tokenizer_cache()
    yield
    reset_tokenizer_cache()


class TestCountTokens:
    """Tests for count_tokens()"""

    def test_empty_text(self, word_tokenizer):
        """Empty text has no tokens and skips encoding"""
        assert count_tokens("", word_tokenizer) == 0
        word_tokenizer.encode.assert_not_called()

    def test_explicit_tokenizer(self, word_tokenizer):
        """Uses the tokenizer passed in"""
        assert count_tokens("one two three", word_tokenizer) == 3

    def test_default_tokenizer(self, word_tokenizer):
        """Falls back to the cached tokenizer"""
        with patch.object(tokenization, "get_tokenizer", return_value=word_tokenizer):
            assert count_tokens("a b") == 2

    def test_special_tokens_allowed(self, word_tokenizer):
        """Special-token strings are encoded as ordinary text"""
        count_tokens("Rule <|endoftext|> here", word_tokenizer)
        word_tokenizer.encode.assert_called_once_with(
            "Rule <|endoftext|> here", disallowed_special=()
        )

    def test_special_token_text_with_real_encoding(self):
        """User text containing <|endoftext|> is counted, not rejected"""
        encoding = tiktoken.Encoding(
            name="byte_level_test",
            pat_str=r"\S+|\s+",
            mergeable_ranks={bytes([i]): i for i in range(256)},
            special_tokens={"<|endoftext|>": 256},
        )
        text = "Rule <|endoftext|> here"
        assert count_tokens(text, encoding) == len(text.encode("utf-8"))


class TestGetTokenizer:
    """Tests for get_tokenizer() caching"""

    def test_cached(self, word_tokenizer):
        """Encoding is loaded once"""
        with patch.object(tokenization.tiktoken, "get_encoding", return_value=word_tokenizer) as mock_get:
            assert get_tokenizer() is word_tokenizer
            assert get_tokenizer() is word_tokenizer
        mock_get.assert_called_once_with(tokenization.TOKEN_ENCODING)

    def test_reset(self, word_tokenizer):
        """Reset forces a reload"""
        with patch.object(tokenization.tiktoken, "get_encoding", return_value=word_tokenizer) as mock_get:
            get_tokenizer()
            reset_tokenizer_cache()
            get_tokenizer()
        assert mock_get.call_count == 2


class TestCountScopeTokens:
    """Tests for count_scope_tokens()"""

    def test_per_scope_counts(self, word_tokenizer):
        """Counts each scope's joined lines"""
        result = parse_scopes("Intro line\n[Rules]\n- do X\n- do Y\n[Empty]")
        counts = count_scope_tokens(result, word_tokenizer)
        assert counts == {GLOBAL_SCOPE_KEY: 2, "RULES": 6, "EMPTY": 0}
        assert list(counts.keys()) == result.available_scopes
