"""
Tokenization Utilities

Token counting with tiktoken, used to report how much prompt budget each
scope of guidance would take.
"""

from typing import Any, Dict, Optional
import tiktoken

from src.config import TOKEN_ENCODING
from src.utils.logging_config import logger


# Cache tokenizer instance for performance
_tokenizer_cache: Optional[tiktoken.Encoding] = None


def get_tokenizer() -> tiktoken.Encoding:
    """
    Get tiktoken tokenizer for the configured TOKEN_ENCODING.

    Uses module-level cache to avoid repeated initialization.

    Returns:
        Tiktoken encoding instance
    """
    global _tokenizer_cache

    if _tokenizer_cache is None:
        logger.debug(f"Initializing tiktoken tokenizer: {TOKEN_ENCODING}")
        _tokenizer_cache = tiktoken.get_encoding(TOKEN_ENCODING)

    return _tokenizer_cache


def count_tokens(text: str, tokenizer: Optional[tiktoken.Encoding] = None) -> int:
    """
    Count tokens in text.

    Args:
        text: Text to count tokens in
        tokenizer: Optional pre-initialized tokenizer (for performance)

    Returns:
        Token count

    Example:
        >>> count_tokens("Hello, world!")
        4
    """
    if not text:
        return 0

    if tokenizer is None:
        tokenizer = get_tokenizer()

    # Guidance text is user-supplied; special-token strings count as plain text
    return len(tokenizer.encode(text, disallowed_special=()))


def count_scope_tokens(result: Any, tokenizer: Optional[tiktoken.Encoding] = None) -> Dict[str, int]:
    """
    Count tokens per scope, joining each scope's lines with newlines.

    Args:
        result: ParseResult (anything with a `scopes` mapping)
        tokenizer: Optional pre-initialized tokenizer

    Returns:
        Dict of scope name -> token count, in scope order
    """
    if tokenizer is None:
        tokenizer = get_tokenizer()

    return {
        name: count_tokens("\n".join(lines), tokenizer)
        for name, lines in result.scopes.items()
    }


def reset_tokenizer_cache():
    """
    Reset the cached tokenizer instance.

    Useful for testing or when changing TOKEN_ENCODING config.
    """
    global _tokenizer_cache
    _tokenizer_cache = None
    logger.debug("Tokenizer cache reset")
