"""
Parser Module for the Knowledge Scoper

Provides parser implementations that turn guidance text into scopes.
"""

from src.parsers.base import BaseParser, ParseResult
from src.parsers.scope_parser import ScopeParser, parse_scopes

__all__ = [
    "BaseParser",
    "ParseResult",
    "ScopeParser",
    "parse_scopes",
]
