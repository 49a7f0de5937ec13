"""
Parser Base Classes and Data Structures

Defines the abstract parser interface and result dataclass for scope parsing.

All parser implementations must inherit from BaseParser and return a
ParseResult containing:
- scopes: Ordered mapping of scope name -> content lines
- available_scopes: Scope names in first-appearance order
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.config import GLOBAL_SCOPE_KEY
from src.utils.logging_config import logger
from src.utils.scoping.scope_normalizer import normalize_scope_name


@dataclass
class ParseResult:
    """
    Structured result of scoping a block of guidance text.

    The global scope is always present and always first, so consumers can
    rely on `available_scopes[0]` for unscoped guidance.

    Example:
        >>> result = parser.parse("Intro\\n[Rules]\\n- do X")
        >>> result.available_scopes
        ['GLOBAL CONTEXT', 'RULES']
        >>> result.get_scope("rules")
        ['- do X']
    """

    scopes: Dict[str, List[str]] = field(default_factory=lambda: {GLOBAL_SCOPE_KEY: []})
    available_scopes: List[str] = field(default_factory=lambda: [GLOBAL_SCOPE_KEY])

    def __post_init__(self):
        """Validate fields after initialization."""
        if not isinstance(self.scopes, dict):
            raise TypeError("scopes must be a dictionary")
        if GLOBAL_SCOPE_KEY not in self.scopes:
            raise ValueError(f"scopes must contain the {GLOBAL_SCOPE_KEY} scope")
        if list(self.scopes.keys()) != list(self.available_scopes):
            raise ValueError("available_scopes must list the scope keys in order")
        if self.available_scopes[0] != GLOBAL_SCOPE_KEY:
            raise ValueError(f"{GLOBAL_SCOPE_KEY} must be the first scope")

    @property
    def global_lines(self) -> List[str]:
        """Content that appeared before any header."""
        return list(self.scopes[GLOBAL_SCOPE_KEY])

    def has_scope(self, name: Optional[str]) -> bool:
        """Check for a scope by name, normalized the same way headers are."""
        return normalize_scope_name(name) in self.scopes

    def get_scope(self, name: Optional[str]) -> List[str]:
        """
        Return a copy of one scope's lines, or [] if the scope does not exist.

        Args:
            name: Scope name in any case, with or without surrounding spaces
        """
        return list(self.scopes.get(normalize_scope_name(name), []))

    def to_dict(self) -> Dict[str, Any]:
        """Render the result in its JSON wire form."""
        return {
            "scopes": {name: list(lines) for name, lines in self.scopes.items()},
            "availableScopes": list(self.available_scopes),
        }


class BaseParser(ABC):
    """
    Abstract base class for guidance-text parsers.

    Implementations take raw text (possibly None) and must always return a
    well-formed ParseResult; malformed text is never an error.

    Example:
        >>> class MyParser(BaseParser):
        ...     def parse(self, raw_text):
        ...         return ParseResult()
        >>> MyParser().parse(None).available_scopes
        ['GLOBAL CONTEXT']
    """

    def __init__(self):
        """Initialize the parser."""
        self.logger = logger.bind(parser=self.__class__.__name__)
        self.logger.debug(f"Initialized {self.__class__.__name__}")

    @abstractmethod
    def parse(self, raw_text: Optional[str]) -> ParseResult:
        """
        Parse raw text into scopes.

        Args:
            raw_text: Free-form guidance text, or None

        Returns:
            ParseResult with scopes and available_scopes populated
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement parse() method"
        )
