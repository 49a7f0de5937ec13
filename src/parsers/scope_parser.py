"""
Scope Parser Implementation

Partitions free-form guidance text into named scopes in a single
left-to-right pass:

    header detector -> normalizer -> accumulator

Lines before the first header land in the global scope. Headers differing
only by case or surrounding whitespace re-select the same scope. The
"START KNOWLEDGE" / "END KNOWLEDGE" markers are dropped without effect.

Parsing is total: any string, including None and "", yields a valid
ParseResult.
"""

from __future__ import annotations

from typing import Optional

from src.utils.scoping.header_patterns import detect_header_rule, split_lines
from src.utils.scoping.scope_accumulator import ScopeAccumulator
from src.utils.scoping.scope_normalizer import is_sentinel_line, resolve_scope
from .base import BaseParser, ParseResult


class ScopeParser(BaseParser):
    """
    Heuristic scope parser for guidance/rules text.

    Instances hold no per-parse state and may be shared between threads.

    Example:
        >>> parser = ScopeParser()
        >>> result = parser.parse("Bonus 1\\n1. Extra credit task")
        >>> result.scopes
        {'GLOBAL CONTEXT': [], 'BONUS 1': ['1. Extra credit task']}
    """

    def parse(self, raw_text: Optional[str]) -> ParseResult:
        """
        Split raw text into scopes.

        Args:
            raw_text: Guidance text, or None

        Returns:
            ParseResult with scopes in first-appearance order
        """
        accumulator = ScopeAccumulator()
        lines = split_lines(raw_text)

        for index, raw_line in enumerate(lines):
            line = raw_line.strip()
            if not line:
                continue

            rule_name, header_text = detect_header_rule(lines, index)

            if header_text is None:
                if is_sentinel_line(line):
                    self.logger.debug(f"Line {index + 1}: dropping marker '{line}'")
                    continue
                # Content keeps its numbering/bullets verbatim for citation
                accumulator.add_content(line)
                continue

            scope = resolve_scope(header_text)
            if scope is None:
                self.logger.debug(f"Line {index + 1}: dropping marker '{line}'")
                continue

            self.logger.debug(f"Line {index + 1}: {rule_name} header -> '{scope}'")
            accumulator.open_scope(scope)

        scopes, available_scopes = accumulator.snapshot()
        self.logger.debug(
            f"Parsed {len(lines)} lines into {len(available_scopes)} scopes"
        )

        return ParseResult(scopes=scopes, available_scopes=available_scopes)


_default_parser: Optional[ScopeParser] = None


def parse_scopes(raw_text: Optional[str]) -> ParseResult:
    """
    Parse raw text with a shared ScopeParser instance.

    Example:
        >>> parse_scopes(None).to_dict()
        {'scopes': {'GLOBAL CONTEXT': []}, 'availableScopes': ['GLOBAL CONTEXT']}
    """
    global _default_parser

    if _default_parser is None:
        _default_parser = ScopeParser()

    return _default_parser.parse(raw_text)
