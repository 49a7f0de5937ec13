"""
Scope Accumulator

Tracks the active scope during a single pass over the input and collects
content lines into ordered scope buckets. A fresh accumulator is created
for every parse, so no state leaks between calls.
"""

from typing import Any, Dict, List, Tuple

from src.config import GLOBAL_SCOPE_KEY
from src.utils.logging_config import logger


class ScopeAccumulator:
    """
    Collects content lines under the most recently opened scope.

    Initial state: current scope is the global scope, and the table holds
    only the (empty) global bucket. Dict insertion order is the order in
    which scopes first appeared.

    Example:
        >>> acc = ScopeAccumulator()
        >>> acc.add_content("Intro")
        >>> acc.open_scope("RULES")
        >>> acc.add_content("- do X")
        >>> acc.scopes
        {'GLOBAL CONTEXT': ['Intro'], 'RULES': ['- do X']}
    """

    def __init__(self) -> None:
        self.current_scope: str = GLOBAL_SCOPE_KEY
        self.scopes: Dict[str, List[str]] = {GLOBAL_SCOPE_KEY: []}

    def open_scope(self, name: str) -> None:
        """Make `name` the active scope, creating its bucket on first use."""
        if name not in self.scopes:
            logger.debug(f"Opening new scope: '{name}'")
            self.scopes[name] = []
        self.current_scope = name

    def add_content(self, line: str) -> None:
        """Append a content line to the active scope."""
        self.scopes[self.current_scope].append(line)

    @property
    def available_scopes(self) -> List[str]:
        return list(self.scopes.keys())

    def snapshot(self) -> Tuple[Dict[str, List[str]], List[str]]:
        """
        Copy out the accumulated table.

        Returns:
            Tuple of (scopes, available_scopes), detached from this accumulator
        """
        scopes = {name: list(lines) for name, lines in self.scopes.items()}
        return (scopes, list(scopes.keys()))


def get_scope_summary(result: Any) -> Dict[str, Any]:
    """
    Generate summary statistics for a parse result.

    Args:
        result: ParseResult (anything with a `scopes` mapping)

    Returns:
        Dict with total_scopes, total_lines, lines_per_scope, empty_scopes

    Example:
        >>> summary = get_scope_summary(result)
        >>> print(f"{summary['total_scopes']} scopes, {summary['total_lines']} lines")
    """
    lines_per_scope = {name: len(lines) for name, lines in result.scopes.items()}

    return {
        'total_scopes': len(lines_per_scope),
        'total_lines': sum(lines_per_scope.values()),
        'lines_per_scope': lines_per_scope,
        'empty_scopes': [name for name, count in lines_per_scope.items() if count == 0],
    }


__all__ = [
    'ScopeAccumulator',
    'get_scope_summary',
]
