"""
Scope Name Normalization

Turns raw header text into a scope key and filters the reserved
"START KNOWLEDGE" / "END KNOWLEDGE" markers.
"""

from typing import Optional

from src.config import SENTINEL_SCOPE_NAMES


def normalize_scope_name(text: Optional[str]) -> str:
    """
    Normalize header text into a scope key: trimmed and uppercased.

    Example:
        >>> normalize_scope_name("  Bonus 1 ")
        'BONUS 1'
    """
    if not text:
        return ""
    return text.strip().upper()


def is_sentinel(name: str) -> bool:
    """Check whether a normalized name is a reserved marker."""
    return name in SENTINEL_SCOPE_NAMES


def resolve_scope(header_text: str) -> Optional[str]:
    """
    Resolve raw header text to the scope it opens.

    Args:
        header_text: Raw text extracted by the header detector

    Returns:
        Normalized scope name, or None for sentinel markers

    Example:
        >>> resolve_scope("Rules")
        'RULES'
        >>> resolve_scope("start knowledge")
        None
    """
    name = normalize_scope_name(header_text)
    if is_sentinel(name):
        return None
    return name


def is_sentinel_line(line: str) -> bool:
    """
    Check whether a bare line (no header syntax) is itself a reserved marker.

    Example:
        >>> is_sentinel_line("  End Knowledge ")
        True
    """
    return is_sentinel(normalize_scope_name(line))


__all__ = [
    'normalize_scope_name',
    'is_sentinel',
    'is_sentinel_line',
    'resolve_scope',
]
