"""
Header Pattern Detection Utilities

Provides regex-based pattern matching for scope headers in free-form
guidance text. A line is either a header (it opens or re-selects a scope)
or content belonging to the active scope.

Rules, in priority order (first match wins):
1. Bracketed:     "[Rules]" or "[Rules]:"
2. Markdown:      "# Rules", "### Rules"
3. Bold:          "**Rules**" or "**Rules**:"
4. Colon label:   "Rules:" (restricted charset, shorter than 50 chars)
5. Implicit:      a short bare line directly followed by a list item

Key Functions:
- detect_header: Return the raw header text for a line, or None
- detect_header_rule: Same, but also reports which rule matched
- is_list_item: Detect "1.", "-", "*" and "•" list items
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from src.config import COLON_LABEL_MAX_LENGTH, IMPLICIT_HEADING_MAX_LENGTH


# Regex patterns for explicit header syntax
BRACKET_HEADER_PATTERN = re.compile(r'^\[([^\]]+)\]:?$')
MARKDOWN_HEADER_PATTERN = re.compile(r'^#+\s+(.+)$')
BOLD_HEADER_PATTERN = re.compile(r'^\*\*([^*]+)\*\*:?$')
COLON_LABEL_PATTERN = re.compile(r'^([A-Za-z0-9 _/-]+):$')

# List items: "1. ...", "- ...", "* ...", "• ..."
LIST_ITEM_PATTERN = re.compile(r'^(?:[0-9]+\.|[-*•])\s')

# Sentence-terminal punctuation disqualifies implicit headings
SENTENCE_END_PATTERN = re.compile(r'[.!?]$')


def match_bracketed_header(line: str) -> Optional[str]:
    """
    Match a bracket-delimited header.

    Example:
        >>> match_bracketed_header("[Container A]:")
        'Container A'
    """
    match = BRACKET_HEADER_PATTERN.match(line)
    return match.group(1) if match else None


def match_markdown_header(line: str) -> Optional[str]:
    """
    Match a markdown-style heading of any depth.

    Example:
        >>> match_markdown_header("## Safety Rules")
        'Safety Rules'
    """
    match = MARKDOWN_HEADER_PATTERN.match(line)
    return match.group(1) if match else None


def match_bold_header(line: str) -> Optional[str]:
    """
    Match a header wrapped in double asterisks.

    Example:
        >>> match_bold_header("**Bonus Round**:")
        'Bonus Round'
    """
    match = BOLD_HEADER_PATTERN.match(line)
    return match.group(1) if match else None


def match_colon_label(line: str) -> Optional[str]:
    """
    Match a short "Label:" line built from letters, digits, spaces,
    underscores, dashes and slashes.

    Example:
        >>> match_colon_label("Team A/B:")
        'Team A/B'
        >>> match_colon_label("Note: read this first")
        None
    """
    if len(line) >= COLON_LABEL_MAX_LENGTH:
        return None

    match = COLON_LABEL_PATTERN.match(line)
    return match.group(1) if match else None


def is_list_item(line: str) -> bool:
    """
    Check whether a trimmed line starts a numbered or bulleted list item.

    Example:
        >>> is_list_item("1. Extra credit task")
        True
        >>> is_list_item("1.5 hours")
        False
    """
    return bool(LIST_ITEM_PATTERN.match(line))


def find_next_content_line(lines: Sequence[str], index: int) -> str:
    """
    Return the next non-blank line after `index`, trimmed.

    Args:
        lines: All raw lines of the input
        index: Position of the current line

    Returns:
        The trimmed next non-blank line, or "" if there is none
    """
    next_index = index + 1
    while next_index < len(lines) and not lines[next_index].strip():
        next_index += 1

    if next_index < len(lines):
        return lines[next_index].strip()
    return ""


def match_implicit_heading(line: str, lines: Sequence[str], index: int) -> Optional[str]:
    """
    Detect a header that has no explicit syntax from the line that follows it.

    A line is an implicit heading when the next non-blank line is a list
    item, the line itself is not a list item, it is shorter than
    IMPLICIT_HEADING_MAX_LENGTH, and it does not end like a sentence.

    Args:
        line: Current line, trimmed
        lines: All raw lines of the input
        index: Position of the current line

    Returns:
        The line itself if it is an implicit heading, None otherwise

    Example:
        >>> lines = ["Bonus 1", "1. Extra credit task"]
        >>> match_implicit_heading("Bonus 1", lines, 0)
        'Bonus 1'
    """
    if is_list_item(line):
        return None
    if len(line) >= IMPLICIT_HEADING_MAX_LENGTH:
        return None
    if SENTENCE_END_PATTERN.search(line):
        return None

    if not is_list_item(find_next_content_line(lines, index)):
        return None

    return line


def _explicit(matcher: Callable[[str], Optional[str]]) -> Callable[[str, Sequence[str], int], Optional[str]]:
    """Adapt a single-line matcher to the (line, lines, index) rule signature."""
    return lambda line, lines, index: matcher(line)


# Ordered rule table. Some lines satisfy several patterns ("[Foo]:" is both
# bracketed and colon-suffixed); only the first match counts.
HEADER_RULES: Tuple[Tuple[str, Callable[[str, Sequence[str], int], Optional[str]]], ...] = (
    ('bracket', _explicit(match_bracketed_header)),
    ('markdown', _explicit(match_markdown_header)),
    ('bold', _explicit(match_bold_header)),
    ('colon', _explicit(match_colon_label)),
    ('implicit', match_implicit_heading),
)


def detect_header_rule(lines: Sequence[str], index: int) -> Tuple[Optional[str], Optional[str]]:
    """
    Classify one line as header or content.

    Args:
        lines: All raw lines of the input
        index: Position of the line to classify

    Returns:
        Tuple of (rule_name, raw_header_text); both None for content lines

    Example:
        >>> detect_header_rule(["[Foo]:"], 0)
        ('bracket', 'Foo')
        >>> detect_header_rule(["just text"], 0)
        (None, None)
    """
    line = lines[index].strip()
    if not line:
        return (None, None)

    for rule_name, rule in HEADER_RULES:
        header = rule(line, lines, index)
        if header is not None:
            return (rule_name, header)

    return (None, None)


def detect_header(lines: Sequence[str], index: int) -> Optional[str]:
    """
    Return the raw header text introduced by lines[index], or None.

    Example:
        >>> detect_header(["# Safety", "Wear goggles"], 0)
        'Safety'
    """
    _, header = detect_header_rule(lines, index)
    return header


def split_lines(raw_text: Optional[str]) -> List[str]:
    """Split raw text on newlines; absent text has no lines."""
    if not raw_text:
        return []
    return raw_text.split('\n')


__all__ = [
    'match_bracketed_header',
    'match_markdown_header',
    'match_bold_header',
    'match_colon_label',
    'match_implicit_heading',
    'is_list_item',
    'find_next_content_line',
    'detect_header',
    'detect_header_rule',
    'split_lines',
    'HEADER_RULES',
]
