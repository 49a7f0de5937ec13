"""
Scoping Utilities

Header detection, scope name normalization and scope accumulation used by
the scope parser.
"""

from src.utils.scoping.header_patterns import (
    match_bracketed_header,
    match_markdown_header,
    match_bold_header,
    match_colon_label,
    match_implicit_heading,
    is_list_item,
    find_next_content_line,
    detect_header,
    detect_header_rule,
    split_lines,
    HEADER_RULES,
)

from src.utils.scoping.scope_normalizer import (
    normalize_scope_name,
    is_sentinel,
    is_sentinel_line,
    resolve_scope,
)

from src.utils.scoping.scope_accumulator import (
    ScopeAccumulator,
    get_scope_summary,
)

__all__ = [
    # header_patterns
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
    # scope_normalizer
    'normalize_scope_name',
    'is_sentinel',
    'is_sentinel_line',
    'resolve_scope',
    # scope_accumulator
    'ScopeAccumulator',
    'get_scope_summary',
]
