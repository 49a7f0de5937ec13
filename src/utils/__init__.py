"""
Utilities Module for the Knowledge Scoper

Structure:
- logging_config.py: Shared logging utilities
- tokenization.py: Token counting for scoped guidance
- scoping/: Header detection, scope name normalization, scope accumulation
"""

# Re-export logging utilities at top level
from src.utils.logging_config import setup_logger, get_logger, logger

__all__ = [
    "setup_logger",
    "get_logger",
    "logger",
]
