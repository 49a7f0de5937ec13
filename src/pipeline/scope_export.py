"""
Scope Export

Loads guidance text for the CLI and renders parse results as JSON or as a
human-readable markdown scope tree.

Input: A text file path, or "-" / None for stdin
Output: Rendered text written to a file or returned to the caller
"""

import json
import sys
from pathlib import Path
from typing import Optional, Union

from src.parsers.base import ParseResult
from src.utils.logging_config import logger


class ScopingError(Exception):
    """Raised when guidance text cannot be read or an export cannot be written."""
    pass


def read_raw_text(path: Optional[Union[str, Path]] = None) -> str:
    """
    Read guidance text from a file, or from stdin when path is None or "-".

    Args:
        path: Path to a UTF-8 text file

    Returns:
        File contents with "\\r\\n" line endings converted to "\\n"

    Raises:
        ScopingError: If the file does not exist or cannot be decoded
    """
    if path is None or str(path) == "-":
        logger.debug("Reading guidance text from stdin")
        return sys.stdin.read()

    path = Path(path)
    if not path.is_file():
        raise ScopingError(f"Input file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScopingError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Read {len(text)} chars from {path}")
    return text.replace("\r\n", "\n")


def render_json(result: ParseResult) -> str:
    """Render a parse result as pretty-printed JSON in its wire form."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def render_markdown(result: ParseResult) -> str:
    """
    Render a parse result as a markdown scope tree for review.

    Example output:
        # Scope Table

        Total Scopes: 2

        ## GLOBAL CONTEXT (1 line)

        Intro line

        ## RULES (2 lines)

        - do X
        - do Y
    """
    parts = ["# Scope Table", "", f"Total Scopes: {len(result.available_scopes)}", ""]

    for name in result.available_scopes:
        lines = result.scopes[name]
        noun = "line" if len(lines) == 1 else "lines"
        parts.append(f"## {name} ({len(lines)} {noun})")
        parts.append("")
        if lines:
            parts.extend(lines)
            parts.append("")

    return "\n".join(parts)


def write_export(text: str, output_path: Union[str, Path]) -> Path:
    """
    Write rendered output to a file, creating parent directories.

    Raises:
        ScopingError: If the file cannot be written
    """
    output_path = Path(output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
            if not text.endswith("\n"):
                f.write("\n")
    except OSError as e:
        raise ScopingError(f"Cannot write export to {output_path}: {e}") from e

    logger.info(f"Scope table exported to: {output_path}")
    return output_path


__all__ = [
    "ScopingError",
    "read_raw_text",
    "render_json",
    "render_markdown",
    "write_export",
]
