"""
Knowledge Scoper Main Entry Point

Provides a CLI for splitting a guidance/rules file into scopes and printing
or exporting the result.

Usage:
    python -m src.main rules.txt                  # full result as JSON
    python -m src.main rules.txt --list           # scope names in order
    python -m src.main rules.txt --scope "Bonus 1"
    python -m src.main rules.txt --format markdown --output data/exports/scopes.md
    cat rules.txt | python -m src.main -
"""

import argparse
import sys
import time
from typing import List, Optional

from src.config import ConfigurationError, VALID_LOG_LEVELS, validate_configuration
from src.parsers import ScopeParser
from src.pipeline.scope_export import (
    ScopingError,
    read_raw_text,
    render_json,
    render_markdown,
    write_export,
)
from src.utils.logging_config import setup_logger, get_logger, log_step_start, log_step_complete
from src.utils.scoping import get_scope_summary
from src.utils.tokenization import count_scope_tokens


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Split guidance text into named scopes")
    parser.add_argument("input", nargs="?", default="-", help="Text file to parse ('-' for stdin)")
    parser.add_argument("--scope", help="Print only the lines of this scope")
    parser.add_argument("--list", action="store_true", help="Print scope names in order")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Rendering of the full result (default: json)",
    )
    parser.add_argument("--output", help="Write the rendering to this file instead of stdout")
    parser.add_argument("--tokens", action="store_true", help="Log token counts per scope")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override LOG_LEVEL for this run",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the Knowledge Scoper CLI.

    Initializes logging, parses the input and prints or exports the result.
    Exits with status 1 on invalid configuration, unreadable input, a failed
    export, or any other error raised while processing.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        validate_configuration()
    except ConfigurationError as e:
        # Logging is not configured yet; it depends on a valid config
        print(f"\n❌ {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging once at startup
    setup_logger(level=args.log_level)
    logger = get_logger("main")

    step_name = f"Scope parsing: {args.input}"
    log_step_start(step_name)
    start_time = time.time()

    try:
        raw_text = read_raw_text(None if args.input == "-" else args.input)
        result = ScopeParser().parse(raw_text)

        summary = get_scope_summary(result)
        logger.info(
            f"Found {summary['total_scopes']} scopes with {summary['total_lines']} content lines"
        )
        if summary['empty_scopes']:
            logger.warning(f"Empty scopes: {', '.join(summary['empty_scopes'])}")

        if args.tokens:
            for name, count in count_scope_tokens(result).items():
                logger.info(f"  {name}: {count} tokens")

        if args.list:
            rendered = "\n".join(result.available_scopes)
        elif args.scope is not None:
            if not result.has_scope(args.scope):
                logger.warning(f"Scope not found: '{args.scope}'")
            rendered = "\n".join(result.get_scope(args.scope))
        elif args.format == "markdown":
            rendered = render_markdown(result)
        else:
            rendered = render_json(result)

        if args.output:
            write_export(rendered, args.output)
        else:
            print(rendered)

    except ScopingError as e:
        logger.error(f"Scope parsing failed: {e}")
        logger.exception("Full traceback:")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.exception("Full traceback:")
        sys.exit(1)

    log_step_complete(step_name, time.time() - start_time)


if __name__ == "__main__":
    main()
