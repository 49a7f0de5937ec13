"""
Configuration Module for the Knowledge Scoper

Loads configuration from environment variables (.env file) and validates
the settings used by the scope parser, logging and export helpers.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Note: Logger will be configured by setup_logger() in logging_config
# Import is deferred to avoid circular dependency during config loading


# Load environment variables from .env file
# Look for .env in the project root (parent of src/)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Try loading from current directory as fallback
    load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def get_env_variable(var_name: str, required: bool = True, default: Optional[str] = None) -> str:
    """
    Get environment variable with validation.

    Args:
        var_name: Name of environment variable
        required: Whether this variable is required
        default: Default value if not required and not found

    Returns:
        Value of environment variable

    Raises:
        ConfigurationError: If required variable is missing
    """
    value = os.getenv(var_name)

    if value is None or value.strip() == "":
        if required:
            raise ConfigurationError(
                f"Required environment variable '{var_name}' is not set. "
                f"Please add it to your .env file."
            )
        return default

    return value.strip()


def get_env_flag(var_name: str, default: bool = False) -> bool:
    """
    Read a boolean environment variable ("1", "true", "yes", "on").

    Args:
        var_name: Name of environment variable
        default: Value used when the variable is unset

    Returns:
        Parsed boolean
    """
    value = get_env_variable(var_name, required=False)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


# ==================================
# Scope Parser Settings
# ==================================

# Default bucket for lines that precede any detected header
GLOBAL_SCOPE_KEY = "GLOBAL CONTEXT"

# Reserved header texts that are recognized but never open a scope
SENTINEL_SCOPE_NAMES = frozenset({"START KNOWLEDGE", "END KNOWLEDGE"})

# "Label:" headers must be strictly shorter than this (whole line, colon included)
COLON_LABEL_MAX_LENGTH = 50

# Bare lines followed by a list item must be strictly shorter than this
IMPLICIT_HEADING_MAX_LENGTH = 60


# ==================================
# Token Accounting
# ==================================

# Token encoding for per-scope token counts (tiktoken)
TOKEN_ENCODING = get_env_variable("TOKEN_ENCODING", required=False, default="cl100k_base")


# ==================================
# File Paths
# ==================================

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Rendered scope tables written by the CLI
EXPORTS_DIR = PROJECT_ROOT / "data" / "exports"

# Logging directory
LOGS_DIR = Path(get_env_variable("LOGS_DIR", required=False, default=str(PROJECT_ROOT / "logs")))


# ==================================
# Logging Configuration
# ==================================

# Log level (used by logging_config.py)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Write rotating log files under LOGS_DIR in addition to stderr
LOG_TO_FILE = get_env_flag("LOG_TO_FILE", default=False)

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


# ==================================
# Validation
# ==================================

def validate_configuration():
    """
    Validate configuration. Called by the CLI before logging is configured;
    importing this module never validates or exits.

    Checks:
    - Length thresholds are positive
    - Log level is one loguru understands
    - Token encoding name is non-empty

    Raises:
        ConfigurationError: If configuration is invalid
    """
    errors = []

    if COLON_LABEL_MAX_LENGTH <= 0:
        errors.append(f"COLON_LABEL_MAX_LENGTH must be positive, got {COLON_LABEL_MAX_LENGTH}")
    if IMPLICIT_HEADING_MAX_LENGTH <= 0:
        errors.append(
            f"IMPLICIT_HEADING_MAX_LENGTH must be positive, got {IMPLICIT_HEADING_MAX_LENGTH}"
        )

    if GLOBAL_SCOPE_KEY in SENTINEL_SCOPE_NAMES:
        errors.append(f"GLOBAL_SCOPE_KEY ({GLOBAL_SCOPE_KEY}) cannot be a sentinel name")

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {LOG_LEVEL}"
        )

    if not TOKEN_ENCODING:
        errors.append("TOKEN_ENCODING is empty")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(error_msg)


# ==================================
# Helper Functions
# ==================================

def print_configuration():
    """Print current configuration (for debugging)."""
    print("\n" + "=" * 80)
    print("Knowledge Scoper Configuration")
    print("=" * 80)
    print(f"\nScope Parser:")
    print(f"  Global scope: {GLOBAL_SCOPE_KEY}")
    print(f"  Sentinels: {', '.join(sorted(SENTINEL_SCOPE_NAMES))}")
    print(f"  Colon label max length: {COLON_LABEL_MAX_LENGTH}")
    print(f"  Implicit heading max length: {IMPLICIT_HEADING_MAX_LENGTH}")
    print(f"\nToken Accounting:")
    print(f"  Encoding: {TOKEN_ENCODING}")
    print(f"\nLogging:")
    print(f"  Level: {LOG_LEVEL}")
    print(f"  File logging: {'enabled' if LOG_TO_FILE else 'disabled'}")
    print(f"  Logs: {LOGS_DIR}")
    print(f"\nDirectories:")
    print(f"  Exports: {EXPORTS_DIR}")
    print("=" * 80 + "\n")


# Export all configuration variables
__all__ = [
    "ConfigurationError",
    "get_env_variable",
    "get_env_flag",
    # Scope parser
    "GLOBAL_SCOPE_KEY",
    "SENTINEL_SCOPE_NAMES",
    "COLON_LABEL_MAX_LENGTH",
    "IMPLICIT_HEADING_MAX_LENGTH",
    # Token accounting
    "TOKEN_ENCODING",
    # File paths
    "PROJECT_ROOT",
    "EXPORTS_DIR",
    "LOGS_DIR",
    # Logging
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "VALID_LOG_LEVELS",
    # Helper functions
    "validate_configuration",
    "print_configuration",
]
