"""
Pytest configuration and shared fixtures for Knowledge Scoper tests.

Provides sample guidance text covering every header rule, plus the
expected scope table for it.
"""

from pathlib import Path
from typing import Dict, List

import pytest

from src.config import GLOBAL_SCOPE_KEY

# Test data paths
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rules_file() -> Path:
    """
    Path to a guidance file that uses every header style.

    Returns:
        Path to tests/fixtures/warehouse_rules.txt
    """
    return FIXTURES_DIR / "warehouse_rules.txt"


@pytest.fixture
def rules_text(rules_file: Path) -> str:
    """Contents of the sample guidance file."""
    return rules_file.read_text(encoding="utf-8")


@pytest.fixture
def expected_rules_scopes() -> Dict[str, List[str]]:
    """
    Scope table the sample guidance file must produce.

    Note:
        "[container a]" re-selects CONTAINER A, so "3. Sweep floor" joins
        the first bucket rather than creating a new one.
    """
    return {
        GLOBAL_SCOPE_KEY: ["General tone: be polite."],
        "CONTAINER A": ["1. Stack boxes", "2. Label boxes", "3. Sweep floor"],
        "SAFETY": ["- Wear gloves"],
        "BONUS ROUND": ["* Double points"],
        "TEAM B/C": ["Rule about B"],
        "BONUS 1": ["1. Extra credit task"],
    }
