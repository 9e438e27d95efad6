"""Shared test configuration for SmartDate."""

from __future__ import annotations

from datetime import datetime

import pytest

from smartdate.parsing.parser import SmartDateParser
from smartdate.suggestions.engine import SuggestionEngine


# Wednesday, mid-morning
REFERENCE_TIME = datetime(2024, 1, 17, 10, 30)


@pytest.fixture
def reference_time() -> datetime:
    """Fixed "now" so relative expressions are deterministic."""
    return REFERENCE_TIME


@pytest.fixture
def parser() -> SmartDateParser:
    return SmartDateParser()


@pytest.fixture
def engine(parser: SmartDateParser) -> SuggestionEngine:
    return SuggestionEngine(parser)
