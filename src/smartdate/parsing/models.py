"""Data models for smart date parsing and suggestions.

This module defines the value types shared by the parser, the suggestion
engine and the display helpers:
- Parse results with per-family provenance (which substring matched what)
- Suggestions offered while the user is typing
- Due-date classification and confidence tiers

All models are immutable and created fresh per call.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SuggestionCategory(str, Enum):
    """Provenance of a suggestion, used for UI affordances only."""

    RELATIVE = "relative"  # "tomorrow", "next monday"
    TIME = "time"          # carries a time of day
    DATE = "date"          # month/day calendar date
    NATURAL = "natural"    # the user's own input, echoed back


class DueStatus(str, Enum):
    """Classification of a due date relative to the current day."""

    OVERDUE = "overdue"
    DUE_TODAY = "due-today"
    DUE_SOON = "due-soon"
    NOT_DUE = "not-due"
    NO_DUE_DATE = "no-due-date"


class ConfidenceTier(str, Enum):
    """Coarse confidence bucket for styling."""

    HIGH = "high"      # >= 0.8
    MEDIUM = "medium"  # >= 0.6
    LOW = "low"


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedComponents:
    """Raw substrings matched by each resolver family.

    A field left as ``None`` means that family did not contribute.
    """

    relative: Optional[str] = None
    time: Optional[str] = None
    weekday: Optional[str] = None
    date: Optional[str] = None
    modifiers: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting families that did not fire."""
        data: Dict[str, Any] = {}
        for name in ("relative", "time", "weekday", "date"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.modifiers:
            data["modifiers"] = list(self.modifiers)
        return data


@dataclass(frozen=True)
class ParseResult:
    """A date/time interpretation of free-form text.

    Invariant: ``0.3 <= confidence <= 1.0``. Lower scoring interpretations are
    never constructed; the parser returns ``None`` instead.
    """

    date: datetime
    confidence: float
    original_input: str
    parsed_components: ParsedComponents = ParsedComponents()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "date": self.date.isoformat(),
            "confidence": round(self.confidence, 3),
            "original_input": self.original_input,
            "parsed_components": self.parsed_components.to_dict(),
        }


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Suggestion:
    """One candidate completion for the current input.

    ``value`` is the literal text that replaces the input when chosen and is
    always parseable on its own.
    """

    label: str
    value: str
    confidence: float
    preview: str
    category: SuggestionCategory
    parsed_date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "label": self.label,
            "value": self.value,
            "confidence": round(self.confidence, 3),
            "preview": self.preview,
            "category": self.category.value,
            "parsed_date": self.parsed_date.isoformat() if self.parsed_date else None,
        }


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DueDateStatus:
    """Due-date classification with display text and a style tag."""

    status: DueStatus
    text: str
    style: str

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "text": self.text, "style": self.style}


@dataclass(frozen=True)
class DatePreset:
    """A quick-pick date offered next to the input."""

    label: str
    value: datetime
