"""Smart date parsing.

Rule-based interpretation of short free-form text such as "tomorrow 7am",
"next friday", "oct 15" or "in 3 days", each with a confidence score.
"""

from smartdate.parsing.clock import Clock, FixedClock, system_clock
from smartdate.parsing.models import (
    ConfidenceTier,
    DatePreset,
    DueDateStatus,
    DueStatus,
    ParsedComponents,
    ParseResult,
    Suggestion,
    SuggestionCategory,
)
from smartdate.parsing.parser import SmartDateParser, parse, parse_date_string

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "system_clock",
    # Models
    "ConfidenceTier",
    "DatePreset",
    "DueDateStatus",
    "DueStatus",
    "ParsedComponents",
    "ParseResult",
    "Suggestion",
    "SuggestionCategory",
    # Parser
    "SmartDateParser",
    "parse",
    "parse_date_string",
]
