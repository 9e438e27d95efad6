"""SmartDate: natural-language date entry with confidence scoring.

Interprets short free-form text ("tomorrow 7am", "next friday", "oct 15",
"in 3 days") as a date/time with a confidence score, and produces ranked
completions while the user types.

Usage:
    from datetime import datetime
    from smartdate import parse, suggest

    now = datetime.now()
    result = parse("next friday 2pm", reference_time=now)
    options = suggest("tom", time_enabled=True, reference_time=now)
"""

from smartdate.configuration import EngineSettings, resolve_settings
from smartdate.display import (
    NO_DATE_KEY,
    confidence_percent_text,
    confidence_style_tier,
    date_presets,
    due_date_status,
    format_for_display,
    format_for_editing,
    group_by_date,
    is_overdue,
    relative_time_text,
    sort_by_date,
)
from smartdate.parsing import (
    ConfidenceTier,
    DatePreset,
    DueDateStatus,
    DueStatus,
    FixedClock,
    ParsedComponents,
    ParseResult,
    SmartDateParser,
    Suggestion,
    SuggestionCategory,
    parse,
    parse_date_string,
    system_clock,
)
from smartdate.suggestions import SuggestionEngine, suggest

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "EngineSettings",
    "resolve_settings",
    # Parsing
    "SmartDateParser",
    "FixedClock",
    "system_clock",
    "parse",
    "parse_date_string",
    # Suggestions
    "SuggestionEngine",
    "suggest",
    # Models
    "ConfidenceTier",
    "DatePreset",
    "DueDateStatus",
    "DueStatus",
    "ParsedComponents",
    "ParseResult",
    "Suggestion",
    "SuggestionCategory",
    # Display
    "NO_DATE_KEY",
    "confidence_percent_text",
    "confidence_style_tier",
    "date_presets",
    "due_date_status",
    "format_for_display",
    "format_for_editing",
    "group_by_date",
    "is_overdue",
    "relative_time_text",
    "sort_by_date",
]
