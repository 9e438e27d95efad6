"""Display helpers consumed by the presentation layer."""

from smartdate.display.collections import NO_DATE_KEY, group_by_date, sort_by_date
from smartdate.display.due_dates import date_presets, due_date_status, is_overdue
from smartdate.display.formatters import (
    confidence_percent_text,
    confidence_style_tier,
    format_for_display,
    format_for_editing,
    relative_time_text,
)

__all__ = [
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
