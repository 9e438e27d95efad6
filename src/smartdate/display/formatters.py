"""Formatting helpers for dates, relative times and confidence scores.

Accepted date values everywhere in this module:
- ``datetime`` (naive local or aware)
- ``date`` (treated as midnight)
- POSIX timestamps in seconds (``int``/``float``)

Invalid values (``None``, NaN, out of range) format as empty text.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from smartdate.configuration.settings import DATE_PREVIEW_FORMAT
from smartdate.parsing.clock import resolve_now
from smartdate.parsing.models import ConfidenceTier

EDIT_DATE_FORMAT = "%Y-%m-%d"
EDIT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

_MINUTES_IN_DAY = 1440
_MINUTES_IN_MONTH = 43200


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Normalize a date-like value to ``datetime``, or None if invalid."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    try:
        return datetime.fromtimestamp(value)
    except (OverflowError, OSError, ValueError):
        return None


def align_to(value: datetime, now: datetime) -> datetime:
    """Make ``value`` comparable with ``now`` when only one of them is aware.

    Naive values are read as local wall-clock time.
    """
    if (value.tzinfo is None) == (now.tzinfo is None):
        return value
    if value.tzinfo is None:
        return value.astimezone(now.tzinfo)
    return value.astimezone().replace(tzinfo=None)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_for_display(value: Any, fmt: str = DATE_PREVIEW_FORMAT) -> str:
    """Human-readable rendering of ``value`` with a strftime format."""
    moment = coerce_datetime(value)
    if moment is None:
        return ""
    try:
        return moment.strftime(fmt)
    except ValueError:
        return ""


def format_for_editing(value: Any, include_time: bool = False) -> str:
    """Canonical editable text: ``2024-01-17`` or ``2024-01-17 14:30``."""
    return format_for_display(value, EDIT_DATETIME_FORMAT if include_time else EDIT_DATE_FORMAT)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _distance_text(earlier: datetime, later: datetime) -> str:
    minutes = round_half_up((later - earlier).total_seconds() / 60)

    if minutes < 1:
        return "less than a minute"
    if minutes < 2:
        return "1 minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < _MINUTES_IN_DAY:
        return f"about {_plural(round_half_up(minutes / 60), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < _MINUTES_IN_MONTH:
        return _plural(round_half_up(minutes / _MINUTES_IN_DAY), "day")
    if minutes < 2 * _MINUTES_IN_MONTH:
        return f"about {_plural(round_half_up(minutes / _MINUTES_IN_MONTH), 'month')}"

    delta = relativedelta(later, earlier)
    months = delta.years * 12 + delta.months
    if months < 12:
        return _plural(round_half_up(minutes / _MINUTES_IN_MONTH), "month")

    years, leftover = divmod(months, 12)
    if leftover < 3:
        return f"about {_plural(years, 'year')}"
    if leftover < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def relative_time_text(value: Any, reference_time: Optional[datetime] = None) -> str:
    """Phrase ``value`` relative to now: "in 3 days", "about 2 hours ago"."""
    moment = coerce_datetime(value)
    if moment is None:
        return ""
    now = resolve_now(reference_time)
    moment = align_to(moment, now)

    if moment > now:
        return f"in {_distance_text(now, moment)}"
    return f"{_distance_text(moment, now)} ago"


def confidence_percent_text(confidence: float) -> str:
    """Confidence as a whole percentage, e.g. ``0.85 -> "85%"``."""
    if not math.isfinite(confidence):
        return "0%"
    return f"{round_half_up(confidence * 100)}%"


def confidence_style_tier(confidence: float) -> ConfidenceTier:
    if confidence >= 0.8:
        return ConfidenceTier.HIGH
    if confidence >= 0.6:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW
