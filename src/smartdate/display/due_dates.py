"""Due-date classification and quick-pick presets."""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Any, List, Optional

from dateutil.relativedelta import relativedelta

from smartdate.display.formatters import align_to, coerce_datetime, format_for_display, relative_time_text
from smartdate.parsing.clock import resolve_now
from smartdate.parsing.models import DatePreset, DueDateStatus, DueStatus

# Style tags consumed by the presentation layer
_STYLES = {
    DueStatus.OVERDUE: "danger",
    DueStatus.DUE_TODAY: "warning",
    DueStatus.DUE_SOON: "caution",
    DueStatus.NOT_DUE: "neutral",
    DueStatus.NO_DUE_DATE: "muted",
}


def _status(status: DueStatus, text: str) -> DueDateStatus:
    return DueDateStatus(status=status, text=text, style=_STYLES[status])


def due_date_status(due: Any, reference_time: Optional[datetime] = None) -> DueDateStatus:
    """Classify ``due`` against the end of today and the end of tomorrow.

    Args:
        due: Due date (datetime, date, POSIX seconds) or None
        reference_time: The "now" to compare against (defaults to system time)

    Returns:
        DueDateStatus with display text and a style tag
    """
    due_at = coerce_datetime(due)
    if due_at is None:
        return _status(DueStatus.NO_DUE_DATE, "No due date")

    now = resolve_now(reference_time)
    due_at = align_to(due_at, now)
    end_of_today = datetime.combine(now.date(), time.max, tzinfo=now.tzinfo)
    end_of_tomorrow = end_of_today + timedelta(days=1)

    if due_at < now:
        return _status(DueStatus.OVERDUE, f"Overdue {relative_time_text(due_at, now)}")
    if due_at <= end_of_today:
        return _status(DueStatus.DUE_TODAY, "Due today")
    if due_at <= end_of_tomorrow:
        return _status(DueStatus.DUE_SOON, "Due tomorrow")
    return _status(DueStatus.NOT_DUE, f"Due {format_for_display(due_at, '%b %d')}")


def is_overdue(due: Any, reference_time: Optional[datetime] = None) -> bool:
    due_at = coerce_datetime(due)
    if due_at is None:
        return False
    now = resolve_now(reference_time)
    return align_to(due_at, now) < now


def date_presets(reference_time: Optional[datetime] = None) -> List[DatePreset]:
    """Fixed quick-pick dates relative to now."""
    now = resolve_now(reference_time)
    return [
        DatePreset("Today", now),
        DatePreset("Tomorrow", now + timedelta(days=1)),
        DatePreset("In 3 days", now + timedelta(days=3)),
        DatePreset("Next week", now + timedelta(days=7)),
        DatePreset("In 2 weeks", now + timedelta(days=14)),
        DatePreset("Next month", now + relativedelta(months=1)),
    ]
