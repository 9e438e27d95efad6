"""Resolver families for smart date parsing.

Each family is an ordered rule table evaluated first-match-wins:
- Time of day ("7am", "14:30", "3:15pm")
- Relative phrases ("tomorrow", "in 3 days", "end of day")
- Weekdays ("friday", "next monday")
- Month/day ("oct 15", "15 october", "12/25")
- Generic fallback through dateutil for anything else

Relative, weekday and month/day rules see the lower-cased input with the time
token removed. The fallback sees the untouched original input.
"""

from __future__ import annotations

import logging
import re
from calendar import monthrange
from datetime import datetime, time, timedelta
from typing import Optional, Tuple

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from smartdate.parsing.rules import Rule, RuleMatch, first_match

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

WEEKDAYS = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

# Short and long form per month, in calendar order
MONTH_NAMES = (
    "jan", "january",
    "feb", "february",
    "mar", "march",
    "apr", "april",
    "may", "may",
    "jun", "june",
    "jul", "july",
    "aug", "august",
    "sep", "september",
    "oct", "october",
    "nov", "november",
    "dec", "december",
)
MONTH_ABBREVIATIONS = MONTH_NAMES[::2]

TIME_WEIGHT = 0.3
FALLBACK_WEIGHT = 0.5

_MONTH = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
_WEEKDAY = "|".join(WEEKDAYS)


def month_index(name: str) -> int:
    """Zero-based month for a month name, matched on its first three letters.

    Returns -1 for names that are not months.
    """
    name = name.lower()
    for position, candidate in enumerate(MONTH_NAMES):
        if name.startswith(candidate[:3]):
            return position // 2
    return -1


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    return monthrange(year, month)[1]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


def _add_days(now: datetime, days: int) -> Optional[datetime]:
    try:
        return now + timedelta(days=days)
    except OverflowError:
        return None


def _add_months(now: datetime, months: int) -> Optional[datetime]:
    try:
        return now + relativedelta(months=months)
    except (OverflowError, ValueError):
        return None


def _day_offset(days: int):
    return lambda match, now: _add_days(now, days)


def _month_offset(months: int):
    return lambda match, now: _add_months(now, months)


def _clock_time(match: "re.Match[str]", now: datetime) -> Optional[Tuple[int, int]]:
    groups = match.groupdict()
    hour = int(groups["hour"])
    minute = int(groups.get("minute") or 0)
    meridiem = (groups.get("meridiem") or "").lower()

    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


def _weekday(match: "re.Match[str]", now: datetime) -> Optional[datetime]:
    target = WEEKDAYS.index(match.group("weekday").lower()) + 1  # Monday=1 ... Sunday=7
    delta = target - now.isoweekday()
    if match.group("next") or delta <= 0:
        delta += 7
    return _add_days(now, delta)


def calendar_date(month: int, day: int, now: datetime) -> Optional[datetime]:
    """Midnight on ``month`` (0-11) / ``day`` in the current year, rolled to
    next year when that moment has already passed."""
    if not (0 <= month <= 11 and 1 <= day <= 31):
        return None
    try:
        candidate = datetime(now.year, month + 1, day, tzinfo=now.tzinfo)
        if candidate < now:
            candidate = candidate.replace(year=now.year + 1)
    except ValueError:
        return None
    return candidate


def _named_month_day(match: "re.Match[str]", now: datetime) -> Optional[datetime]:
    return calendar_date(month_index(match.group("month")), int(match.group("day")), now)


def _numeric_month_day(match: "re.Match[str]", now: datetime) -> Optional[datetime]:
    return calendar_date(int(match.group("month")) - 1, int(match.group("day")), now)


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

TIME_RULES: Tuple[Rule, ...] = (
    Rule(
        "clock_12h",
        re.compile(r"\b(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>am|pm)\b", re.IGNORECASE),
        TIME_WEIGHT,
        _clock_time,
    ),
    Rule(
        "clock_24h",
        re.compile(r"\b(?P<hour>\d{1,2}):(?P<minute>\d{2})\b"),
        TIME_WEIGHT,
        _clock_time,
    ),
    Rule(
        "hour_meridiem",
        re.compile(r"\b(?P<hour>\d{1,2})\s*(?P<meridiem>am|pm)\b", re.IGNORECASE),
        TIME_WEIGHT,
        _clock_time,
    ),
)

RELATIVE_RULES: Tuple[Rule, ...] = (
    Rule("today", re.compile(r"^(?:today|now)$", re.IGNORECASE), 0.9, _day_offset(0)),
    Rule("tomorrow", re.compile(r"^tomorrow$", re.IGNORECASE), 0.9, _day_offset(1)),
    Rule("yesterday", re.compile(r"^yesterday$", re.IGNORECASE), 0.9, _day_offset(-1)),
    Rule("next_week", re.compile(r"^(?:next week|in a week)$", re.IGNORECASE), 0.8, _day_offset(7)),
    Rule("last_week", re.compile(r"^(?:last week|a week ago)$", re.IGNORECASE), 0.8, _day_offset(-7)),
    Rule("next_month", re.compile(r"^(?:next month|in a month)$", re.IGNORECASE), 0.8, _month_offset(1)),
    Rule("last_month", re.compile(r"^(?:last month|a month ago)$", re.IGNORECASE), 0.8, _month_offset(-1)),
    Rule(
        "in_n_days",
        re.compile(r"^in (\d+) days?$", re.IGNORECASE),
        0.85,
        lambda match, now: _add_days(now, int(match.group(1))),
    ),
    Rule(
        "n_days_ago",
        re.compile(r"^(\d+) days? ago$", re.IGNORECASE),
        0.85,
        lambda match, now: _add_days(now, -int(match.group(1))),
    ),
    Rule(
        "end_of_day",
        re.compile(r"^(?:end of day|eod)$", re.IGNORECASE),
        0.7,
        lambda match, now: datetime.combine(now.date(), time.max, tzinfo=now.tzinfo),
    ),
    Rule(
        "start_of_day",
        re.compile(r"^(?:start of day|beginning of day)$", re.IGNORECASE),
        0.7,
        lambda match, now: datetime.combine(now.date(), time.min, tzinfo=now.tzinfo),
    ),
)

WEEKDAY_RULES: Tuple[Rule, ...] = (
    Rule(
        "next_weekday",
        re.compile(rf"^(?P<next>next\s+)(?P<weekday>{_WEEKDAY})$", re.IGNORECASE),
        0.85,
        _weekday,
    ),
    Rule(
        "weekday",
        re.compile(rf"^(?P<next>)(?P<weekday>{_WEEKDAY})$", re.IGNORECASE),
        0.8,
        _weekday,
    ),
)

# Numeric dates are read month first ("12/25" is December 25). The lookarounds
# keep "2024-01-15" and "12/25/2026" whole so the fallback sees their year.
MONTH_DAY_RULES: Tuple[Rule, ...] = (
    Rule(
        "month_name_day",
        re.compile(rf"\b(?P<month>{_MONTH})\s+(?P<day>\d{{1,2}})(?:\s+(?:at|@))?", re.IGNORECASE),
        0.75,
        _named_month_day,
    ),
    Rule(
        "day_month_name",
        re.compile(rf"\b(?P<day>\d{{1,2}})\s+(?P<month>{_MONTH})", re.IGNORECASE),
        0.75,
        _named_month_day,
    ),
    Rule(
        "numeric_month_day",
        re.compile(r"(?<![\d/-])\b(?P<month>\d{1,2})[/-](?P<day>\d{1,2})\b(?![/-]\d)"),
        0.75,
        _numeric_month_day,
    ),
)


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def extract_time(text: str, now: datetime) -> Tuple[Optional[RuleMatch], str]:
    """Find a time-of-day token and strip it from ``text``.

    Only the first time pattern that matches is considered; if its hour or
    minute is out of range there is no time and ``text`` is left intact.

    Returns:
        (match or None, remaining text trimmed)
    """
    found = first_match(TIME_RULES, text, now, fall_through=False)
    if found is None:
        return None, text.strip()
    start, end = found.span
    return found, (text[:start] + text[end:]).strip()


def resolve_relative(text: str, now: datetime) -> Optional[RuleMatch]:
    return first_match(RELATIVE_RULES, text, now)


def resolve_weekday(text: str, now: datetime) -> Optional[RuleMatch]:
    return first_match(WEEKDAY_RULES, text, now)


def resolve_month_day(text: str, now: datetime) -> Optional[RuleMatch]:
    return first_match(MONTH_DAY_RULES, text, now)


def resolve_fallback(original: str, now: datetime) -> Optional[datetime]:
    """Generic date parse of the untouched input.

    Missing fields default to today at midnight; timezone designators are
    ignored. Any parse failure counts as no match.
    """
    default = now.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        return dateutil_parser.parse(original, default=default, ignoretz=True)
    except (ValueError, OverflowError) as exc:
        logger.debug(f"Fallback parse failed for {original!r}: {exc}")
        return None
