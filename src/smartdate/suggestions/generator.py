"""Candidate generation for smart date suggestions.

This stage only expands templates into :class:`Candidate` objects. It never
parses the candidates; validation and ranking happen in
:mod:`smartdate.suggestions.ranking` so both stages can be tested on their own.

Candidate sources:
- Curated defaults for empty input
- Time-of-day slots when the input looks like a time
- Month abbreviations contained in (or containing) the input
- Weekday names, bare and with "next", optionally with times
- Keyword families ("tom" -> tomorrow, "week" -> next week, ...)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from smartdate.parsing.models import ParseResult, SuggestionCategory
from smartdate.parsing.resolvers import MONTH_ABBREVIATIONS, WEEKDAYS, days_in_month


@dataclass(frozen=True)
class Candidate:
    """An unvalidated suggestion template."""

    value: str
    label: str
    confidence: float
    category: SuggestionCategory
    with_time: bool = False  # preview with the date-time format


EMPTY_INPUT_DEFAULTS: Tuple[Tuple[str, str, float], ...] = (
    ("tomorrow", "Tomorrow", 1.0),
    ("next week", "Next week", 1.0),
    ("next monday", "Next Monday", 0.9),
)
EMPTY_INPUT_TIME_DEFAULTS: Tuple[Tuple[str, str, float], ...] = (
    ("tomorrow 10am", "Tomorrow 10am", 0.9),
    ("end of day", "End of day", 0.8),
)

TIME_KEYWORDS = ("am", "pm", ":", "morning", "afternoon", "evening", "night")
TIME_SLOTS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("today", ("9am", "12pm", "2pm", "5pm")),
    ("tomorrow", ("9am", "10am", "2pm", "3pm")),
)
WEEKDAY_TIMES = ("9am", "2pm", "5pm")
MONTH_DAYS = (1, 15)

# Only the first family matching the input is used
KEYWORD_FAMILIES: Tuple[Tuple["re.Pattern[str]", Tuple[str, ...]], ...] = (
    (re.compile(r"today|now"), ("today", "today 9am", "today 2pm", "today 5pm", "end of day")),
    (re.compile(r"tomorrow|tom"), ("tomorrow", "tomorrow 9am", "tomorrow 10am", "tomorrow 2pm")),
    (re.compile(r"next|week"), ("next week", "next monday", "next friday", "in 7 days")),
    (re.compile(r"month"), ("next month", "in 30 days", "end of month")),
)

TIME_SLOT_CONFIDENCE = 0.85
MONTH_CONFIDENCE = 0.65
WEEKDAY_CONFIDENCE = 0.8
NEXT_WEEKDAY_CONFIDENCE = 0.85
WEEKDAY_TIME_FACTOR = 0.9
KEYWORD_CONFIDENCE = 0.8

# Month suggestions are skipped once the input parses at least this well
MONTH_GATE = 0.7
# Keyword families are skipped once the input parses at least this well
KEYWORD_GATE = 0.8


def _has_meridiem(phrase: str) -> bool:
    return "am" in phrase or "pm" in phrase


def empty_input_candidates(time_enabled: bool) -> List[Candidate]:
    defaults = EMPTY_INPUT_DEFAULTS + (EMPTY_INPUT_TIME_DEFAULTS if time_enabled else ())
    return [
        Candidate(value, label, confidence, SuggestionCategory.RELATIVE, with_time=time_enabled)
        for value, label, confidence in defaults
    ]


def time_candidates(trimmed: str, time_enabled: bool) -> List[Candidate]:
    """Today/tomorrow at representative times, when the input mentions a time."""
    if not time_enabled or not any(keyword in trimmed for keyword in TIME_KEYWORDS):
        return []
    return [
        Candidate(
            f"{base} {slot}",
            f"{base.capitalize()} {slot}",
            TIME_SLOT_CONFIDENCE,
            SuggestionCategory.TIME,
            with_time=True,
        )
        for base, slots in TIME_SLOTS
        for slot in slots
    ]


def month_candidates(
    trimmed: str,
    current: Optional[ParseResult],
    now: datetime,
) -> List[Candidate]:
    """1st and 15th of the first month whose abbreviation matches the input."""
    if current is not None and current.confidence >= MONTH_GATE:
        return []

    matched = [month for month in MONTH_ABBREVIATIONS if month in trimmed or trimmed in month]
    candidates: List[Candidate] = []
    for month in matched[:1]:
        length = days_in_month(now.year, MONTH_ABBREVIATIONS.index(month) + 1)
        for day in MONTH_DAYS:
            value = f"{month} {day}"
            if day > length or value == trimmed:
                continue
            candidates.append(
                Candidate(value, f"{month.capitalize()} {day}", MONTH_CONFIDENCE, SuggestionCategory.DATE)
            )
    return candidates


def weekday_candidates(trimmed: str, time_enabled: bool) -> List[Candidate]:
    """Bare and "next" weekday forms for every weekday matching the input."""
    matched = [day for day in WEEKDAYS if trimmed in day or day[:3] in trimmed]
    candidates: List[Candidate] = []
    for weekday in matched:
        for prefix, confidence in (("", WEEKDAY_CONFIDENCE), ("next ", NEXT_WEEKDAY_CONFIDENCE)):
            value = f"{prefix}{weekday}"
            label = f"{prefix.capitalize()}{weekday.capitalize()}"
            candidates.append(Candidate(value, label, confidence, SuggestionCategory.RELATIVE))

            if time_enabled:
                for slot in WEEKDAY_TIMES:
                    candidates.append(
                        Candidate(
                            f"{value} {slot}",
                            f"{label} at {slot}",
                            confidence * WEEKDAY_TIME_FACTOR,
                            SuggestionCategory.TIME,
                            with_time=True,
                        )
                    )
    return candidates


def contextual_candidates(
    trimmed: str,
    time_enabled: bool,
    current: Optional[ParseResult],
    now: datetime,
) -> List[Candidate]:
    return (
        time_candidates(trimmed, time_enabled)
        + month_candidates(trimmed, current, now)
        + weekday_candidates(trimmed, time_enabled)
    )


def keyword_candidates(
    trimmed: str,
    time_enabled: bool,
    current: Optional[ParseResult],
    phrase_limit: int = 2,
) -> List[Candidate]:
    """Canned phrases from the first keyword family matching the input."""
    if current is not None and current.confidence >= KEYWORD_GATE:
        return []

    for pattern, phrases in KEYWORD_FAMILIES:
        if not pattern.search(trimmed):
            continue
        candidates: List[Candidate] = []
        for phrase in phrases[:phrase_limit]:
            timed = _has_meridiem(phrase)
            if timed and not time_enabled:
                continue
            candidates.append(
                Candidate(
                    phrase,
                    phrase.capitalize(),
                    KEYWORD_CONFIDENCE,
                    SuggestionCategory.TIME if timed else SuggestionCategory.RELATIVE,
                    with_time=timed and time_enabled,
                )
            )
        return candidates

    return []
