"""Smart date parser: resolver chain plus confidence aggregation.

Pipeline for one input:
1. Lower-case and trim, then pull out a time-of-day token (+0.3)
2. Try the date families in fixed order, first match wins:
   relative (0.7-0.9), weekday (0.8/0.85), month/day (0.75),
   generic fallback on the original text (0.5)
3. Sum the contributions (capped at 1.0), apply the extracted time to the
   resolved date, and drop anything below the minimum confidence

Parsing never raises on malformed input; it returns ``None``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from smartdate.configuration.settings import EngineSettings
from smartdate.parsing.clock import Clock, resolve_now, system_clock
from smartdate.parsing.models import ParsedComponents, ParseResult
from smartdate.parsing.resolvers import (
    FALLBACK_WEIGHT,
    extract_time,
    resolve_fallback,
    resolve_month_day,
    resolve_relative,
    resolve_weekday,
)

logger = logging.getLogger(__name__)


class SmartDateParser:
    """Interpret short free-form text as a date/time with a confidence score.

    The parser is immutable; one instance can serve any number of callers.
    Pass ``reference_time`` to :meth:`parse` to pin "now" explicitly, otherwise
    the configured clock is consulted once per call.
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        clock: Clock = system_clock,
    ):
        self.settings = settings or EngineSettings()
        self.clock = clock

    def parse(
        self,
        text: Optional[str],
        reference_time: Optional[datetime] = None,
    ) -> Optional[ParseResult]:
        """Parse ``text`` relative to ``reference_time``.

        Args:
            text: Raw user input
            reference_time: The "now" used by relative families
                (defaults to the parser's clock)

        Returns:
            ParseResult, or None when nothing matched or confidence is too low
        """
        if not text or not text.strip():
            return None

        now = resolve_now(reference_time, self.clock)
        normalized = text.strip().lower()
        components: Dict[str, object] = {}
        modifiers: List[str] = []
        confidence = 0.0

        time_match, remainder = extract_time(normalized, now)
        if time_match is not None:
            components["time"] = time_match.text
            confidence += time_match.weight

        resolved: Optional[datetime] = None

        relative = resolve_relative(remainder, now)
        if relative is not None:
            resolved = relative.value
            components["relative"] = relative.text
            confidence += relative.weight

        if resolved is None:
            weekday = resolve_weekday(remainder, now)
            if weekday is not None:
                resolved = weekday.value
                components["weekday"] = weekday.text
                if weekday.rule.name == "next_weekday":
                    modifiers.append("next")
                confidence += weekday.weight

        if resolved is None:
            month_day = resolve_month_day(remainder, now)
            if month_day is not None:
                resolved = month_day.value
                components["date"] = month_day.text
                confidence += month_day.weight

        if resolved is None:
            resolved = resolve_fallback(text, now)
            if resolved is not None:
                confidence += FALLBACK_WEIGHT

        if resolved is None:
            logger.debug(f"No date family matched {text!r}")
            return None

        if time_match is not None:
            hour, minute = time_match.value
            resolved = resolved.replace(hour=hour, minute=minute, second=0, microsecond=0)

        confidence = min(confidence, 1.0)
        if confidence < self.settings.min_confidence:
            logger.debug(f"Rejected {text!r}: confidence {confidence:.2f} below threshold")
            return None

        return ParseResult(
            date=resolved,
            confidence=confidence,
            original_input=text,
            parsed_components=ParsedComponents(modifiers=tuple(modifiers), **components),
        )

    def parse_date(
        self,
        text: Optional[str],
        reference_time: Optional[datetime] = None,
    ) -> Optional[datetime]:
        """Resolved date only, for callers that do not need the confidence."""
        result = self.parse(text, reference_time)
        return result.date if result else None


_default_parser = SmartDateParser()


def parse(text: Optional[str], reference_time: Optional[datetime] = None) -> Optional[ParseResult]:
    """Parse ``text`` with default settings."""
    return _default_parser.parse(text, reference_time)


def parse_date_string(text: Optional[str], reference_time: Optional[datetime] = None) -> Optional[datetime]:
    """Parse ``text`` with default settings and return only the date."""
    return _default_parser.parse_date(text, reference_time)
