"""Suggestion engine: ranked completions for partial date input."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from smartdate.configuration.settings import EngineSettings
from smartdate.display.formatters import format_for_display
from smartdate.parsing.clock import resolve_now
from smartdate.parsing.models import ParseResult, Suggestion, SuggestionCategory
from smartdate.parsing.parser import SmartDateParser
from smartdate.suggestions.generator import (
    contextual_candidates,
    empty_input_candidates,
    keyword_candidates,
)
from smartdate.suggestions.ranking import rank_suggestions, validate_candidates

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Build, validate and rank suggestions for the text typed so far.

    Uses the same parser (and settings) as single-shot parsing, so every
    suggestion value parses on its own.
    """

    def __init__(
        self,
        parser: Optional[SmartDateParser] = None,
        settings: Optional[EngineSettings] = None,
    ):
        self.settings = settings or (parser.settings if parser else EngineSettings())
        self.parser = parser or SmartDateParser(self.settings)

    def suggest(
        self,
        text: Optional[str],
        time_enabled: bool = False,
        reference_time: Optional[datetime] = None,
    ) -> List[Suggestion]:
        """Ranked suggestions for ``text``.

        Args:
            text: Raw input, not pre-trimmed
            time_enabled: Whether time-of-day suggestions are relevant
            reference_time: The "now" shared with any parse of the same keystroke

        Returns:
            Suggestions with unique values, highest confidence first
        """
        now = resolve_now(reference_time, self.parser.clock)
        text = text or ""
        trimmed = text.strip().lower()

        if not trimmed:
            defaults = validate_candidates(
                empty_input_candidates(time_enabled), self.parser, now, self.settings, keep_unparsed=True
            )
            return defaults[: self.settings.empty_input_limit]

        current = self.parser.parse(text, now)
        suggestions: List[Suggestion] = []

        if current is not None and current.confidence > self.settings.natural_threshold:
            suggestions.append(self._natural_suggestion(text, current, time_enabled))

        contextual = validate_candidates(
            contextual_candidates(trimmed, time_enabled, current, now), self.parser, now, self.settings
        )
        suggestions.extend(contextual[: self.settings.contextual_limit])

        suggestions.extend(
            validate_candidates(
                keyword_candidates(trimmed, time_enabled, current, self.settings.keyword_phrase_limit),
                self.parser,
                now,
                self.settings,
            )
        )

        ranked = rank_suggestions(suggestions)
        logger.debug(f"{len(ranked)} of {len(suggestions)} suggestions kept for {text!r}")
        return ranked

    def _natural_suggestion(self, text: str, current: ParseResult, time_enabled: bool) -> Suggestion:
        fmt = self.settings.datetime_preview_format if time_enabled else self.settings.date_preview_format
        preview = format_for_display(current.date, fmt)
        return Suggestion(
            label=f'"{text}" → {preview}',
            value=text,
            confidence=min(current.confidence + self.settings.natural_boost, 1.0),
            preview=preview,
            category=SuggestionCategory.NATURAL,
            parsed_date=current.date,
        )


_default_engine = SuggestionEngine()


def suggest(
    text: Optional[str],
    time_enabled: bool = False,
    reference_time: Optional[datetime] = None,
) -> List[Suggestion]:
    """Ranked suggestions with default settings."""
    return _default_engine.suggest(text, time_enabled, reference_time)
