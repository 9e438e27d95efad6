"""Validation and ranking of suggestion candidates.

Validation re-runs every candidate through the parser so that each surviving
suggestion is guaranteed to parse on its own. Ranking then cleans and orders
the pool:
1. Drop NaN, zero or negative confidences
2. Deduplicate by value (first occurrence wins)
3. Stable sort by confidence, highest first
4. Tier cap based on the top confidence
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Iterable, List, Sequence

from smartdate.configuration.settings import EngineSettings
from smartdate.display.formatters import format_for_display
from smartdate.parsing.models import Suggestion
from smartdate.parsing.parser import SmartDateParser
from smartdate.suggestions.generator import Candidate

logger = logging.getLogger(__name__)

# (minimum top confidence, minimum kept confidence, maximum kept entries)
TIERS = (
    (0.9, 0.85, 3),
    (0.7, 0.6, 5),
)
DEFAULT_LIMIT = 6
EMPTY_POOL_LIMIT = 8


def validate_candidates(
    candidates: Iterable[Candidate],
    parser: SmartDateParser,
    now: datetime,
    settings: EngineSettings,
    keep_unparsed: bool = False,
) -> List[Suggestion]:
    """Parse each candidate and attach its preview.

    Unparseable candidates are dropped, unless ``keep_unparsed`` is set, in
    which case they keep their label as the preview and carry no date.
    """
    suggestions: List[Suggestion] = []
    for candidate in candidates:
        result = parser.parse(candidate.value, now)
        if result is None and not keep_unparsed:
            logger.debug(f"Dropped unparseable candidate {candidate.value!r}")
            continue

        if result is None:
            preview, parsed_date = candidate.label, None
        else:
            fmt = settings.datetime_preview_format if candidate.with_time else settings.date_preview_format
            preview, parsed_date = format_for_display(result.date, fmt), result.date

        suggestions.append(
            Suggestion(
                label=candidate.label,
                value=candidate.value,
                confidence=candidate.confidence,
                preview=preview,
                category=candidate.category,
                parsed_date=parsed_date,
            )
        )
    return suggestions


def rank_suggestions(suggestions: Sequence[Suggestion]) -> List[Suggestion]:
    valid = [s for s in suggestions if not math.isnan(s.confidence) and s.confidence > 0]

    seen = set()
    unique: List[Suggestion] = []
    for suggestion in valid:
        if suggestion.value in seen:
            continue
        seen.add(suggestion.value)
        unique.append(suggestion)

    ranked = sorted(unique, key=lambda s: s.confidence, reverse=True)
    if not ranked:
        return ranked[:EMPTY_POOL_LIMIT]

    top = ranked[0].confidence
    for threshold, floor, limit in TIERS:
        if top >= threshold:
            return [s for s in ranked if s.confidence >= floor][:limit]
    return ranked[:DEFAULT_LIMIT]
