"""Ranked date suggestions for partial input."""

from smartdate.suggestions.engine import SuggestionEngine, suggest
from smartdate.suggestions.generator import Candidate
from smartdate.suggestions.ranking import rank_suggestions, validate_candidates

__all__ = [
    "Candidate",
    "SuggestionEngine",
    "rank_suggestions",
    "suggest",
    "validate_candidates",
]
