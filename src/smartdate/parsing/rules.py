"""Declarative rule tables and the first-match-wins dispatcher.

Every resolver family is an ordered tuple of :class:`Rule` objects. A rule
pairs a compiled pattern with a confidence weight and an *effect*: a callable
that turns the regex match (plus the reference time) into a value, or returns
``None`` to reject an out-of-range match.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Effect = Callable[["re.Match[str]", datetime], Optional[Any]]


@dataclass(frozen=True)
class Rule:
    """One entry of a resolver rule table."""

    name: str
    pattern: "re.Pattern[str]"
    weight: float
    effect: Effect


@dataclass(frozen=True)
class RuleMatch:
    """A rule that matched and whose effect accepted the match."""

    rule: Rule
    text: str                 # matched substring
    span: Tuple[int, int]
    value: Any

    @property
    def weight(self) -> float:
        return self.rule.weight


def first_match(
    rules: Sequence[Rule],
    text: str,
    now: datetime,
    *,
    fall_through: bool = True,
) -> Optional[RuleMatch]:
    """Evaluate ``rules`` in order and return the first accepted match.

    Args:
        rules: Ordered rule table
        text: Text to search
        now: Reference time handed to each effect
        fall_through: When a pattern matches but its effect rejects the match,
            continue with the next rule (``True``) or stop the family (``False``)

    Returns:
        The accepted match, or None when no rule accepted
    """
    for rule in rules:
        match = rule.pattern.search(text)
        if match is None:
            continue

        value = rule.effect(match, now)
        if value is not None:
            logger.debug(f"Rule '{rule.name}' matched {match.group(0)!r}")
            return RuleMatch(rule=rule, text=match.group(0), span=match.span(), value=value)

        logger.debug(f"Rule '{rule.name}' rejected {match.group(0)!r}")
        if not fall_through:
            return None

    return None
