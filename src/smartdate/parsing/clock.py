"""Clock sources supplying the reference "now".

Resolvers never read the system clock themselves; the parser asks its clock
once per call and threads the value through every resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock time."""
    return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant, for tests and batch replays."""

    instant: datetime

    def __call__(self) -> datetime:
        return self.instant


def resolve_now(reference_time: Optional[datetime], clock: Clock = system_clock) -> datetime:
    """Return ``reference_time`` when given, otherwise ask ``clock``."""
    if reference_time is not None:
        return reference_time
    return clock()
