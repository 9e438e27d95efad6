"""Sorting and grouping of arbitrary items by an extracted date."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Tuple, TypeVar

from smartdate.display.formatters import EDIT_DATE_FORMAT, coerce_datetime, format_for_display

T = TypeVar("T")

NO_DATE_KEY = "No date"


def sort_by_date(
    items: Iterable[T],
    get_date: Callable[[T], Any],
    descending: bool = True,
) -> List[T]:
    """Stable sort by ``get_date(item)``; items without a date go last."""
    dated: List[Tuple[float, T]] = []
    undated: List[T] = []

    for item in items:
        moment = coerce_datetime(get_date(item))
        if moment is None:
            undated.append(item)
        else:
            dated.append((moment.timestamp(), item))

    dated.sort(key=lambda pair: pair[0], reverse=descending)
    return [item for _, item in dated] + undated


def group_by_date(
    items: Iterable[T],
    get_date: Callable[[T], Any],
    fmt: str = EDIT_DATE_FORMAT,
) -> Dict[str, List[T]]:
    """Bucket items by their formatted date, in first-seen order.

    Items without a usable date land under :data:`NO_DATE_KEY`.
    """
    groups: Dict[str, List[T]] = {}
    for item in items:
        key = format_for_display(get_date(item), fmt) or NO_DATE_KEY
        groups.setdefault(key, []).append(item)
    return groups
