"""
Shared utility functions for cycle-related services.

These utilities are used across multiple service modules to split and order
period boundary events and to do calendar-day arithmetic.
"""
from typing import Iterable, List, Optional, Tuple, Union
from datetime import date

from src.models.event import CycleEvent, EventKind

def get_events_of_kind(events: Iterable[CycleEvent], kind: EventKind) -> List[CycleEvent]:
    """
    Filter events by kind and sort them by date.

    The sort is stable, so same-day events keep their input order.

    Example:
        >>> starts = get_events_of_kind(events, EventKind.PERIOD_START)
    """
    return sorted((e for e in events if e.kind == kind), key=lambda e: e.date)

def split_boundaries(events: Iterable[CycleEvent]) -> Tuple[List[CycleEvent], List[CycleEvent]]:
    """
    Partition events into sorted period starts and sorted period ends.

    Returns:
        Tuple of (starts, ends), each ascending by date
    """
    events = list(events)
    return (
        get_events_of_kind(events, EventKind.PERIOD_START),
        get_events_of_kind(events, EventKind.PERIOD_END)
    )

def days_between(earlier: date, later: date) -> int:
    """Signed number of calendar days from ``earlier`` to ``later``."""
    return (later - earlier).days

def find_first_end_on_or_after(
    start: date,
    ends: List[CycleEvent],
    max_days: Optional[int] = None
) -> Optional[CycleEvent]:
    """
    Find the chronologically first end on or after a start date.

    Args:
        start: Period start date
        ends: Period end events sorted ascending
        max_days: Optional upper bound on days between start and end

    Returns:
        The matching end event, or None

    Note:
        Matching is greedy: the same end can be returned for several starts,
        and with no bound a distant end is returned when a nearer one was
        never logged.
    """
    for end in ends:
        gap = days_between(start, end.date)
        if gap < 0:
            continue
        if max_days is None or gap <= max_days:
            return end
    return None

def rounded_mean(values: List[float], ndigits: Optional[int] = None) -> Optional[Union[int, float]]:
    """
    Mean of the values, rounded half away from zero.

    Returns an int when ``ndigits`` is None, None for an empty list.
    """
    if not values:
        return None
    value = sum(values) / len(values)
    factor = 10 ** (ndigits or 0)
    scaled = abs(value) * factor
    rounded = int(scaled + 0.5) / factor
    if value < 0:
        rounded = -rounded
    return int(rounded) if ndigits is None else rounded
