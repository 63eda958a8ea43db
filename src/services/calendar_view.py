"""
Service module for classifying calendar dates.

Point queries that answer whether a date falls inside a logged period, the
predicted fertile window or on the predicted ovulation day, plus helpers that
build the month grid shown in the calendar view.

Typical usage:
    stats = calculate_cycle_statistics(events)
    weeks = get_month_statuses(events, stats, 2024, 3, today=date.today())
    for week in weeks:
        print([day.is_period for day in week])
"""
from typing import Iterable, List, Optional
from datetime import date, timedelta
from calendar import monthrange

from src.models.calendar import DayStatus
from src.models.event import CycleEvent
from src.models.statistics import CycleStatistics
from src.services.utils import split_boundaries, find_first_end_on_or_after

def is_in_period(events: Iterable[CycleEvent], target_date: date) -> bool:
    """
    Check if a date falls inside a logged period.

    Each start is paired with the first end on or after it. A start with no
    end yet is an ongoing period and covers every date from the start on.

    Args:
        events: Period start and end events in any order
        target_date: Date to check

    Returns:
        True if some start/end pair covers the date
    """
    starts, ends = split_boundaries(events)
    for start in starts:
        end = find_first_end_on_or_after(start.date, ends)
        if end is None:
            if target_date >= start.date:
                return True
        elif start.date <= target_date <= end.date:
            return True
    return False

def is_in_fertile_window(
    target_date: date,
    window_start: Optional[date],
    window_end: Optional[date]
) -> bool:
    """Check if a date is within the inclusive fertile window."""
    if window_start is None or window_end is None:
        return False
    return window_start <= target_date <= window_end

def is_ovulation_day(target_date: date, ovulation_date: Optional[date]) -> bool:
    """Check if a date is the predicted ovulation day."""
    return ovulation_date is not None and target_date == ovulation_date

def get_entries_for_date(events: Iterable[CycleEvent], target_date: date) -> List[CycleEvent]:
    """Events logged on the given date, in input order."""
    return [e for e in events if e.date == target_date]

def get_day_status(
    events: List[CycleEvent],
    stats: CycleStatistics,
    target_date: date,
    today: date,
    month: Optional[int] = None
) -> DayStatus:
    """
    Build the calendar flags for a single day.

    Args:
        events: All period boundary events
        stats: Statistics calculated from the same events
        target_date: Day being rendered
        today: Current date, used for the today marker
        month: Month being displayed; days outside it are flagged

    Returns:
        DayStatus for the day
    """
    day_events = get_entries_for_date(events, target_date)
    return DayStatus(
        date=target_date,
        is_period=is_in_period(events, target_date),
        has_start=any(e.is_start for e in day_events),
        has_end=any(e.is_end for e in day_events),
        has_notes=any(e.notes for e in day_events),
        is_fertile=is_in_fertile_window(
            target_date,
            stats.fertile_window_start,
            stats.fertile_window_end
        ),
        is_ovulation=is_ovulation_day(target_date, stats.predicted_ovulation_date),
        is_today=target_date == today,
        in_current_month=month is None or target_date.month == month
    )

def build_month_grid(year: int, month: int) -> List[List[date]]:
    """
    Build the weeks shown for a month, Sunday first.

    The grid starts on the Sunday on or before the first of the month and
    ends on the Saturday on or after its last day.

    Example:
        >>> weeks = build_month_grid(2024, 2)
        >>> weeks[0][0], weeks[-1][-1]
        (datetime.date(2024, 1, 28), datetime.date(2024, 3, 2))
    """
    first = date(year, month, 1)
    last = date(year, month, monthrange(year, month)[1])
    # date.weekday() is Monday=0, the grid is Sunday=0
    grid_start = first - timedelta(days=(first.weekday() + 1) % 7)
    grid_end = last + timedelta(days=6 - (last.weekday() + 1) % 7)

    weeks = []
    current = grid_start
    while current <= grid_end:
        weeks.append([current + timedelta(days=offset) for offset in range(7)])
        current += timedelta(days=7)
    return weeks

def get_month_statuses(
    events: List[CycleEvent],
    stats: CycleStatistics,
    year: int,
    month: int,
    today: date
) -> List[List[DayStatus]]:
    """DayStatus for every day of the month grid, grouped by week."""
    events = list(events)
    return [
        [get_day_status(events, stats, day, today, month=month) for day in week]
        for week in build_month_grid(year, month)
    ]
