"""
Statistics calculation service for cycle tracking data.

This module derives average cycle length, average period duration and the
next period, ovulation and fertile window predictions from logged period
start and end events. Missing history never raises: every field that cannot
be computed is left as None.

Typical usage:
    events = store.list_events()
    stats = calculate_cycle_statistics(events)
    if stats.has_prediction:
        print(f"Next period around {stats.predicted_next_period_date}")
"""
from typing import Iterable, List, Optional
from datetime import timedelta

from src.models.event import CycleEvent
from src.models.statistics import CycleStatistics
from src.services.constants import (
    CYCLE_LENGTH_WINDOW,
    MAX_CYCLE_LENGTH_DAYS,
    MAX_PERIOD_LENGTH_DAYS,
    PERIOD_DURATION_WINDOW,
    LUTEAL_PHASE_DAYS,
    FERTILE_WINDOW_LEAD_DAYS
)
from src.services.utils import (
    split_boundaries,
    days_between,
    find_first_end_on_or_after,
    rounded_mean
)
from src.utils.logging import logger

def calculate_cycle_lengths(starts: List[CycleEvent]) -> List[int]:
    """
    Calculate the lengths of the most recent cycles.

    Args:
        starts: Period start events sorted ascending

    Returns:
        Day differences between consecutive starts among the last
        CYCLE_LENGTH_WINDOW starts, keeping only values strictly between
        0 and MAX_CYCLE_LENGTH_DAYS

    Example:
        >>> calculate_cycle_lengths(starts)  # Jan 1, Jan 29, Feb 26
        [28, 28]
    """
    recent = starts[-CYCLE_LENGTH_WINDOW:]
    lengths = []
    for previous, current in zip(recent, recent[1:]):
        length = days_between(previous.date, current.date)
        if 0 < length < MAX_CYCLE_LENGTH_DAYS:
            lengths.append(length)
        else:
            logger.debug("Skipping implausible cycle length", extra={
                "previous_start": str(previous.date),
                "current_start": str(current.date),
                "length": length
            })
    return lengths

def calculate_period_durations(starts: List[CycleEvent], ends: List[CycleEvent]) -> List[int]:
    """
    Calculate the duration of every period that has a logged end.

    Each start is paired with the first end on or after it within
    MAX_PERIOD_LENGTH_DAYS. Durations count both the start and end day.

    Args:
        starts: Period start events sorted ascending
        ends: Period end events sorted ascending

    Returns:
        Durations in days, in chronological order of the starts
    """
    durations = []
    for start in starts:
        end = find_first_end_on_or_after(start.date, ends, max_days=MAX_PERIOD_LENGTH_DAYS)
        if end is not None:
            durations.append(days_between(start.date, end.date) + 1)
    return durations

def average_cycle_length(starts: List[CycleEvent]) -> Optional[int]:
    """Average of the recent cycle lengths, or None with fewer than two starts."""
    if len(starts) < 2:
        return None
    return rounded_mean(calculate_cycle_lengths(starts))

def average_period_duration(starts: List[CycleEvent], ends: List[CycleEvent]) -> Optional[int]:
    """Average of the last PERIOD_DURATION_WINDOW period durations."""
    durations = calculate_period_durations(starts, ends)
    return rounded_mean(durations[-PERIOD_DURATION_WINDOW:])

def calculate_cycle_statistics(events: Iterable[CycleEvent]) -> CycleStatistics:
    """
    Calculate cycle statistics and predictions from period boundary events.

    Args:
        events: Period start and end events in any order

    Returns:
        CycleStatistics where prediction fields are either all set or all None

    Example:
        >>> stats = calculate_cycle_statistics(events)
        >>> stats.average_cycle_length
        28
        >>> stats.fertile_window_start, stats.fertile_window_end
        (datetime.date(2024, 3, 6), datetime.date(2024, 3, 11))
    """
    starts, ends = split_boundaries(events)

    cycle_length = average_cycle_length(starts)
    stats = CycleStatistics(
        average_cycle_length=cycle_length,
        average_period_duration=average_period_duration(starts, ends)
    )

    if starts and cycle_length is not None:
        next_period = starts[-1].date + timedelta(days=cycle_length)
        ovulation = next_period - timedelta(days=LUTEAL_PHASE_DAYS)
        stats.predicted_next_period_date = next_period
        stats.predicted_ovulation_date = ovulation
        stats.fertile_window_start = ovulation - timedelta(days=FERTILE_WINDOW_LEAD_DAYS)
        stats.fertile_window_end = ovulation

    logger.debug("Calculated cycle statistics", extra={
        "starts": len(starts),
        "ends": len(ends),
        "average_cycle_length": stats.average_cycle_length,
        "average_period_duration": stats.average_period_duration,
        "predicted_next_period_date": str(stats.predicted_next_period_date)
    })
    return stats
