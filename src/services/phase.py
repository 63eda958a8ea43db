"""
Service module for determining the current cycle phase.

This module places a date within the current cycle using the latest logged
period start and the averaged statistics, and provides the phase-specific
tips and the daily insight text shown on the dashboard.

Typical usage:
    >>> stats = calculate_cycle_statistics(events)
    >>> info = get_current_phase(events, stats, today=date(2024, 3, 1))
    >>> print(get_daily_insight(info))
    Day 5 of your cycle • 24 days until next period
"""
from typing import Iterable, Optional
from datetime import date

from src.models.event import CycleEvent
from src.models.phase import CyclePhase, CyclePhaseInfo, PhaseTips
from src.models.statistics import CycleStatistics
from src.services.constants import (
    DEFAULT_PERIOD_DURATION,
    LUTEAL_PHASE_DAYS,
    FERTILE_WINDOW_LEAD_DAYS,
    OVULATION_PHASE_TAIL_DAYS,
    PHASE_TIPS
)
from src.services.utils import split_boundaries, days_between
from src.utils.logging import logger

def determine_phase(
    day_of_cycle: int,
    cycle_length: int,
    period_duration: Optional[int] = None
) -> CyclePhase:
    """
    Map a day of the cycle to its phase.

    Args:
        day_of_cycle: Day in the cycle (1-based, may exceed cycle_length)
        cycle_length: Average cycle length in days
        period_duration: Average period duration, DEFAULT_PERIOD_DURATION if None

    Returns:
        Phase for the day

    Example:
        >>> determine_phase(12, 28, 5)
        <CyclePhase.OVULATION: 'ovulation'>
    """
    if period_duration is None:
        period_duration = DEFAULT_PERIOD_DURATION
    ovulation_day = cycle_length - LUTEAL_PHASE_DAYS

    if day_of_cycle <= period_duration:
        return CyclePhase.MENSTRUAL
    elif day_of_cycle <= ovulation_day - FERTILE_WINDOW_LEAD_DAYS:
        return CyclePhase.FOLLICULAR
    elif day_of_cycle <= ovulation_day + OVULATION_PHASE_TAIL_DAYS:
        return CyclePhase.OVULATION
    # Overdue cycles stay luteal until a new start is logged
    return CyclePhase.LUTEAL

def get_current_phase(
    events: Iterable[CycleEvent],
    stats: CycleStatistics,
    today: date
) -> CyclePhaseInfo:
    """
    Get the cycle phase for a date based on historical events.

    Args:
        events: Period start and end events
        stats: Statistics calculated from the same events
        today: Date to evaluate, normally the current date

    Returns:
        CyclePhaseInfo, UNKNOWN when there is no start or no cycle length
    """
    starts, _ = split_boundaries(events)
    if not starts or stats.average_cycle_length is None:
        return CyclePhaseInfo(phase=CyclePhase.UNKNOWN)

    day_of_cycle = days_between(starts[-1].date, today) + 1
    days_until_next = None
    if stats.predicted_next_period_date is not None:
        days_until_next = days_between(today, stats.predicted_next_period_date)

    if day_of_cycle < 1:
        # Last start is logged in the future; day of cycle is meaningless
        logger.debug("Latest period start is after evaluation date", extra={
            "last_start": str(starts[-1].date),
            "today": str(today)
        })
        return CyclePhaseInfo(
            phase=CyclePhase.UNKNOWN,
            days_until_next_period=days_until_next
        )

    phase = determine_phase(
        day_of_cycle,
        stats.average_cycle_length,
        stats.average_period_duration
    )
    return CyclePhaseInfo(
        phase=phase,
        day_of_cycle=day_of_cycle,
        days_until_next_period=days_until_next
    )

def get_phase_tips(phase: CyclePhase) -> PhaseTips:
    """
    Get the health tips for a phase.

    Example:
        >>> tips = get_phase_tips(CyclePhase.LUTEAL)
        >>> tips.title
        'Luteal Phase'
    """
    return PhaseTips(**PHASE_TIPS[phase])

def get_daily_insight(phase_info: CyclePhaseInfo) -> str:
    """
    Generate the one-line dashboard insight for the current phase.

    Args:
        phase_info: Result of get_current_phase

    Returns:
        Text such as "Day 30 of your cycle • Period is 2 days late"
    """
    if phase_info.phase == CyclePhase.UNKNOWN:
        return "Start tracking your cycle to get personalized insights."

    insights = []
    if phase_info.day_of_cycle:
        insights.append(f"Day {phase_info.day_of_cycle} of your cycle")

    days = phase_info.days_until_next_period
    if days is not None and days > 0:
        insights.append(f"{days} days until next period")
    elif days == 0:
        insights.append("Period expected today")
    elif days is not None and days < 0:
        insights.append(f"Period is {abs(days)} days late")

    return " • ".join(insights)

def get_greeting(hour: int) -> str:
    """Greeting for the hour of day (0-23)."""
    if hour < 6:
        return "Good night"
    elif hour < 12:
        return "Good morning"
    elif hour < 17:
        return "Good afternoon"
    elif hour < 21:
        return "Good evening"
    return "Good night"
