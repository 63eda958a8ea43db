"""
Dashboard composition service.

Runs every calculation once over already loaded events and daily logs. There
is no caching: callers rebuild the summary after each change.
"""
from typing import Iterable
from datetime import date

from src.models.daily_log import DailyLog
from src.models.dashboard import DashboardSummary
from src.models.event import CycleEvent
from src.services.phase import get_current_phase, get_daily_insight, get_phase_tips
from src.services.statistics import calculate_cycle_statistics
from src.services.trends import summarize_trends
from src.utils.logging import logger

def build_dashboard(
    events: Iterable[CycleEvent],
    logs: Iterable[DailyLog],
    today: date
) -> DashboardSummary:
    """
    Build the dashboard summary for a user.

    Args:
        events: All period boundary events for the user
        logs: All daily logs for the user
        today: Current date

    Returns:
        DashboardSummary with statistics, phase, insight text, tips and trends
    """
    events = list(events)
    logs = list(logs)

    stats = calculate_cycle_statistics(events)
    phase_info = get_current_phase(events, stats, today)
    summary = DashboardSummary(
        today=today,
        statistics=stats,
        phase=phase_info,
        insight=get_daily_insight(phase_info),
        tips=get_phase_tips(phase_info.phase),
        trends=summarize_trends(logs, today)
    )

    logger.info("Built dashboard summary", extra={
        "events": len(events),
        "daily_logs": len(logs),
        "phase": phase_info.phase.value,
        "day_of_cycle": phase_info.day_of_cycle,
        "days_until_next_period": phase_info.days_until_next_period
    })
    return summary
