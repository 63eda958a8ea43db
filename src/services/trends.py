"""
Service module for wellbeing trend analysis.

Aggregates daily mood, energy and symptom logs over the trailing 7 and 30
days into averages, the most frequent symptoms and a mood direction.

Typical usage:
    logs = store.list_daily_logs()
    summary = summarize_trends(logs, today=date.today())
    print(summary.avg_mood_7d, summary.mood_trend)
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional
from datetime import date, timedelta

from src.models.daily_log import DailyLog
from src.models.trend import MoodTrend, SymptomCount, TrendSummary
from src.services.constants import (
    SHORT_TREND_WINDOW_DAYS,
    LONG_TREND_WINDOW_DAYS,
    MIN_LOGS_FOR_TREND,
    MOOD_TREND_THRESHOLD,
    TOP_SYMPTOMS_LIMIT
)
from src.services.utils import rounded_mean

TREND_FIELDS = ("mood", "energy")

def filter_logs_in_window(logs: Iterable[DailyLog], today: date, days: int) -> List[DailyLog]:
    """Logs dated within the inclusive range [today - days, today]."""
    window_start = today - timedelta(days=days)
    return [log for log in logs if window_start <= log.date <= today]

def average_for(logs: Iterable[DailyLog], field: str) -> Optional[float]:
    """
    Average of the recorded mood or energy values, to one decimal place.

    Args:
        logs: Daily logs to average
        field: "mood" or "energy"

    Returns:
        Rounded average, or None if no log has a value for the field
    """
    if field not in TREND_FIELDS:
        raise ValueError(f"Cannot average field {field!r}")
    values = [getattr(log, field) for log in logs if getattr(log, field) is not None]
    return rounded_mean(values, ndigits=1)

def top_symptoms(logs: Iterable[DailyLog], limit: int = TOP_SYMPTOMS_LIMIT) -> List[SymptomCount]:
    """
    Most frequently logged symptoms.

    Ties keep the order in which the symptoms were first seen.

    Example:
        >>> [s.symptom for s in top_symptoms(logs, limit=2)]
        ['cramps', 'headache']
    """
    counts = Counter()
    for log in logs:
        counts.update(log.symptoms)
    # Counter keeps first-seen order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [SymptomCount(symptom=symptom, count=count) for symptom, count in ranked[:limit]]

def mood_trend(logs: Iterable[DailyLog]) -> Optional[MoodTrend]:
    """
    Compare average mood in the earlier and later half of the logs.

    The later half gets the extra log when the count is odd.

    Returns:
        UP or DOWN when the halves differ by more than MOOD_TREND_THRESHOLD,
        STABLE otherwise, None with fewer than MIN_LOGS_FOR_TREND logs or
        when either half has no mood values
    """
    ordered = sorted(logs, key=lambda log: log.date)
    if len(ordered) < MIN_LOGS_FOR_TREND:
        return None

    middle = len(ordered) // 2
    first_avg = average_for(ordered[:middle], "mood")
    second_avg = average_for(ordered[middle:], "mood")
    if first_avg is None or second_avg is None:
        return None

    difference = second_avg - first_avg
    if difference > MOOD_TREND_THRESHOLD:
        return MoodTrend.UP
    elif difference < -MOOD_TREND_THRESHOLD:
        return MoodTrend.DOWN
    return MoodTrend.STABLE

def summarize_trends(logs: Iterable[DailyLog], today: date) -> TrendSummary:
    """
    Build the trend summary for the 7 and 30 days ending today.

    Args:
        logs: All daily logs
        today: Last day of both windows

    Returns:
        TrendSummary with averages, top symptoms and mood trend
    """
    logs = list(logs)
    last_week = filter_logs_in_window(logs, today, SHORT_TREND_WINDOW_DAYS)
    last_month = filter_logs_in_window(logs, today, LONG_TREND_WINDOW_DAYS)

    return TrendSummary(
        avg_mood_7d=average_for(last_week, "mood"),
        avg_energy_7d=average_for(last_week, "energy"),
        avg_mood_30d=average_for(last_month, "mood"),
        avg_energy_30d=average_for(last_month, "energy"),
        top_symptoms=top_symptoms(last_month),
        mood_trend=mood_trend(last_month),
        logs_7d=len(last_week),
        logs_30d=len(last_month)
    )

def describe_level(value: Optional[float], labels: Dict[int, str]) -> Optional[str]:
    """
    Label for an averaged 1-5 value, e.g. 3.6 -> labels[4].

    Example:
        >>> describe_level(3.6, MOOD_LABELS)
        'Good'
    """
    if value is None:
        return None
    return labels.get(rounded_mean([value]))
