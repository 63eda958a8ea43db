"""Tests for cycle phase determination."""
from datetime import date, timedelta
import pytest
from src.models.event import CycleEvent, EventKind
from src.models.phase import CyclePhase, CyclePhaseInfo
from src.models.statistics import CycleStatistics
from src.services.phase import (
    determine_phase,
    get_current_phase,
    get_phase_tips,
    get_daily_insight,
    get_greeting
)
from src.services.statistics import calculate_cycle_statistics

@pytest.fixture
def events():
    """Three periods starting 28 days apart, last one on Feb 26 2024."""
    return [
        CycleEvent(date=date(2024, 1, 1), kind=EventKind.PERIOD_START),
        CycleEvent(date=date(2024, 1, 5), kind=EventKind.PERIOD_END),
        CycleEvent(date=date(2024, 1, 29), kind=EventKind.PERIOD_START),
        CycleEvent(date=date(2024, 2, 2), kind=EventKind.PERIOD_END),
        CycleEvent(date=date(2024, 2, 26), kind=EventKind.PERIOD_START),
    ]

@pytest.mark.parametrize("day,expected", [
    *[(d, CyclePhase.MENSTRUAL) for d in range(1, 6)],
    *[(d, CyclePhase.FOLLICULAR) for d in range(6, 10)],
    *[(d, CyclePhase.OVULATION) for d in range(10, 16)],
    *[(d, CyclePhase.LUTEAL) for d in range(16, 29)],
    (29, CyclePhase.LUTEAL),
    (45, CyclePhase.LUTEAL),
])
def test_determine_phase_for_28_day_cycle(day, expected):
    """Test phase boundaries for a 28 day cycle with 5 day periods."""
    assert determine_phase(day, 28, 5) == expected

def test_determine_phase_defaults_period_duration():
    """Test that a missing period duration is treated as 5 days."""
    assert determine_phase(5, 28, None) == CyclePhase.MENSTRUAL
    assert determine_phase(6, 28, None) == CyclePhase.FOLLICULAR

def test_determine_phase_long_period_overrides_follicular():
    """Test that menstrual days take priority over later bands."""
    assert determine_phase(7, 24, 7) == CyclePhase.MENSTRUAL
    assert determine_phase(8, 24, 7) == CyclePhase.OVULATION

def test_unknown_without_events():
    """Test that no events gives an unknown phase."""
    info = get_current_phase([], CycleStatistics(), today=date(2024, 3, 1))

    assert info.phase == CyclePhase.UNKNOWN
    assert info.day_of_cycle is None
    assert info.days_until_next_period is None

def test_unknown_without_cycle_length():
    """Test that a single start gives an unknown phase."""
    events = [CycleEvent(date=date(2024, 3, 1), kind=EventKind.PERIOD_START)]
    stats = calculate_cycle_statistics(events)
    info = get_current_phase(events, stats, today=date(2024, 3, 3))

    assert info.phase == CyclePhase.UNKNOWN
    assert info.day_of_cycle is None

def test_current_phase_on_start_day(events):
    """Test that the start date itself is day 1."""
    stats = calculate_cycle_statistics(events)
    info = get_current_phase(events, stats, today=date(2024, 2, 26))

    assert info.phase == CyclePhase.MENSTRUAL
    assert info.day_of_cycle == 1
    assert info.days_until_next_period == 28

def test_current_phase_mid_cycle(events):
    """Test the ovulation band in the middle of the cycle."""
    stats = calculate_cycle_statistics(events)
    info = get_current_phase(events, stats, today=date(2024, 3, 11))

    assert info.day_of_cycle == 15
    assert info.phase == CyclePhase.OVULATION
    assert info.days_until_next_period == 14

def test_current_phase_due_today(events):
    """Test that the predicted date gives zero days until next period."""
    stats = calculate_cycle_statistics(events)
    info = get_current_phase(events, stats, today=date(2024, 3, 25))

    assert info.days_until_next_period == 0
    assert info.day_of_cycle == 29
    assert info.phase == CyclePhase.LUTEAL

def test_current_phase_overdue_is_not_clamped(events):
    """Test that an overdue cycle keeps counting days and stays luteal."""
    stats = calculate_cycle_statistics(events)
    today = date(2024, 3, 25) + timedelta(days=40)
    info = get_current_phase(events, stats, today=today)

    assert info.day_of_cycle == 69
    assert info.days_until_next_period == -40
    assert info.phase == CyclePhase.LUTEAL
    assert info.is_overdue

def test_current_phase_with_future_start(events):
    """Test that a start logged after the evaluation date gives no cycle day."""
    stats = calculate_cycle_statistics(events)
    info = get_current_phase(events, stats, today=date(2024, 2, 20))

    assert info.phase == CyclePhase.UNKNOWN
    assert info.day_of_cycle is None
    assert info.days_until_next_period == 34

def test_get_phase_tips_for_every_phase():
    """Test that every phase has tips."""
    for phase in CyclePhase:
        tips = get_phase_tips(phase)
        assert tips.title
        assert len(tips.tips) == 4

def test_daily_insight_unknown():
    """Test the insight text when nothing is tracked yet."""
    assert get_daily_insight(CyclePhaseInfo()) == "Start tracking your cycle to get personalized insights."

@pytest.mark.parametrize("days,expected", [
    (24, "Day 5 of your cycle • 24 days until next period"),
    (0, "Day 5 of your cycle • Period expected today"),
    (-3, "Day 5 of your cycle • Period is 3 days late"),
    (None, "Day 5 of your cycle"),
])
def test_daily_insight(days, expected):
    """Test the insight text for upcoming, due and late periods."""
    info = CyclePhaseInfo(phase=CyclePhase.MENSTRUAL, day_of_cycle=5, days_until_next_period=days)

    assert get_daily_insight(info) == expected

@pytest.mark.parametrize("hour,expected", [
    (0, "Good night"),
    (5, "Good night"),
    (6, "Good morning"),
    (12, "Good afternoon"),
    (17, "Good evening"),
    (21, "Good night"),
])
def test_get_greeting(hour, expected):
    """Test greeting boundaries."""
    assert get_greeting(hour) == expected
