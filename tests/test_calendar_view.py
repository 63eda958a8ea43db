"""Tests for calendar date classification."""
from datetime import date, timedelta
import pytest
from src.models.event import CycleEvent, EventKind
from src.models.statistics import CycleStatistics
from src.services.calendar_view import (
    is_in_period,
    is_in_fertile_window,
    is_ovulation_day,
    get_entries_for_date,
    get_day_status,
    build_month_grid,
    get_month_statuses
)
from src.services.statistics import calculate_cycle_statistics

@pytest.fixture
def single_period():
    """One period from March 3 to March 7."""
    return [
        CycleEvent(date=date(2024, 3, 3), kind=EventKind.PERIOD_START),
        CycleEvent(date=date(2024, 3, 7), kind=EventKind.PERIOD_END, notes="light"),
    ]

def test_is_in_period_covers_start_to_end(single_period):
    """Test that every day of a closed period is in period."""
    for offset in range(5):
        assert is_in_period(single_period, date(2024, 3, 3) + timedelta(days=offset))

def test_is_in_period_false_outside(single_period):
    """Test the days right before and after a period."""
    assert not is_in_period(single_period, date(2024, 3, 2))
    assert not is_in_period(single_period, date(2024, 3, 8))

def test_is_in_period_without_events():
    """Test that no events means no period days."""
    assert not is_in_period([], date(2024, 3, 3))

def test_ongoing_period_is_open_ended():
    """Test that a start without an end covers every later date."""
    events = [CycleEvent(date=date(2024, 3, 3), kind=EventKind.PERIOD_START)]

    assert is_in_period(events, date(2024, 3, 3))
    assert is_in_period(events, date(2025, 12, 31))
    assert not is_in_period(events, date(2024, 3, 2))

def test_missing_end_pairs_with_later_end():
    """Test that a start with a missing end uses the next logged end."""
    events = [
        CycleEvent(date=date(2024, 1, 1), kind=EventKind.PERIOD_START),
        CycleEvent(date=date(2024, 1, 29), kind=EventKind.PERIOD_START),
        CycleEvent(date=date(2024, 2, 2), kind=EventKind.PERIOD_END),
    ]

    assert is_in_period(events, date(2024, 1, 15))

def test_is_in_fertile_window_inclusive():
    """Test the fertile window bounds are inclusive."""
    window_start, window_end = date(2024, 3, 6), date(2024, 3, 11)

    assert is_in_fertile_window(date(2024, 3, 6), window_start, window_end)
    assert is_in_fertile_window(date(2024, 3, 11), window_start, window_end)
    assert not is_in_fertile_window(date(2024, 3, 5), window_start, window_end)
    assert not is_in_fertile_window(date(2024, 3, 12), window_start, window_end)

def test_is_in_fertile_window_needs_both_bounds():
    """Test that a missing bound means no fertile days."""
    assert not is_in_fertile_window(date(2024, 3, 6), None, date(2024, 3, 11))
    assert not is_in_fertile_window(date(2024, 3, 6), date(2024, 3, 6), None)

def test_is_ovulation_day():
    """Test ovulation day matching."""
    day = date(2024, 3, 11)

    assert is_ovulation_day(day, day)
    assert not is_ovulation_day(day + timedelta(days=1), day)
    assert not is_ovulation_day(day, None)

def test_get_entries_for_date(single_period):
    """Test filtering events to a single date."""
    assert get_entries_for_date(single_period, date(2024, 3, 7)) == [single_period[1]]
    assert get_entries_for_date(single_period, date(2024, 3, 5)) == []

def test_get_day_status_flags(single_period):
    """Test that day status combines event, period and fertility flags."""
    stats = CycleStatistics(
        fertile_window_start=date(2024, 3, 2),
        fertile_window_end=date(2024, 3, 7),
        predicted_ovulation_date=date(2024, 3, 7)
    )
    status = get_day_status(single_period, stats, date(2024, 3, 7), today=date(2024, 3, 7), month=3)

    assert status.is_period
    assert status.has_end
    assert not status.has_start
    assert status.has_notes
    assert status.is_fertile
    assert status.is_ovulation
    assert status.is_today
    assert status.in_current_month

def test_get_day_status_outside_month(single_period):
    """Test that padding days are flagged as outside the month."""
    stats = calculate_cycle_statistics(single_period)
    status = get_day_status(single_period, stats, date(2024, 2, 28), today=date(2024, 3, 1), month=3)

    assert not status.in_current_month
    assert not status.is_today
    assert not status.is_fertile

def test_build_month_grid_pads_to_full_weeks():
    """Test that the grid runs Sunday to Saturday around the month."""
    weeks = build_month_grid(2024, 2)

    assert weeks[0][0] == date(2024, 1, 28)
    assert weeks[-1][-1] == date(2024, 3, 2)
    assert len(weeks) == 5
    assert all(len(week) == 7 for week in weeks)
    assert all(week[0].weekday() == 6 for week in weeks)

def test_build_month_grid_month_starting_on_sunday():
    """Test a month whose first day is a Sunday needs no leading padding."""
    weeks = build_month_grid(2024, 9)

    assert weeks[0][0] == date(2024, 9, 1)
    assert weeks[-1][-1] == date(2024, 10, 5)

def test_get_month_statuses_marks_period_days(single_period):
    """Test month statuses for the month containing the period."""
    stats = calculate_cycle_statistics(single_period)
    weeks = get_month_statuses(single_period, stats, 2024, 3, today=date(2024, 3, 15))

    period_days = [day.date for week in weeks for day in week if day.is_period]
    assert period_days == [date(2024, 3, d) for d in range(3, 8)]
    assert [day.date for week in weeks for day in week if day.is_today] == [date(2024, 3, 15)]
