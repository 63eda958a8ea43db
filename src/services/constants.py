"""
Constants and shared data for cycle-related services.
"""
from typing import Dict, List
from src.models.phase import CyclePhase

# Cycle length averaging
CYCLE_LENGTH_WINDOW = 4  # last 4 starts give 3 cycle lengths
MAX_CYCLE_LENGTH_DAYS = 60  # longer gaps are treated as missed logging

# Period duration averaging
MAX_PERIOD_LENGTH_DAYS = 10  # an end further than this from a start is not its end
PERIOD_DURATION_WINDOW = 3
DEFAULT_PERIOD_DURATION = 5

# Ovulation and fertility
LUTEAL_PHASE_DAYS = 14
FERTILE_WINDOW_LEAD_DAYS = 5
OVULATION_PHASE_TAIL_DAYS = 1

# Wellbeing trends
SHORT_TREND_WINDOW_DAYS = 7
LONG_TREND_WINDOW_DAYS = 30
MIN_LOGS_FOR_TREND = 4
MOOD_TREND_THRESHOLD = 0.5
TOP_SYMPTOMS_LIMIT = 5

MOOD_LABELS: Dict[int, str] = {
    1: "Very Low",
    2: "Low",
    3: "Okay",
    4: "Good",
    5: "Great"
}

ENERGY_LABELS: Dict[int, str] = {
    1: "Very Low",
    2: "Low",
    3: "Moderate",
    4: "High",
    5: "Very High"
}

# Calendar
WEEKDAY_LABELS: List[str] = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

PHASE_TIPS = {
    CyclePhase.MENSTRUAL: {
        "title": "Menstrual Phase",
        "description": "Your body is shedding the uterine lining. Energy is usually at its lowest.",
        "tips": [
            "Rest when you need to and keep workouts gentle",
            "Eat iron-rich foods like spinach, lentils and red meat",
            "Use a warm compress for cramps",
            "Stay hydrated and limit caffeine"
        ]
    },
    CyclePhase.FOLLICULAR: {
        "title": "Follicular Phase",
        "description": "Estrogen is rising and energy usually climbs with it.",
        "tips": [
            "A good time for higher intensity workouts",
            "Start new projects while motivation is high",
            "Add fermented foods and fresh vegetables",
            "Plan social activities"
        ]
    },
    CyclePhase.OVULATION: {
        "title": "Ovulation Phase",
        "description": "You are in or near your fertile window.",
        "tips": [
            "Fertility is at its highest around these days",
            "Energy and confidence often peak",
            "Eat plenty of fiber to support estrogen balance",
            "Schedule important conversations or presentations"
        ]
    },
    CyclePhase.LUTEAL: {
        "title": "Luteal Phase",
        "description": "Progesterone rises and premenstrual symptoms may appear.",
        "tips": [
            "Switch to moderate exercise like yoga or walking",
            "Eat complex carbs and magnesium-rich foods",
            "Prioritize sleep and wind down earlier",
            "Be gentle with yourself if your mood dips"
        ]
    },
    CyclePhase.UNKNOWN: {
        "title": "Keep Tracking",
        "description": "Log a few periods to unlock phase predictions.",
        "tips": [
            "Mark the first day of every period",
            "Mark the last day so period length can be estimated",
            "Log mood and energy daily to spot patterns",
            "Two logged periods are enough for a first prediction"
        ]
    }
}
