"""
Wellbeing trend models.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

class MoodTrend(str, Enum):
    """Direction of mood over the trailing 30 days."""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"

class SymptomCount(BaseModel):
    """A symptom tag and how many logs mention it."""
    symptom: str
    count: int

class TrendSummary(BaseModel):
    """
    Mood, energy and symptom aggregates over trailing windows.
    """
    avg_mood_7d: Optional[float] = None
    avg_energy_7d: Optional[float] = None
    avg_mood_30d: Optional[float] = None
    avg_energy_30d: Optional[float] = None
    top_symptoms: List[SymptomCount] = Field(default_factory=list)
    mood_trend: Optional[MoodTrend] = None
    logs_7d: int = 0
    logs_30d: int = 0
