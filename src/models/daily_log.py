"""
Daily wellbeing log model.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

class DailyLog(BaseModel):
    """
    Mood, energy and symptom tags recorded for a single day.

    Symptom order is kept as entered; it decides ties when ranking symptoms.
    """
    date: date
    mood: Optional[int] = Field(None, ge=1, le=5)
    energy: Optional[int] = Field(None, ge=1, le=5)
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    id: Optional[str] = None
    user_id: Optional[str] = None
