"""
Calendar cell model.
"""
from datetime import date
from pydantic import BaseModel

class DayStatus(BaseModel):
    """
    Flags used to render a single calendar day.
    """
    date: date
    is_period: bool = False
    has_start: bool = False
    has_end: bool = False
    has_notes: bool = False
    is_fertile: bool = False
    is_ovulation: bool = False
    is_today: bool = False
    in_current_month: bool = True
