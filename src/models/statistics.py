"""
Cycle statistics model definition.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel

class CycleStatistics(BaseModel):
    """
    Aggregate statistics derived from period boundary events.

    Every field is None when there is not enough history to compute it.
    """
    average_cycle_length: Optional[int] = None
    average_period_duration: Optional[int] = None
    predicted_next_period_date: Optional[date] = None
    predicted_ovulation_date: Optional[date] = None
    fertile_window_start: Optional[date] = None
    fertile_window_end: Optional[date] = None

    @property
    def has_prediction(self) -> bool:
        """Check if a next period date could be predicted."""
        return self.predicted_next_period_date is not None
