"""
Event model definition for period boundary events.
"""
from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel

class EventKind(str, Enum):
    """
    Boundary markers a user can log for a period.
    """
    PERIOD_START = "period_start"
    PERIOD_END = "period_end"

class CycleEvent(BaseModel):
    """
    Represents a logged period start or end on a calendar date.

    ``id`` and ``user_id`` are assigned by the store and ignored by the
    cycle calculations.
    """
    date: date
    kind: EventKind
    notes: Optional[str] = None
    id: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def is_start(self) -> bool:
        """Check if this event marks the first day of a period."""
        return self.kind == EventKind.PERIOD_START

    @property
    def is_end(self) -> bool:
        """Check if this event marks the last day of a period."""
        return self.kind == EventKind.PERIOD_END
