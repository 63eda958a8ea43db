"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases, plus UNKNOWN when there is not enough history.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"
    UNKNOWN = "unknown"

class CyclePhaseInfo(BaseModel):
    """
    Where today falls in the current cycle.
    """
    phase: CyclePhase = CyclePhase.UNKNOWN
    day_of_cycle: Optional[int] = Field(None, ge=1)
    days_until_next_period: Optional[int] = None  # negative when overdue

    @property
    def is_overdue(self) -> bool:
        """Check if the predicted period date has already passed."""
        return self.days_until_next_period is not None and self.days_until_next_period < 0

class PhaseTips(BaseModel):
    """
    Health tips shown for a phase.
    """
    title: str
    description: str
    tips: List[str]
