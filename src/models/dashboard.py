"""
Dashboard summary model.
"""
from datetime import date
from pydantic import BaseModel

from src.models.phase import CyclePhaseInfo, PhaseTips
from src.models.statistics import CycleStatistics
from src.models.trend import TrendSummary

class DashboardSummary(BaseModel):
    """
    Everything the dashboard shows, recomputed from the raw logs.
    """
    today: date
    statistics: CycleStatistics
    phase: CyclePhaseInfo
    insight: str
    tips: PhaseTips
    trends: TrendSummary
