"""Pydantic models for the morning sleep check-in"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from src.models.clock import ClockTime, SleepDuration


class SleepSummary(BaseModel):
    """Result of the sleep step, handed to the check-in completion screen"""

    model_config = ConfigDict(frozen=True)

    bedtime: ClockTime
    wake_time: ClockTime
    duration: SleepDuration
    bedtime_display: str  # "10:30 PM"
    wake_time_display: str
    duration_display: str  # "8h 15m"
    adjustments: int = Field(ge=0)  # accepted dial updates during the session
    completed_at: datetime
