"""Pydantic models for points on the 24-hour sleep dial"""
from datetime import time
import math

from pydantic import BaseModel, ConfigDict, Field

MINUTES_PER_DAY = 24 * 60


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (builtin round() is banker's rounding)"""
    return math.floor(value + 0.5)


class ClockTime(BaseModel):
    """A point on the 24-hour dial, e.g. bedtime or wake time"""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    @classmethod
    def from_minutes(cls, minutes: int) -> "ClockTime":
        """Build a ClockTime from minutes since midnight, wrapping around the day"""
        minutes = minutes % MINUTES_PER_DAY
        return cls(hour=minutes // 60, minute=minutes % 60)

    @classmethod
    def parse(cls, value: str) -> "ClockTime":
        """Parse 'HH:MM' (24-hour)"""
        parsed = time.fromisoformat(value)
        return cls(hour=parsed.hour, minute=parsed.minute)

    @classmethod
    def from_time(cls, value: time) -> "ClockTime":
        return cls(hour=value.hour, minute=value.minute)

    def to_time(self) -> time:
        return time(self.hour, self.minute)

    def snapped(self, step: int = 5) -> "ClockTime":
        """
        Round the minute to the nearest `step` minutes

        A minute that rounds up to 60 rolls into the next hour, and 23:58
        becomes 00:00. Snapping an already snapped value is a no-op.
        """
        minute = round_half_up(self.minute / step) * step
        if minute == 60:
            return ClockTime(hour=(self.hour + 1) % 24, minute=0)
        return ClockTime(hour=self.hour, minute=minute)

    def format_12h(self) -> str:
        """Format as '10:05 PM' the way the check-in cards show it"""
        period = "PM" if self.hour >= 12 else "AM"
        display_hour = self.hour % 12 or 12
        return f"{display_hour}:{self.minute:02d} {period}"

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class SleepDuration(BaseModel):
    """Time between bedtime and wake time"""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(ge=0, le=23)
    minutes: int = Field(ge=0, le=59)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def format(self) -> str:
        return f"{self.hours}h {self.minutes}m"


def sleep_duration(bedtime: ClockTime, wake_time: ClockTime) -> SleepDuration:
    """
    Duration from bedtime forward to wake time

    Wraps past midnight, so 23:00 -> 07:00 is 8h 0m and 07:00 -> 23:00 is
    16h 0m. Equal times give 0h 0m.
    """
    minutes = (wake_time.total_minutes - bedtime.total_minutes) % MINUTES_PER_DAY
    return SleepDuration(hours=minutes // 60, minutes=minutes % 60)
