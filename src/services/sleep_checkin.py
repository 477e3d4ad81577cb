"""
SleepCheckInSession - owner of the sleep step of the morning check-in

Holds the bedtime and wake-time values, wires the circular selector to
them, and produces the summary forwarded to the completion screen. Values
live only for the session; nothing is persisted.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from src import config
from src.exceptions import ValidationError
from src.handlers.sleep_dial import CircularTimeSelector, HapticFeedback
from src.models.clock import ClockTime, SleepDuration, sleep_duration
from src.models.sleep import SleepSummary
from src.utils.dial_geometry import DialGeometry, Point

logger = logging.getLogger(__name__)


def default_bedtime() -> ClockTime:
    return ClockTime.parse(config.DEFAULT_BEDTIME)


def default_wake_time() -> ClockTime:
    return ClockTime.parse(config.DEFAULT_WAKE_TIME)


class SleepCheckInSession:
    """
    Owns the two dial values for one check-in.

    The selector proposes values through callbacks; the session stores them
    and pushes them back into the selector.
    """

    def __init__(
        self,
        bedtime: Optional[ClockTime] = None,
        wake_time: Optional[ClockTime] = None,
        geometry: Optional[DialGeometry] = None,
        haptics: Optional[HapticFeedback] = None,
    ):
        self.bedtime = bedtime or default_bedtime()
        self.wake_time = wake_time or default_wake_time()
        self.adjustments = 0
        self.summary: Optional[SleepSummary] = None
        self.selector = CircularTimeSelector(
            bedtime=self.bedtime,
            wake_time=self.wake_time,
            on_bedtime_change=self.set_bedtime,
            on_wake_time_change=self.set_wake_time,
            haptics=haptics,
            geometry=geometry,
        )

    def set_bedtime(self, value: ClockTime) -> None:
        self.bedtime = value
        self.adjustments += 1
        self.selector.sync(self.bedtime, self.wake_time)

    def set_wake_time(self, value: ClockTime) -> None:
        self.wake_time = value
        self.adjustments += 1
        self.selector.sync(self.bedtime, self.wake_time)

    # Gesture passthrough for the screen's touch responder; the dial is
    # frozen once the summary has been handed on

    def touch_start(self, x: float, y: float):
        if self.summary is not None:
            logger.debug("Touch ignored, sleep check-in already completed")
            return None
        return self.selector.touch_start(Point(x, y))

    def touch_move(self, x: float, y: float):
        if self.summary is not None:
            return None
        return self.selector.touch_move(Point(x, y))

    def touch_end(self) -> None:
        self.selector.touch_end()

    @property
    def scroll_enabled(self) -> bool:
        """Page scrolling is locked while a handle is being dragged"""
        return self.selector.active_handle is None

    @property
    def duration(self) -> SleepDuration:
        return sleep_duration(self.bedtime, self.wake_time)

    def complete(self) -> SleepSummary:
        """Finish the sleep step and build the summary for the next screen"""
        if self.summary is not None:
            raise ValidationError(
                message="Sleep check-in already completed",
                field="session",
                operation="complete_sleep_checkin",
            )

        self.selector.touch_end()
        duration = self.duration
        self.summary = SleepSummary(
            bedtime=self.bedtime,
            wake_time=self.wake_time,
            duration=duration,
            bedtime_display=self.bedtime.format_12h(),
            wake_time_display=self.wake_time.format_12h(),
            duration_display=duration.format(),
            adjustments=self.adjustments,
            completed_at=datetime.now(timezone.utc),
        )
        logger.info(
            f"Sleep check-in completed: {self.bedtime} -> {self.wake_time} "
            f"({duration.format()}, {self.adjustments} adjustments)"
        )
        return self.summary
