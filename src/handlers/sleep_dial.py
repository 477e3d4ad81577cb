"""
Circular bedtime / wake-time selector

Gesture handling for the sleep dial, modelled as a two-state machine:

    Idle --touch_start (within hit box)--> Dragging(handle)
    Dragging --touch_move--> Dragging (same handle)
    Dragging --touch_end--> Idle

The selector is a controlled component: it never stores accepted values on
its own. It reports snapped times through the change callbacks and the
owner pushes its values back with sync().
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Union

from src import config
from src.models.clock import ClockTime, SleepDuration, sleep_duration
from src.utils.dial_geometry import (
    DialGeometry,
    Point,
    distance,
    large_arc_flag,
    sweep_degrees,
)

logger = logging.getLogger(__name__)

TimeCallback = Callable[[ClockTime], None]


class Handle(str, Enum):
    BEDTIME = "bedtime"
    WAKE_TIME = "wake_time"


@dataclass(frozen=True)
class Idle:
    """No gesture in progress"""


@dataclass(frozen=True)
class Dragging:
    """A gesture owns one handle until release"""
    handle: Handle


DialState = Union[Idle, Dragging]


class HapticFeedback(Protocol):
    def impact(self) -> None:
        ...

    def selection(self) -> None:
        ...


class LoggingHaptics:
    """Haptics sink for environments without a vibration motor; counts pulses"""

    def __init__(self):
        self.impacts = 0
        self.selections = 0

    def impact(self) -> None:
        self.impacts += 1
        logger.debug("haptic impact")

    def selection(self) -> None:
        self.selections += 1
        logger.debug("haptic selection")


class CircularTimeSelector:
    """
    Maps touches on the dial to bedtime / wake-time updates.

    Args:
        bedtime: Owner's current bedtime
        wake_time: Owner's current wake time
        on_bedtime_change: Called with each new snapped bedtime
        on_wake_time_change: Called with each new snapped wake time
        haptics: Pulse sink (impact on grab, selection on each new value)
        geometry: Dial layout used for hit-testing and conversion
        hit_box_radius: Max distance from a handle for a touch to grab it
        snap_minutes: Minute granularity of emitted values
    """

    def __init__(
        self,
        bedtime: ClockTime,
        wake_time: ClockTime,
        on_bedtime_change: TimeCallback,
        on_wake_time_change: TimeCallback,
        haptics: Optional[HapticFeedback] = None,
        geometry: Optional[DialGeometry] = None,
        hit_box_radius: float = config.HIT_BOX_RADIUS,
        snap_minutes: int = config.SNAP_MINUTES,
    ):
        self.bedtime = bedtime
        self.wake_time = wake_time
        self._callbacks = {
            Handle.BEDTIME: on_bedtime_change,
            Handle.WAKE_TIME: on_wake_time_change,
        }
        self.haptics = haptics or LoggingHaptics()
        self.geometry = geometry or DialGeometry()
        self.hit_box_radius = hit_box_radius
        self.snap_minutes = snap_minutes
        self.state: DialState = Idle()
        # last value emitted per handle, used to drop repeats during a drag
        self._previous = {Handle.BEDTIME: bedtime, Handle.WAKE_TIME: wake_time}

    @property
    def active_handle(self) -> Optional[Handle]:
        if isinstance(self.state, Dragging):
            return self.state.handle
        return None

    def sync(self, bedtime: ClockTime, wake_time: ClockTime) -> None:
        """Accept the owner's current values"""
        self.bedtime = bedtime
        self.wake_time = wake_time
        if isinstance(self.state, Idle):
            self._previous = {Handle.BEDTIME: bedtime, Handle.WAKE_TIME: wake_time}

    def _current(self, handle: Handle) -> ClockTime:
        return self.bedtime if handle is Handle.BEDTIME else self.wake_time

    def hit_test(self, touch: Point) -> Optional[Handle]:
        """Handle a touch would grab, or None when it misses both"""
        dist_bed = distance(touch, self.geometry.point_for_time(self.bedtime))
        dist_wake = distance(touch, self.geometry.point_for_time(self.wake_time))

        if dist_bed > self.hit_box_radius and dist_wake > self.hit_box_radius:
            return None
        # ties (handles on top of each other) go to wake time
        return Handle.BEDTIME if dist_bed < dist_wake else Handle.WAKE_TIME

    def touch_start(self, touch: Point) -> Optional[Handle]:
        """
        Begin a gesture.

        Picks the nearer handle within the hit box and moves it straight to
        the touched time. Returns the grabbed handle, or None if the touch
        was ignored.
        """
        handle = self.hit_test(touch)
        if handle is None:
            logger.debug(f"Touch at ({touch.x:.1f}, {touch.y:.1f}) outside hit box, ignored")
            return None

        self.state = Dragging(handle)
        value = self.geometry.touch_to_time(touch, self.snap_minutes)
        logger.debug(f"Grabbed {handle.value} handle at {value}")

        self._previous[handle] = value
        self._callbacks[handle](value)
        self.haptics.impact()
        return handle

    def touch_move(self, touch: Point) -> Optional[ClockTime]:
        """
        Drag the active handle.

        Returns the new value when it changed, None when idle or when the
        finger is still inside the same snap bucket.
        """
        handle = self.active_handle
        if handle is None:
            return None

        value = self.geometry.touch_to_time(touch, self.snap_minutes)
        if value == self._previous[handle]:
            return None

        self._previous[handle] = value
        self._callbacks[handle](value)
        self.haptics.selection()
        return value

    def touch_end(self) -> None:
        """Release the active handle"""
        if isinstance(self.state, Dragging):
            logger.debug(f"Released {self.state.handle.value} handle")
        self.state = Idle()

    def sweep(self) -> float:
        return sweep_degrees(self.bedtime, self.wake_time)

    def large_arc(self) -> int:
        return large_arc_flag(self.bedtime, self.wake_time)

    def arc_path(self) -> str:
        return self.geometry.arc_path(self.bedtime, self.wake_time)

    def duration(self) -> SleepDuration:
        return sleep_duration(self.bedtime, self.wake_time)
