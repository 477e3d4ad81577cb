"""
Sleep Dial Geometry

Pure math behind the circular bedtime / wake-time selector:
- time <-> angle conversion (0 deg = midnight at 12 o'clock, clockwise)
- touch point -> snapped ClockTime
- handle positions on the track
- the swept arc between bedtime and wake time

Angles come in two flavours. "Dial" angles put 0 at the top of the dial.
"Screen" angles are what atan2(dy, dx) returns for screen coordinates
(0 at 3 o'clock, y growing downward), so dial = screen + 90.
"""

import math
from dataclasses import dataclass

from src import config
from src.models.clock import ClockTime, MINUTES_PER_DAY, round_half_up


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def normalize_angle(degrees: float) -> float:
    """Reduce any finite angle into [0, 360)"""
    normalized = math.fmod(degrees, 360.0)
    if normalized < 0:
        normalized += 360.0
    # fmod of a tiny negative can land exactly on 360 after the add
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def time_to_angle(value: ClockTime) -> float:
    """Dial angle in degrees for a time"""
    return value.total_minutes / MINUTES_PER_DAY * 360.0


def angle_to_time(degrees: float, step: int = config.SNAP_MINUTES) -> ClockTime:
    """Snapped time for a dial angle (0 deg at the top)"""
    total_minutes = normalize_angle(degrees) / 360.0 * MINUTES_PER_DAY
    hour = math.floor(total_minutes / 60) % 24
    raw_minute = round_half_up(math.fmod(total_minutes, 60))
    if raw_minute == 60:
        # float noise just below the hour boundary
        hour, raw_minute = (hour + 1) % 24, 0
    return ClockTime(hour=hour, minute=raw_minute).snapped(step)


def screen_angle_to_time(screen_degrees: float, step: int = config.SNAP_MINUTES) -> ClockTime:
    """Snapped time for an atan2 screen angle (0 deg at 3 o'clock)"""
    return angle_to_time(screen_degrees + 90.0, step)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def sweep_degrees(bedtime: ClockTime, wake_time: ClockTime) -> float:
    """Clockwise travel from bedtime to wake time, in [0, 360)"""
    return normalize_angle(time_to_angle(wake_time) - time_to_angle(bedtime))


def large_arc_flag(bedtime: ClockTime, wake_time: ClockTime) -> int:
    """SVG large-arc flag for the sleep arc"""
    return 1 if sweep_degrees(bedtime, wake_time) > 180 else 0


@dataclass(frozen=True)
class DialGeometry:
    """Fixed pixel layout of the dial"""

    size: float = config.DIAL_SIZE
    stroke_width: float = config.DIAL_STROKE_WIDTH
    margin: float = config.DIAL_MARGIN

    @property
    def center(self) -> Point:
        return Point(self.size / 2, self.size / 2)

    @property
    def radius(self) -> float:
        return (self.size - self.stroke_width - self.margin) / 2

    def _point_at(self, dial_degrees: float, radius: float) -> Point:
        # rotate by -90 so 0 deg renders at the top instead of 3 o'clock
        rad = math.radians(dial_degrees - 90.0)
        center = self.center
        return Point(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))

    def point_for_time(self, value: ClockTime) -> Point:
        """Pixel position of a handle showing `value`"""
        return self._point_at(time_to_angle(value), self.radius)

    def label_position(self, hour: int, inset: float = 28.0) -> Point:
        """Position for an hour label drawn inside the track"""
        label_radius = self.radius - self.stroke_width / 2 - inset
        return self._point_at(hour / 24 * 360.0, label_radius)

    def touch_angle(self, touch: Point) -> float:
        """Screen angle of a touch relative to the dial center"""
        center = self.center
        return math.degrees(math.atan2(touch.y - center.y, touch.x - center.x))

    def touch_to_time(self, touch: Point, step: int = config.SNAP_MINUTES) -> ClockTime:
        return screen_angle_to_time(self.touch_angle(touch), step)

    def arc_path(self, bedtime: ClockTime, wake_time: ClockTime) -> str:
        """SVG path of the sleep arc, drawn clockwise from bedtime to wake time"""
        start = self.point_for_time(bedtime)
        end = self.point_for_time(wake_time)
        flag = large_arc_flag(bedtime, wake_time)
        r = self.radius
        return f"M {start.x} {start.y} A {r} {r} 0 {flag} 1 {end.x} {end.y}"
