"""Coordinate math for the dial: polar points, touch angles and the ignore zone.

Angles handed to point_on_circle use the screen convention (0 degrees at
3 o'clock, clockwise because y grows downward). Angles coming out of
raw_angle_from_point are rotated a quarter turn so 0 degrees is 12 o'clock.
"""
import math
from typing import Optional

from dialtimer.config import FULL_TURN_DEGREES
from dialtimer.models.entities import Point


def point_on_circle(radius: float, center: Point, angle_degrees: float) -> Point:
    """Point at radius from center, angle_degrees clockwise from 3 o'clock."""
    angle = math.radians(angle_degrees)
    return Point(
        x=center.x + radius * math.cos(angle),
        y=center.y + radius * math.sin(angle),
    )


def raw_angle_from_point(point: Point, center: Point) -> float:
    """Angle of point around center in [0, 360), 0 at 12 o'clock, clockwise."""
    dx = point.x - center.x
    dy = point.y - center.y
    angle = math.degrees(math.atan2(dy, dx) + math.pi / 2)
    if angle < 0:
        angle += FULL_TURN_DEGREES
    return angle


def is_inside_ignore_zone(point: Point, center: Point, ignore_radius: float) -> bool:
    """True when point is too close to center for a stable angle reading."""
    return math.hypot(point.x - center.x, point.y - center.y) < ignore_radius


def quantize_angle(angle: float) -> Optional[int]:
    """Round a raw angle to whole degrees, or None if it is out of range.

    Rounds half up, so 359.5 becomes 360 (still inside the 4th quadrant band).
    """
    degrees = math.floor(angle + 0.5)
    if degrees < 0 or degrees > FULL_TURN_DEGREES:
        return None
    return degrees
