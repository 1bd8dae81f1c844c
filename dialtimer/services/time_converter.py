"""Conversion between the dial's accumulated angle and a duration in seconds.

-90 degrees is zero seconds and every degree adds 10 seconds, so 6 degrees
is one minute.
"""
from dialtimer.config import MIN_ANGLE_REQUIRED, SECONDS_PER_DEGREE


class TimeConverter:
    """Stateless angle <-> seconds mapping."""

    @staticmethod
    def to_duration(angle: int) -> int:
        """Seconds represented by an accumulated angle."""
        return SECONDS_PER_DEGREE * (angle - MIN_ANGLE_REQUIRED)

    @staticmethod
    def to_angle(seconds: int) -> int:
        """Accumulated angle for a duration, truncating partial degrees.

        Only exact for multiples of 10 seconds: to_angle(905) == to_angle(900).
        """
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        return int(seconds) // SECONDS_PER_DEGREE + MIN_ANGLE_REQUIRED
