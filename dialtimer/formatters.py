"""Time formatting for the duration shown next to the dial.

Converts seconds to human-readable formats like "15 min", "1h 30m" or "15:00".
"""


class TimeFormatter:
    """Formatting helpers for dial durations."""

    @staticmethod
    def seconds_to_display(seconds: int) -> str:
        """Convert seconds to display format like '5 min' or '1h 30m'."""
        minutes = seconds // 60
        if minutes < 60:
            return f"{minutes} min"
        h, m = divmod(minutes, 60)
        return f"{h}h" if m == 0 else f"{h}h {m}m"

    @staticmethod
    def seconds_to_timer(seconds: int) -> str:
        """Convert seconds to timer format like '15:00' or '1:05:30'."""
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
        if hours > 0:
            return f"{hours}:{minutes:02d}:{secs:02d}"
        return f"{minutes:02d}:{secs:02d}"
