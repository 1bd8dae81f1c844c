"""Dial configuration - single source of truth for all constants.

Contains the angle/time constants, haptic timing, colors and layout ratios used
by the dial. Import from here instead of hardcoding values elsewhere.
"""
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent / ".env")


class HapticsMode(Enum):
    """Whether the dial should try to vibrate on minute boundaries."""
    ON = "on"
    OFF = "off"


# Angle and time
MIN_ANGLE_REQUIRED = -90  # 12 o'clock, zero seconds
MINUTE_STEP_DEGREES = 6
SECONDS_PER_DEGREE = 10
FULL_TURN_DEGREES = 360
QUARTER_TURN_DEGREES = 90

# Haptics
HAPTIC_PULSE_MS = 50

# Face
MINUTE_TICKS = 60
LABEL_EVERY_TICKS = 15
# Labels as they appear going clockwise from 6 o'clock
FACE_LABELS = [30, 45, 60, 15]
INDICATOR_INNER_RATIO = 0.85
INDICATOR_OUTER_RATIO = 0.95

# Layout, as ratios of the smaller content side
BASE_STROKE_WIDTH_PERCENTAGE = 0.01
RING1_INSET = 4
RING2_INSET = 8
RING3_INSET = 10
IGNORE_RADIUS_DIVISOR = 4
LABEL_STROKE_RATIO = 0.3
LIGHT_TICK_STROKE_RATIO = 0.8
LABEL_FONT_SIZE = 14

DEFAULT_DIAL_SIZE = 320

COLORS = {
    "bg": "#ffffff",
    "tick_strong": "#a4a4a4",
    "tick_light": "#bbbbbb",
    "label": "#8a8a8a",
    "ring_outer": "#ffffff",
    "ring_inner": "#eaeaea",
    "indicator": "#1585d8",
    "shadow": "#000000",
    "text": "#333333",
}


@dataclass(frozen=True)
class DialSettings:
    """Runtime settings read from the environment (and .env)."""
    log_level: str = "INFO"
    max_angle: Optional[int] = None
    haptics: HapticsMode = HapticsMode.ON
    size: int = DEFAULT_DIAL_SIZE
    log_file: Optional[str] = None


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> DialSettings:
    """Build DialSettings from DIALTIMER_* environment variables."""
    haptics_raw = os.getenv("DIALTIMER_HAPTICS", HapticsMode.ON.value).strip().lower()
    try:
        haptics = HapticsMode(haptics_raw)
    except ValueError as e:
        raise ValueError(f"DIALTIMER_HAPTICS must be 'on' or 'off', got {haptics_raw!r}") from e

    size = _optional_int("DIALTIMER_SIZE")
    return DialSettings(
        log_level=os.getenv("DIALTIMER_LOG_LEVEL", "INFO").upper(),
        max_angle=_optional_int("DIALTIMER_MAX_ANGLE"),
        haptics=haptics,
        size=size if size is not None else DEFAULT_DIAL_SIZE,
        log_file=os.getenv("DIALTIMER_LOG_FILE", "").strip() or None,
    )
