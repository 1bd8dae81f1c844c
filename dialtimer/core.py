"""Headless construction of a dial controller.

Builds a DialController from settings without any Flet dependency, for
scripts, other toolkits and tests.

Usage:
    from dialtimer.core import build_dial

    dial = build_dial(320, 320, on_change=print)
    dial.on_pointer_down(160, 10)
    dial.on_pointer_move(310, 160)
    dial.on_pointer_up()
"""
import logging
from typing import Optional

from dialtimer.config import DialSettings, HapticsMode, load_settings
from dialtimer.services.dial import DialController
from dialtimer.services.haptics import HapticCapability, NullHaptics
from dialtimer.services.layout import compute_layout
from dialtimer.services.notifier import ChangeObserver

logger = logging.getLogger(__name__)


def build_dial(
    width: float,
    height: float,
    haptics: Optional[HapticCapability] = None,
    on_change: Optional[ChangeObserver] = None,
    settings: Optional[DialSettings] = None,
) -> DialController:
    """Lay out a dial of the given size and return its controller.

    Args:
        width: View width in pixels.
        height: View height in pixels.
        haptics: Vibration backend. Replaced by NullHaptics when settings
            disable haptics.
        on_change: Observer called with the duration in seconds.
        settings: Defaults to load_settings().
    """
    if settings is None:
        settings = load_settings()
    if settings.haptics is HapticsMode.OFF or haptics is None:
        haptics = NullHaptics()

    if settings.max_angle is None:
        logger.debug("Dial has no upper bound; set DIALTIMER_MAX_ANGLE to cap it")

    return DialController(
        compute_layout(width, height),
        haptics=haptics,
        on_change=on_change,
        max_angle=settings.max_angle,
    )
