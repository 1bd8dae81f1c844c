"""Haptic feedback on minute boundaries.

The dial never touches hardware directly. It talks to a HapticCapability,
which the host supplies: FletHaptics on a real device, NullHaptics when
vibration is disabled or unavailable, or a fake in tests.
"""
import logging
from typing import Protocol

from dialtimer.config import HAPTIC_PULSE_MS, MINUTE_STEP_DEGREES
from dialtimer.models.entities import DragSession

logger = logging.getLogger(__name__)


class HapticCapability(Protocol):
    """What the dial needs from a vibration backend."""

    def is_available(self) -> bool: ...

    def pulse(self, duration_ms: int) -> None: ...

    def cancel(self) -> None: ...


class NullHaptics:
    """Capability for hosts without a vibrator. Every call is a no-op."""

    def is_available(self) -> bool:
        return False

    def pulse(self, duration_ms: int) -> None:
        pass

    def cancel(self) -> None:
        pass


def minute_tick(angle: int) -> int:
    """Minute bucket of an accumulated angle (6 degrees per tick)."""
    return angle // MINUTE_STEP_DEGREES


class HapticCoordinator:
    """Fires one pulse each time the accumulated angle enters a new minute."""

    def __init__(self, capability: HapticCapability, pulse_ms: int = HAPTIC_PULSE_MS) -> None:
        self._capability = capability
        self._pulse_ms = pulse_ms

    @property
    def capability(self) -> HapticCapability:
        return self._capability

    def on_angle_changed(self, angle: int, session: DragSession) -> bool:
        """Pulse if the minute tick moved since the last pulse of this session.

        Returns True when a pulse was requested.
        """
        if not self._capability.is_available():
            return False
        tick = minute_tick(angle)
        if tick == session.last_haptic_tick:
            return False
        self._capability.pulse(self._pulse_ms)
        logger.debug(f"Haptic pulse: tick {session.last_haptic_tick} -> {tick}")
        session.last_haptic_tick = tick
        return True

    def release(self) -> None:
        """Stop any pulse still running. Safe to call repeatedly."""
        self._capability.cancel()
