"""Pointer tracking state machine for the duration dial.

The controller turns raw pointer positions into an accumulated rotation
angle. It is framework-agnostic: a view feeds it pointer events and reads
back the angle, while haptics and duration observers are injected.

States:
    Idle      - no pointer down, self._session is None
    Dragging  - a DragSession holds the last raw angle seen and the last
                minute tick that produced a pulse
"""
import logging
from typing import Optional

from dialtimer.config import (
    FULL_TURN_DEGREES,
    MIN_ANGLE_REQUIRED,
    QUARTER_TURN_DEGREES,
)
from dialtimer.events import DialEvent, EventBus, event_bus
from dialtimer.models.entities import DialGeometry, DragSession, Point, PointerAction
from dialtimer.services.geometry import (
    is_inside_ignore_zone,
    quantize_angle,
    raw_angle_from_point,
)
from dialtimer.services.haptics import HapticCapability, HapticCoordinator, NullHaptics
from dialtimer.services.notifier import ChangeNotifier, ChangeObserver
from dialtimer.services.time_converter import TimeConverter

logger = logging.getLogger(__name__)


def in_first_quadrant(angle: int) -> bool:
    return 0 <= angle <= QUARTER_TURN_DEGREES


def in_fourth_quadrant(angle: int) -> bool:
    return FULL_TURN_DEGREES - QUARTER_TURN_DEGREES <= angle <= FULL_TURN_DEGREES


def angle_delta(last: int, current: int) -> int:
    """Signed rotation from last to current raw angle.

    Only the two quadrants touching 12 o'clock are treated as a wrap, so a
    drag through 3 or 9 o'clock is never mistaken for crossing the seam.
    """
    if in_first_quadrant(last) and in_fourth_quadrant(current):
        # Counter-clockwise through 12 o'clock
        return -(last + (FULL_TURN_DEGREES - current))
    if in_first_quadrant(current) and in_fourth_quadrant(last):
        # Clockwise through 12 o'clock
        return current + (FULL_TURN_DEGREES - last)
    return current - last


class DialController:
    """Accumulates pointer rotation into a duration.

    Entry points for the host are on_pointer_down/move/up/cancel (or handle()
    with a PointerAction). The current value is exposed as duration and
    accumulated_angle.
    """

    def __init__(
        self,
        geometry: DialGeometry,
        haptics: Optional[HapticCapability] = None,
        on_change: Optional[ChangeObserver] = None,
        max_angle: Optional[int] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        if max_angle is not None and max_angle < MIN_ANGLE_REQUIRED:
            raise ValueError(f"max_angle must be >= {MIN_ANGLE_REQUIRED}, got {max_angle}")

        self._geometry = geometry
        self._haptics = HapticCoordinator(haptics or NullHaptics())
        self._notifier = ChangeNotifier(on_change)
        self._max_angle = max_angle
        self._bus = bus or event_bus

        self._angle: int = MIN_ANGLE_REQUIRED
        self._duration: int = TimeConverter.to_duration(self._angle)
        self._session: Optional[DragSession] = None

    # ------------------------------------------------------------------
    # Configuration and accessors
    # ------------------------------------------------------------------

    @property
    def geometry(self) -> DialGeometry:
        return self._geometry

    def configure(self, geometry: DialGeometry) -> None:
        """Replace center/radii after the host's bounds changed."""
        self._geometry = geometry
        self._bus.emit(DialEvent.REDRAW_REQUESTED, self)

    @property
    def max_angle(self) -> Optional[int]:
        """Ceiling for the accumulated angle, or None for unbounded."""
        return self._max_angle

    @property
    def haptics(self) -> HapticCapability:
        return self._haptics.capability

    def set_on_change(self, callback: Optional[ChangeObserver]) -> None:
        self._notifier.set_observer(callback)

    @property
    def accumulated_angle(self) -> int:
        return self._angle

    @property
    def duration(self) -> int:
        """Current duration in seconds."""
        return self._duration

    def set_duration(self, seconds: int) -> None:
        """Set the duration programmatically.

        Redraws the dial but does not call the change observer. The angle is
        truncated to whole degrees, the seconds value is kept as given.
        """
        angle = TimeConverter.to_angle(seconds)
        if self._max_angle is not None and angle > self._max_angle:
            logger.debug(f"set_duration({seconds}) above ceiling, clamping to {self._max_angle} degrees")
            angle = self._max_angle
            seconds = TimeConverter.to_duration(angle)
        self._duration = seconds
        self._angle = angle
        self._bus.emit(DialEvent.REDRAW_REQUESTED, self)

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def handle(self, action: PointerAction, x: float = 0.0, y: float = 0.0) -> None:
        """Dispatch a pointer event by kind."""
        if action is PointerAction.DOWN:
            self.on_pointer_down(x, y)
        elif action is PointerAction.MOVE:
            self.on_pointer_move(x, y)
        elif action is PointerAction.UP:
            self.on_pointer_up()
        elif action is PointerAction.CANCEL:
            self.on_pointer_cancel()

    def on_pointer_down(self, x: float, y: float) -> None:
        raw = self._touch_angle(x, y)
        if raw is None:
            # A new touch at the center ends any drag the host never closed
            self._end_drag(committed=False)
            return
        self._session = DragSession(last_raw_angle=raw)
        logger.debug(f"Drag started at {raw} degrees")
        self._bus.emit(DialEvent.DRAG_STARTED, self)

    def on_pointer_move(self, x: float, y: float) -> None:
        session = self._session
        if session is None:
            return
        current = self._touch_angle(x, y)
        if current is None:
            return

        delta = angle_delta(session.last_raw_angle, current)
        session.last_raw_angle = current

        angle = self._angle + delta
        floored = angle < MIN_ANGLE_REQUIRED
        if floored:
            angle = MIN_ANGLE_REQUIRED
        elif self._max_angle is not None and angle > self._max_angle:
            angle = self._max_angle
        self._angle = angle
        self._duration = TimeConverter.to_duration(angle)

        # No feedback on the move that hit the floor
        if not floored:
            self._haptics.on_angle_changed(angle, session)

        self._bus.emit(DialEvent.REDRAW_REQUESTED, self)
        self._notifier.notify(self._duration)

    def on_pointer_up(self) -> None:
        self._end_drag(committed=True)

    def on_pointer_cancel(self) -> None:
        self._end_drag(committed=False)

    def _end_drag(self, committed: bool) -> None:
        self._haptics.release()
        if self._session is None:
            return
        self._session = None
        logger.debug(f"Drag ended at {self._angle} degrees ({self._duration}s), committed={committed}")
        self._bus.emit(DialEvent.DRAG_ENDED, {"dial": self, "committed": committed})

    def _touch_angle(self, x: float, y: float) -> Optional[int]:
        """Whole-degree touch angle, or None if the touch must be ignored."""
        point = Point(x, y)
        center = self._geometry.center
        if is_inside_ignore_zone(point, center, self._geometry.ignore_radius):
            logger.debug(f"Ignoring touch at ({x:.1f}, {y:.1f}): inside ignore radius")
            return None
        return quantize_angle(raw_angle_from_point(point, center))
