"""Flet binding for the duration dial - drag around the ring to set a time.

The view owns no dial logic. Pan gestures are forwarded to a DialController,
and the canvas is rebuilt from build_dial_face() whenever the controller
emits REDRAW_REQUESTED.
"""
import logging
from typing import Any, List, Optional

import flet as ft
import flet.canvas as cv

from dialtimer.config import COLORS, DEFAULT_DIAL_SIZE, LABEL_FONT_SIZE
from dialtimer.events import DialEvent, event_bus
from dialtimer.services.dial import DialController
from dialtimer.services.haptics import HapticCapability
from dialtimer.services.layout import compute_layout
from dialtimer.services.notifier import ChangeObserver
from dialtimer.ui.face import DialFace, Segment, build_dial_face

logger = logging.getLogger(__name__)

SHADOW_OFFSET_Y = 2.0
SHADOW_OPACITY = 0.15


class FletHaptics:
    """HapticCapability backed by Flet's HapticFeedback service.

    Flet only exposes a fixed-length vibration, so the requested pulse length
    is not forwarded, and there is no way to stop a running one.
    """

    def __init__(self, page: ft.Page) -> None:
        self._page = page
        # Service auto-registers with the current page
        self._feedback = ft.HapticFeedback()

    def is_available(self) -> bool:
        return self._page.platform in (ft.PagePlatform.ANDROID, ft.PagePlatform.IOS)

    def pulse(self, duration_ms: int) -> None:
        self._page.run_task(self._feedback.vibrate)

    def cancel(self) -> None:
        pass


class DialView(ft.Container):
    """Circular duration selector drawn on a canvas.

    Either pass an existing controller or let the view build one sized to
    the widget.
    """

    def __init__(
        self,
        controller: Optional[DialController] = None,
        haptics: Optional[HapticCapability] = None,
        on_change: Optional[ChangeObserver] = None,
        size: int = DEFAULT_DIAL_SIZE,
        max_angle: Optional[int] = None,
    ) -> None:
        super().__init__(width=size, height=size, bgcolor=COLORS["bg"])
        self._mounted = False
        self._controller = controller or DialController(
            compute_layout(size, size),
            haptics=haptics,
            on_change=on_change,
            max_angle=max_angle,
        )
        self._canvas = cv.Canvas(width=size, height=size, shapes=self._build_shapes())
        self.content = ft.GestureDetector(
            content=self._canvas,
            on_pan_start=self._on_pan_start,
            on_pan_update=self._on_pan_update,
            on_pan_end=self._on_pan_end,
        )
        self._redraw_sub = event_bus.subscribe(DialEvent.REDRAW_REQUESTED, self._on_redraw)

    @property
    def controller(self) -> DialController:
        return self._controller

    @property
    def canvas(self) -> cv.Canvas:
        return self._canvas

    @property
    def value(self) -> int:
        """Current duration in seconds."""
        return self._controller.duration

    @value.setter
    def value(self, seconds: int) -> None:
        self._controller.set_duration(seconds)

    def resize(self, size: int) -> None:
        """Re-run layout for a new widget size."""
        self.width = self.height = size
        self._canvas.width = self._canvas.height = size
        logger.debug(f"Dial resized to {size}px")
        self._controller.configure(compute_layout(size, size))
        if self._mounted:
            self.update()

    def did_mount(self) -> None:
        self._mounted = True

    def will_unmount(self) -> None:
        self._mounted = False
        self._controller.on_pointer_cancel()

    # Gestures

    def _on_pan_start(self, e: ft.DragStartEvent) -> None:
        self._controller.on_pointer_down(e.local_position.x, e.local_position.y)

    def _on_pan_update(self, e: ft.DragUpdateEvent) -> None:
        self._controller.on_pointer_move(e.local_position.x, e.local_position.y)

    def _on_pan_end(self, e: ft.DragEndEvent) -> None:
        self._controller.on_pointer_up()

    # Drawing

    def _on_redraw(self, data: Any) -> None:
        if data is not self._controller:
            return
        self._canvas.shapes = self._build_shapes()
        if self._mounted:
            self._canvas.update()

    def _build_shapes(self) -> List[cv.Shape]:
        face = build_dial_face(self._controller.geometry, self._controller.accumulated_angle)
        return self._face_to_shapes(face)

    @staticmethod
    def _line(segment: Segment) -> cv.Line:
        return cv.Line(
            segment.start.x, segment.start.y, segment.end.x, segment.end.y,
            paint=ft.Paint(
                stroke_width=segment.stroke_width,
                color=segment.color,
                stroke_cap=ft.StrokeCap.ROUND,
            ),
        )

    def _face_to_shapes(self, face: DialFace) -> List[cv.Shape]:
        shapes: List[cv.Shape] = [self._line(tick) for tick in face.ticks]

        for label in face.labels:
            shapes.append(cv.Text(
                label.position.x,
                label.position.y,
                label.text,
                style=ft.TextStyle(size=LABEL_FONT_SIZE, color=label.color),
                alignment=ft.Alignment.CENTER,
            ))

        for disc in face.discs:
            if disc.shadow:
                shapes.append(cv.Circle(
                    disc.center.x,
                    disc.center.y + SHADOW_OFFSET_Y,
                    disc.radius + disc.stroke_width / 2,
                    paint=ft.Paint(
                        color=ft.Colors.with_opacity(SHADOW_OPACITY, COLORS["shadow"]),
                        style=ft.PaintingStyle.FILL,
                    ),
                ))
            shapes.append(cv.Circle(
                disc.center.x,
                disc.center.y,
                disc.radius,
                paint=ft.Paint(color=disc.color, style=ft.PaintingStyle.FILL),
            ))

        shapes.append(self._line(face.indicator))
        return shapes
