"""Demo app: a single dial with the selected duration underneath."""
import logging

import flet as ft

from dialtimer.config import COLORS, HapticsMode, load_settings
from dialtimer.core import build_dial
from dialtimer.events import DialEvent, event_bus
from dialtimer.formatters import TimeFormatter
from dialtimer.logging_config import setup_logging
from dialtimer.services.haptics import HapticCapability, NullHaptics
from dialtimer.ui.components import DialView, FletHaptics

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    settings = load_settings()
    setup_logging(settings)

    page.title = "Dial Timer"
    page.bgcolor = COLORS["bg"]
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.vertical_alignment = ft.MainAxisAlignment.CENTER

    haptics: HapticCapability = (
        FletHaptics(page) if settings.haptics is HapticsMode.ON else NullHaptics()
    )

    duration_text = ft.Text(
        TimeFormatter.seconds_to_display(0), size=32, weight="bold", color=COLORS["indicator"]
    )
    timer_text = ft.Text(TimeFormatter.seconds_to_timer(0), size=14, color=COLORS["text"])

    def show(seconds: int) -> None:
        duration_text.value = TimeFormatter.seconds_to_display(seconds)
        timer_text.value = TimeFormatter.seconds_to_timer(seconds)
        page.update()

    controller = build_dial(settings.size, settings.size, haptics=haptics, on_change=show, settings=settings)
    dial = DialView(controller=controller, size=settings.size)

    def on_drag_ended(data) -> None:
        if data["dial"] is controller and data["committed"]:
            logger.info(f"Duration set to {controller.duration}s")

    event_bus.subscribe(DialEvent.DRAG_ENDED, on_drag_ended)

    def reset(e: ft.ControlEvent) -> None:
        dial.value = 0
        show(dial.value)

    page.add(
        ft.Column(
            [
                dial,
                duration_text,
                timer_text,
                ft.TextButton("Reset", on_click=reset),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=8,
        )
    )


def run() -> None:
    ft.run(main)
