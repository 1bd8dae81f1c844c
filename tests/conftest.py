"""Shared fixtures for dial tests."""
from typing import List, Tuple

import pytest

from dialtimer.events import DialEvent, event_bus
from dialtimer.models.entities import DialGeometry, Point
from dialtimer.services.dial import DialController
from dialtimer.services.geometry import point_on_circle

CENTER = Point(100.0, 100.0)
RADIUS = 80.0


class FakeHaptics:
    """Records pulse/cancel calls instead of vibrating."""

    def __init__(self, available: bool = True):
        self.available = available
        self.pulses: List[int] = []
        self.cancels = 0

    def is_available(self) -> bool:
        return self.available

    def pulse(self, duration_ms: int) -> None:
        self.pulses.append(duration_ms)

    def cancel(self) -> None:
        self.cancels += 1


class RecordingObserver:
    """Collects every duration passed to it."""

    def __init__(self):
        self.calls: List[int] = []

    def __call__(self, seconds: int) -> None:
        self.calls.append(seconds)


class EventCollector:
    """Subscribe to dial events and record them for assertions."""

    def __init__(self, *events: DialEvent):
        self.received: List[Tuple[DialEvent, object]] = []
        self._subs = [
            event_bus.subscribe(ev, lambda data, _ev=ev: self.received.append((_ev, data)))
            for ev in events
        ]

    def count(self, event: DialEvent) -> int:
        return sum(1 for ev, _ in self.received if ev == event)

    def payloads(self, event: DialEvent) -> list:
        return [data for ev, data in self.received if ev == event]

    def cleanup(self):
        for sub in self._subs:
            sub.unsubscribe()


def edge(angle_from_noon: float, radius: float = RADIUS) -> Tuple[float, float]:
    """Screen point on the dial, angle measured clockwise from 12 o'clock."""
    p = point_on_circle(radius, CENTER, angle_from_noon - 90)
    return p.x, p.y


@pytest.fixture(autouse=True)
def clean_event_bus():
    event_bus.clear()
    yield
    event_bus.clear()


@pytest.fixture
def geometry() -> DialGeometry:
    return DialGeometry(center=CENTER, ignore_radius=10.0)


@pytest.fixture
def haptics() -> FakeHaptics:
    return FakeHaptics()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def dial(geometry: DialGeometry, haptics: FakeHaptics, observer: RecordingObserver) -> DialController:
    return DialController(geometry, haptics=haptics, on_change=observer)
