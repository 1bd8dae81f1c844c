"""Event bus for view-level dial events.

Duration changes go through the controller's single-slot ChangeNotifier.
Everything a view or host may want to react to besides that (drag start/end,
redraw requests) is published here, with the emitting DialController in the
payload so a view can ignore other dials.
"""
from enum import Enum, auto
from itertools import count
from typing import Callable, Dict, Any, Optional
import inspect
import logging
import threading
import weakref

logger = logging.getLogger(__name__)


class DialEvent(Enum):
    """Events emitted by DialController instances."""
    DRAG_STARTED = auto()
    DRAG_ENDED = auto()
    REDRAW_REQUESTED = auto()


class Subscription:
    """Handle returned by EventBus.subscribe()."""

    def __init__(self, bus: "EventBus", event: DialEvent, subscription_id: int):
        self._bus = bus
        self._event = event
        self._subscription_id = subscription_id
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if self._active:
            self._bus._remove(self._event, self._subscription_id)
            self._active = False


def _make_ref(callback: Callable[[Any], None], on_dead: Callable[[Any], None]) -> Callable[[], Optional[Callable[[Any], None]]]:
    """Weak reference for bound methods, strong for everything else.

    A DialView subscribes its own method, so dropping the view drops the
    subscription. Functions and lambdas stay until unsubscribed.
    """
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback, on_dead)
    return lambda: callback


class EventBus:
    """Process-wide event bus."""
    _instance: Optional["EventBus"] = None
    _instance_lock = threading.Lock()

    def __new__(cls) -> "EventBus":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._listeners: Dict[DialEvent, Dict[int, Callable]] = {}
                    cls._instance._ids = count(1)
        return cls._instance

    def subscribe(self, event: DialEvent, callback: Callable[[Any], None]) -> Subscription:
        """Subscribe callback to event.

        Example:
            self._sub = event_bus.subscribe(DialEvent.REDRAW_REQUESTED, self._on_redraw)
        """
        subscription_id = next(self._ids)

        def on_dead(_ref) -> None:
            logger.debug(f"EventBus: {event.name} subscriber {subscription_id} was garbage collected")
            self._remove(event, subscription_id)

        self._listeners.setdefault(event, {})[subscription_id] = _make_ref(callback, on_dead)
        return Subscription(self, event, subscription_id)

    def _remove(self, event: DialEvent, subscription_id: int) -> None:
        if event in self._listeners:
            self._listeners[event].pop(subscription_id, None)

    def emit(self, event: DialEvent, data: Any = None) -> None:
        """Call every live subscriber of event with data.

        A subscriber that raises is logged and skipped; the rest still run.
        """
        for sub_id, ref in list(self._listeners.get(event, {}).items()):
            callback = ref()
            if callback is None:
                self._remove(event, sub_id)
                continue
            try:
                callback(data)
            except Exception:
                logger.exception(f"Error in event handler for {event.name}")

    def subscriber_count(self, event: DialEvent) -> int:
        return len(self._listeners.get(event, {}))

    def clear(self) -> None:
        """Drop all subscriptions. Used between tests."""
        self._listeners.clear()


event_bus = EventBus()
