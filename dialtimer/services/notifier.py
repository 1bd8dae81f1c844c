import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

ChangeObserver = Callable[[int], None]


class ChangeNotifier:
    """Single-slot publisher for duration changes.

    Setting a new observer replaces the old one. Observers are called
    synchronously from the pointer event that produced the change.
    """

    def __init__(self, observer: Optional[ChangeObserver] = None) -> None:
        self._observer = observer

    @property
    def observer(self) -> Optional[ChangeObserver]:
        return self._observer

    def set_observer(self, observer: Optional[ChangeObserver]) -> None:
        self._observer = observer

    def clear_observer(self) -> None:
        self._observer = None

    def notify(self, duration: int) -> None:
        if self._observer is None:
            logger.debug(f"No observer registered, dropping duration {duration}s")
            return
        self._observer(duration)
