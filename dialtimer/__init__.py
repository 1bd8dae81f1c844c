"""Circular duration dial: drag around a ring to set a time, one minute per 6 degrees."""
from dialtimer.core import build_dial
from dialtimer.models.entities import DialGeometry, Point, PointerAction
from dialtimer.services.dial import DialController

__version__ = "0.1.0"

__all__ = ["DialController", "DialGeometry", "Point", "PointerAction", "build_dial"]
