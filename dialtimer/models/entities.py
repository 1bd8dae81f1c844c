"""Value types shared by the dial services and the UI layer."""
from dataclasses import dataclass
from enum import Enum


class PointerAction(Enum):
    """Kinds of pointer events the host delivers to the dial."""
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Point:
    """Cartesian coordinate in view space (y grows downward)."""
    x: float
    y: float


@dataclass(frozen=True)
class DialGeometry:
    """Center and radii supplied by the layout pass.

    The controller only reads center and ignore_radius; the radii and stroke
    width are carried along for the face builder.
    """
    center: Point
    ignore_radius: float = 0.0
    minutes_radius: float = 0.0
    ring1_radius: float = 0.0
    ring2_radius: float = 0.0
    ring3_radius: float = 0.0
    base_stroke_width: float = 0.0

    def __post_init__(self) -> None:
        if self.ignore_radius < 0:
            raise ValueError(f"ignore_radius must be >= 0, got {self.ignore_radius}")


@dataclass
class DragSession:
    """State that only exists while a pointer is down on the dial."""
    last_raw_angle: int
    last_haptic_tick: int = 0
