"""Layout pass: turns the available bounds into a DialGeometry.

All rings are concentric squares inset from the largest square that fits in
the content box, in multiples of the base stroke width (1% of the smaller
content side).
"""
import logging

from dialtimer.config import (
    BASE_STROKE_WIDTH_PERCENTAGE,
    IGNORE_RADIUS_DIVISOR,
    RING1_INSET,
    RING2_INSET,
    RING3_INSET,
)
from dialtimer.models.entities import DialGeometry, Point

logger = logging.getLogger(__name__)


def compute_layout(
    width: float,
    height: float,
    padding_left: float = 0.0,
    padding_top: float = 0.0,
    padding_right: float = 0.0,
    padding_bottom: float = 0.0,
) -> DialGeometry:
    """Compute center, radii and ignore radius for a view of the given size.

    The center is the center of the whole view, padding included.
    """
    content_width = width - padding_left - padding_right
    content_height = height - padding_top - padding_bottom
    base_size = min(content_width, content_height)
    if base_size <= 0:
        raise ValueError(
            f"Dial needs a positive content area, got {content_width}x{content_height}"
        )

    stroke = BASE_STROKE_WIDTH_PERCENTAGE * base_size
    # The minutes square keeps half a stroke clear on every side
    minutes_radius = (base_size - stroke) / 2
    ring3_radius = minutes_radius - RING3_INSET * stroke

    geometry = DialGeometry(
        center=Point(width / 2, height / 2),
        ignore_radius=ring3_radius / IGNORE_RADIUS_DIVISOR,
        minutes_radius=minutes_radius,
        ring1_radius=minutes_radius - RING1_INSET * stroke,
        ring2_radius=minutes_radius - RING2_INSET * stroke,
        ring3_radius=ring3_radius,
        base_stroke_width=stroke,
    )
    logger.debug(f"Layout {width}x{height}: {geometry}")
    return geometry
