"""Drawable geometry of the dial face.

build_dial_face() is pure: it only reads the layout and the accumulated
angle, so the view can redraw from it and tests can inspect it without Flet.
Draw order is ticks, labels, rings, indicator.
"""
import math
from dataclasses import dataclass
from typing import List

from dialtimer.config import (
    COLORS,
    FACE_LABELS,
    INDICATOR_INNER_RATIO,
    INDICATOR_OUTER_RATIO,
    LABEL_EVERY_TICKS,
    LABEL_STROKE_RATIO,
    LIGHT_TICK_STROKE_RATIO,
    MINUTE_STEP_DEGREES,
    MINUTE_TICKS,
)
from dialtimer.models.entities import DialGeometry, Point
from dialtimer.services.geometry import point_on_circle


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    stroke_width: float
    color: str


@dataclass(frozen=True)
class Label:
    position: Point
    text: str
    stroke_width: float
    color: str


@dataclass(frozen=True)
class Disc:
    center: Point
    radius: float
    stroke_width: float
    color: str
    shadow: bool = False


@dataclass(frozen=True)
class DialFace:
    ticks: List[Segment]
    labels: List[Label]
    discs: List[Disc]
    indicator: Segment


def indicator_angle(accumulated_angle: int) -> int:
    """Accumulated angle snapped to its minute, truncating toward zero."""
    return math.trunc(accumulated_angle / MINUTE_STEP_DEGREES) * MINUTE_STEP_DEGREES


def build_dial_face(geometry: DialGeometry, accumulated_angle: int) -> DialFace:
    center = geometry.center
    stroke = geometry.base_stroke_width
    ticks: List[Segment] = []
    labels: List[Label] = []
    label_iter = iter(FACE_LABELS)

    for i in range(1, MINUTE_TICKS + 1):
        angle = MINUTE_STEP_DEGREES * i
        end = point_on_circle(geometry.ring1_radius, center, angle)
        if i % LABEL_EVERY_TICKS == 0:
            labels.append(Label(
                position=point_on_circle(geometry.minutes_radius, center, angle),
                text=str(next(label_iter)),
                stroke_width=LABEL_STROKE_RATIO * stroke,
                color=COLORS["label"],
            ))
            ticks.append(Segment(center, end, stroke, COLORS["tick_strong"]))
        else:
            ticks.append(Segment(center, end, LIGHT_TICK_STROKE_RATIO * stroke, COLORS["tick_light"]))

    discs = [
        Disc(center, geometry.ring2_radius, stroke, COLORS["ring_outer"]),
        Disc(center, geometry.ring3_radius, stroke, COLORS["ring_inner"], shadow=True),
    ]

    snapped = indicator_angle(accumulated_angle)
    indicator = Segment(
        start=point_on_circle(INDICATOR_INNER_RATIO * geometry.ring3_radius, center, snapped),
        end=point_on_circle(INDICATOR_OUTER_RATIO * geometry.ring3_radius, center, snapped),
        stroke_width=stroke,
        color=COLORS["indicator"],
    )
    return DialFace(ticks=ticks, labels=labels, discs=discs, indicator=indicator)
