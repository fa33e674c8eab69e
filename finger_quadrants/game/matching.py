"""Evaluation of fingertip positions against the current color assignment."""

from dataclasses import dataclass
from typing import Sequence

from .config import CANVAS_WIDTH, CANVAS_HEIGHT, ColorSlot
from .quadrants import quadrant_of

FULL_MATCH = 4


@dataclass(frozen=True)
class TrackedPoint:
    """A fingertip for one frame: the color it must reach and where it is."""
    color: ColorSlot
    x: float
    y: float

    def to_pixels(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> tuple[int, int]:
        return int(self.x * width), int(self.y * height)


def is_point_matched(
    assignment: Sequence[ColorSlot],
    point: TrackedPoint,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> bool:
    """Check whether the quadrant under the point shows the point's color."""
    return assignment[quadrant_of(point.x, point.y, width, height)] == point.color


def match_count(
    assignment: Sequence[ColorSlot],
    points: Sequence[TrackedPoint],
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> int:
    """Number of points sitting on their own color (0..4)."""
    return sum(1 for p in points if is_point_matched(assignment, p, width, height))


def is_full_match(count: int, point_count: int = FULL_MATCH) -> bool:
    """All four fingertips present and matched."""
    return point_count == FULL_MATCH and count == FULL_MATCH
