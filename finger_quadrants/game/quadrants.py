"""Mapping of normalized points onto the four canvas quadrants."""

import math

from .config import CANVAS_WIDTH, CANVAS_HEIGHT

TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = 0, 1, 2, 3
QUADRANTS = (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)

Rect = tuple[int, int, int, int]


def quadrant_of(
    x: float,
    y: float,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> int:
    """
    Map a normalized point to its quadrant index.

    Comparisons are strict, so a point exactly on a midline belongs to the
    right/bottom quadrant. Points outside [0, 1] are not clamped.

    Returns:
        0 (top-left), 1 (top-right), 2 (bottom-left) or 3 (bottom-right)
    """
    px = x * width
    py = y * height

    if py < height / 2:
        return TOP_LEFT if px < width / 2 else TOP_RIGHT
    return BOTTOM_LEFT if px < width / 2 else BOTTOM_RIGHT


def quadrant_rect(index: int, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> Rect:
    """
    Pixel rectangle (x1, y1, x2, y2) covered by a quadrant, x2/y2 exclusive.

    Pixel column c is on the left when c < width / 2, the same test
    quadrant_of uses, so odd sizes put the middle column on the left.
    """
    half_w, half_h = math.ceil(width / 2), math.ceil(height / 2)
    col, row = index % 2, index // 2
    x1 = col * half_w
    y1 = row * half_h
    x2 = width if col else half_w
    y2 = height if row else half_h
    return x1, y1, x2, y2
