"""Hand tracking, drawing and feedback collaborators."""

from .hand_tracker import HandTracker, extract_tracked_points
from .visualization import GameDisplay, draw_quadrants, draw_tracked_points, draw_score
from .feedback import SuccessSound, FlashBanner

__all__ = [
    "HandTracker",
    "extract_tracked_points",
    "GameDisplay",
    "draw_quadrants",
    "draw_tracked_points",
    "draw_score",
    "SuccessSound",
    "FlashBanner",
]
