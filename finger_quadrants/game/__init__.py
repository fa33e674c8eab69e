"""Quadrant matching game core."""

from .config import (
    ColorSlot,
    ScoringPolicy,
    ScoreDisplay,
    GameConfig,
    FINGERTIPS,
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
)
from .quadrants import quadrant_of, quadrant_rect
from .matching import TrackedPoint, match_count, is_full_match
from .shuffle import Assignment, initial_assignment, reshuffle, validate_assignment
from .state import (
    Phase,
    GameState,
    FrameEvaluated,
    ReshuffleRequested,
    ScoreChanged,
    MatchCelebrated,
    ReshuffleScheduled,
    AssignmentChanged,
    handle_event,
)
from .timers import ReshuffleTimer

__all__ = [
    "ColorSlot",
    "ScoringPolicy",
    "ScoreDisplay",
    "GameConfig",
    "FINGERTIPS",
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "quadrant_of",
    "quadrant_rect",
    "TrackedPoint",
    "match_count",
    "is_full_match",
    "Assignment",
    "initial_assignment",
    "reshuffle",
    "validate_assignment",
    "Phase",
    "GameState",
    "FrameEvaluated",
    "ReshuffleRequested",
    "ScoreChanged",
    "MatchCelebrated",
    "ReshuffleScheduled",
    "AssignmentChanged",
    "handle_event",
    "ReshuffleTimer",
]
