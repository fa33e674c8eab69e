"""Webcam fingertip quadrant matching game."""

from .game import (
    ColorSlot,
    ScoringPolicy,
    GameConfig,
    GameState,
    Phase,
    TrackedPoint,
    quadrant_of,
    match_count,
    reshuffle,
    handle_event,
    FrameEvaluated,
    ReshuffleRequested,
    ReshuffleTimer,
)
from .session import GameSession

__all__ = [
    # Game core
    "ColorSlot",
    "ScoringPolicy",
    "GameConfig",
    "GameState",
    "Phase",
    "TrackedPoint",
    "quadrant_of",
    "match_count",
    "reshuffle",
    "handle_event",
    "FrameEvaluated",
    "ReshuffleRequested",
    "ReshuffleTimer",
    # Session
    "GameSession",
]
