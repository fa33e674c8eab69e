"""Score/gate state machine driven by frame and reshuffle events."""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from .config import GameConfig, ScoringPolicy
from .matching import is_full_match
from .shuffle import Assignment, initial_assignment, reshuffle, validate_assignment


class Phase(Enum):
    IDLE = "idle"
    COOLDOWN = "cooldown"


@dataclass(frozen=True)
class GameState:
    """Everything that survives from one frame to the next."""
    assignment: Assignment = field(default_factory=initial_assignment)
    score: int = 0
    phase: Phase = Phase.IDLE
    reshuffles: int = 0

    def __post_init__(self):
        object.__setattr__(self, "assignment", validate_assignment(self.assignment))

    @property
    def can_score(self) -> bool:
        return self.phase is Phase.IDLE


# =============================================================================
# EVENTS
# =============================================================================

@dataclass(frozen=True)
class FrameEvaluated:
    """Match result for one hand in one camera frame."""
    match_count: int
    point_count: int = 4


@dataclass(frozen=True)
class ReshuffleRequested:
    """A timer (or the player) asks for a new assignment."""
    source: str = "interval"  # interval | post_score | manual


Event = Union[FrameEvaluated, ReshuffleRequested]


# =============================================================================
# EFFECTS
# =============================================================================

@dataclass(frozen=True)
class ScoreChanged:
    score: int
    award: int


@dataclass(frozen=True)
class MatchCelebrated:
    """Play the success sound and flash the banner."""


@dataclass(frozen=True)
class ReshuffleScheduled:
    delay_s: float


@dataclass(frozen=True)
class AssignmentChanged:
    assignment: Assignment
    source: str


Effect = Union[ScoreChanged, MatchCelebrated, ReshuffleScheduled, AssignmentChanged]


# =============================================================================
# TRANSITIONS
# =============================================================================

def on_frame(
    state: GameState, event: FrameEvaluated, config: GameConfig
) -> tuple[GameState, list[Effect]]:
    """
    Credit a full match according to the scoring policy.

    IMMEDIATE scores every full-match frame. COOLDOWN scores once, then
    ignores frames until the next reshuffle.
    """
    if not is_full_match(event.match_count, event.point_count):
        return state, []

    if config.policy is ScoringPolicy.IMMEDIATE:
        new_state = replace(state, score=state.score + config.award)
        return new_state, [ScoreChanged(new_state.score, config.award)]

    if not state.can_score:
        return state, []

    new_state = replace(state, score=state.score + config.award, phase=Phase.COOLDOWN)
    return new_state, [
        ScoreChanged(new_state.score, config.award),
        MatchCelebrated(),
        ReshuffleScheduled(config.post_score_delay_s),
    ]


def on_reshuffle(
    state: GameState, event: ReshuffleRequested, rng: random.Random | None = None
) -> tuple[GameState, list[Effect]]:
    """Replace the assignment wholesale and reopen the scoring gate."""
    new_state = replace(
        state,
        assignment=reshuffle(state.assignment, rng),
        phase=Phase.IDLE,
        reshuffles=state.reshuffles + 1,
    )
    return new_state, [AssignmentChanged(new_state.assignment, event.source)]


def handle_event(
    state: GameState,
    event: Event,
    config: GameConfig,
    rng: random.Random | None = None,
) -> tuple[GameState, list[Effect]]:
    """Single entry point for every state change."""
    if isinstance(event, FrameEvaluated):
        return on_frame(state, event, config)
    if isinstance(event, ReshuffleRequested):
        return on_reshuffle(state, event, rng)
    raise TypeError(f"Unknown event: {event!r}")
