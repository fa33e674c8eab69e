"""
Game session: one owner for the game state and its collaborators.

Handles:
- Turning detected hands into FrameEvaluated events
- Polling the reshuffle timer and dispatching ReshuffleRequested events
- Applying the effects returned by the state machine (sound, banner, timers)
"""

import random
import time
from typing import Sequence

from .game import (
    AssignmentChanged,
    FrameEvaluated,
    GameConfig,
    GameState,
    MatchCelebrated,
    ReshuffleRequested,
    ReshuffleScheduled,
    ReshuffleTimer,
    ScoreChanged,
    TrackedPoint,
    handle_event,
    match_count,
)
from .game.shuffle import describe
from .game.state import Effect, Event
from .hand_tracks.feedback import FlashBanner, SuccessSound
from .hand_tracks.hand_tracker import extract_tracked_points


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


class GameSession:
    """Dispatches every event through handle_event, one at a time."""

    def __init__(
        self,
        config: GameConfig | None = None,
        start: float = 0.0,
        rng: random.Random | None = None,
        sound: SuccessSound | None = None,
        banner: FlashBanner | None = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = GameState()
        self.timer = ReshuffleTimer(self.config.reshuffle_interval_s, start=start)
        self.sound = sound if sound is not None else SuccessSound(enabled=self.config.sound)
        self.banner = banner if banner is not None else FlashBanner(enabled=self.config.flash)
        self.last_points: list[TrackedPoint] = []

    def dispatch(self, event: Event, now: float) -> list[Effect]:
        """Run one event to completion and apply its effects."""
        self.state, effects = handle_event(self.state, event, self.config, self.rng)
        for effect in effects:
            self._apply(effect, now)
        return effects

    def _apply(self, effect: Effect, now: float) -> None:
        if isinstance(effect, ScoreChanged):
            print(f"[{_timestamp()}] MATCH +{effect.award} -> score {effect.score}")
        elif isinstance(effect, MatchCelebrated):
            self.sound.play()
            self.banner.trigger(now)
        elif isinstance(effect, ReshuffleScheduled):
            self.timer.schedule_once(now, effect.delay_s)
        elif isinstance(effect, AssignmentChanged):
            print(f"[{_timestamp()}] Reshuffle ({effect.source}): {describe(effect.assignment)}")

    def tick(self, now: float) -> list[Effect]:
        """Fire any reshuffles that came due."""
        effects: list[Effect] = []
        for event in self.timer.poll(now):
            effects.extend(self.dispatch(event, now))
        return effects

    def request_reshuffle(self, now: float, source: str = "manual") -> list[Effect]:
        return self.dispatch(ReshuffleRequested(source), now)

    def on_hand(self, landmarks: Sequence[tuple[float, float]], now: float) -> list[Effect]:
        """Evaluate one detected hand against the current assignment."""
        points = extract_tracked_points(landmarks)
        self.last_points = points
        count = match_count(self.state.assignment, points, self.config.width, self.config.height)
        return self.dispatch(FrameEvaluated(count, len(points)), now)

    def on_frame(self, hands: Sequence[Sequence[tuple[float, float]]], now: float) -> list[Effect]:
        """Timers first, then every hand of the frame in detection order."""
        effects = self.tick(now)
        self.last_points = []
        points: list[TrackedPoint] = []
        for landmarks in hands:
            effects.extend(self.on_hand(landmarks, now))
            points.extend(self.last_points)
        self.last_points = points
        return effects

    def flash_text(self, now: float) -> str | None:
        return self.banner.current(now)

    def close(self) -> None:
        self.sound.close()
