"""Cooperative reshuffle timers polled from the frame loop."""

from .config import RESHUFFLE_INTERVAL_S
from .state import ReshuffleRequested


class ReshuffleTimer:
    """
    Periodic reshuffle tick plus one-shot delayed reshuffles.

    Nothing runs in the background: the frame loop calls poll() with the
    current time and dispatches whatever came due. Overlapping one-shots
    are kept and each fires on its own.
    """

    def __init__(self, interval_s: float = RESHUFFLE_INTERVAL_S, start: float = 0.0):
        self.interval_s = interval_s
        self._next_tick = start + interval_s
        self._pending: list[float] = []

    @property
    def pending(self) -> int:
        """Number of one-shot reshuffles not yet fired."""
        return len(self._pending)

    @property
    def next_tick(self) -> float:
        return self._next_tick

    def schedule_once(self, now: float, delay_s: float) -> None:
        """Fire a single reshuffle delay_s after now."""
        self._pending.append(now + delay_s)
        self._pending.sort()

    def cancel_pending(self) -> None:
        """Drop every scheduled one-shot. The periodic tick is unaffected."""
        self._pending.clear()

    def poll(self, now: float) -> list[ReshuffleRequested]:
        """
        Collect the reshuffle events due at now, oldest deadline first.

        A late poll catches up on every missed periodic tick.
        """
        due: list[tuple[float, ReshuffleRequested]] = []

        while now >= self._next_tick:
            due.append((self._next_tick, ReshuffleRequested("interval")))
            self._next_tick += self.interval_s

        while self._pending and now >= self._pending[0]:
            due.append((self._pending.pop(0), ReshuffleRequested("post_score")))

        due.sort(key=lambda item: item[0])
        return [event for _, event in due]
