"""A small countdown timer driven by explicit time deltas."""

from __future__ import annotations

from enum import Enum


class TimerMode(Enum):
    """Whether a timer stops once it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Tracks elapsed time against a duration, in seconds."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative, got {duration}")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self._finished = False
        self._times_finished_this_tick = 0

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, mode={self.mode}, "
            f"elapsed={self.elapsed!r})"
        )

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished_this_tick

    @property
    def remaining(self) -> float:
        """Seconds left until the timer next finishes."""
        return self.duration - self.elapsed

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards by {delta}")

        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration

        if not self._finished:
            self._times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration == 0:
                self._times_finished_this_tick = 1
                self.elapsed = 0.0
            else:
                self._times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
        else:
            self._times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Return the timer to its initial, unfinished state."""
        self.elapsed = 0.0
        self._finished = False
        self._times_finished_this_tick = 0

    def finished(self) -> bool:
        """True once the duration has been reached (for repeating timers: on that tick)."""
        return self._finished

    def just_finished(self) -> bool:
        """True only if the timer completed during the most recent tick."""
        return self._times_finished_this_tick > 0