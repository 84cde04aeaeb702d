"""
Frame clock abstraction.

Animation and gameplay code should read time from a `GameClock` instead of
`pygame.time.get_ticks()` / `time.time()` so we can:
- drive time from a fixed-tick loop (deterministic runs, replays, tests)
- slow down or freeze gameplay (`time_scale`) while UI keeps using unscaled time

The owner of the main loop calls `tick(dt)` exactly once per frame.
"""

from __future__ import annotations

from typing import Optional


class GameClock:
    """
    Scaled + unscaled time, advanced by the game loop.

    - `current_time(scaled)` is seconds since the clock started (or was reset)
    - `tick_delta(scaled)` is the duration of the most recent tick
    """

    def __init__(self, time_scale: float = 1.0):
        self._time_scale = 1.0
        self.time_scale = time_scale
        self.reset()

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        value = float(value)
        if value < 0:
            raise ValueError("time_scale must be >= 0")
        self._time_scale = value

    def reset(self) -> None:
        self._time = 0.0
        self._unscaled_time = 0.0
        self._delta = 0.0
        self._unscaled_delta = 0.0
        self.frame_count = 0

    def tick(self, dt: float) -> None:
        """Advance by one frame of `dt` real (unscaled) seconds."""
        dt = max(0.0, float(dt))
        self._unscaled_delta = dt
        self._delta = dt * self._time_scale
        self._unscaled_time += self._unscaled_delta
        self._time += self._delta
        self.frame_count += 1

    def current_time(self, scaled: bool = True) -> float:
        return self._time if scaled else self._unscaled_time

    def tick_delta(self, scaled: bool = True) -> float:
        return self._delta if scaled else self._unscaled_delta


_DEFAULT_CLOCK: Optional[GameClock] = None


def get_clock() -> GameClock:
    """Return the process default clock, creating it on first use."""
    global _DEFAULT_CLOCK
    if _DEFAULT_CLOCK is None:
        from config import TIME_SCALE

        _DEFAULT_CLOCK = GameClock(time_scale=TIME_SCALE)
    return _DEFAULT_CLOCK


def set_clock(clock: Optional[GameClock]) -> None:
    """
    Replace the process default clock.

    Passing None drops the current one; the next `get_clock()` builds a fresh clock.
    """
    global _DEFAULT_CLOCK
    _DEFAULT_CLOCK = clock
