"""
Time-driven value interpolation ("easing"), shapes inspired by https://easings.net/.

Usage:
- create an Easing with a shape (and optionally a loop behavior / duration)
- call begin(start, end) once
- call sample() once per tick; it returns start before begin(), the eased value while
  playing, and end once finished

The shape table (`ease`) is pure and can be used on its own.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from gamekit.sim.debug import log_error, log_warning
from gamekit.sim.timebase import GameClock, get_clock


class EasingBehavior(Enum):
    NULL = -1
    LINEAR = 0  # t
    START_VALUE = 1  # always start
    END_VALUE = 2  # always end
    CURVE = 3  # supplied curve object

    QUAD_IN = 4
    QUAD_OUT = 5
    QUAD_IN_OUT = 6

    CUBIC_IN = 7
    CUBIC_OUT = 8
    CUBIC_IN_OUT = 9

    TRIG_IN = 10  # 1 - cos(t*pi/2)
    TRIG_OUT = 11  # sin(t*pi/2)
    TRIG_IN_OUT = 12  # (cos(t*pi) - 1) / -2

    EXPO_IN = 13
    EXPO_OUT = 14
    EXPO_IN_OUT = 15

    BOUNCE_IN = 16
    BOUNCE_OUT = 17
    BOUNCE_IN_OUT = 18  # like a ball

    BACK_IN = 19
    BACK_OUT = 20
    BACK_IN_OUT = 21  # wind-up, leaves [0, 1]

    ELASTIC_IN = 22
    ELASTIC_OUT = 23
    ELASTIC_IN_OUT = 24  # rubber band, leaves [0, 1]


class LoopBehavior(Enum):
    NO_LOOP = 0
    RESET = 1
    PING_PONG = 2
    PING_PONG_ONCE = 3


class PlayState(Enum):
    UNPLAYED = 0  # sample() == start_value
    IS_PLAYING = 1  # sample() == eased value
    FINISHED = 2  # sample() == end_value


PLAYABLE_BEHAVIORS = tuple(b for b in EasingBehavior if b is not EasingBehavior.NULL)


# ----------------------------------------------------------------------
# Shape table
# ----------------------------------------------------------------------


def bounce_out(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75

    if t < 1 / d1:
        return n1 * t * t
    elif t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (math.pow(-2 * t + 2, 2) / 2)


def _cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (math.pow(-2 * t + 2, 3) / 2)


def _expo_in(t: float) -> float:
    if t > 0:
        return math.pow(2, 10 * t - 10)
    return t


def _expo_out(t: float) -> float:
    if t < 1:
        return 1 - math.pow(2, -10 * t)
    return t


def _expo_in_out(t: float) -> float:
    if t == 0 or t == 1:
        return t
    if t < 0.5:
        return math.pow(2, 20 * t - 10) / 2
    return (2 - math.pow(2, -20 * t + 10)) / 2


def _bounce_in_out(t: float) -> float:
    if t < 0.5:
        return (1 - bounce_out(1 - 2 * t)) / 2
    return (1 + bounce_out(2 * t - 1)) / 2


def _back_in_out(t: float) -> float:
    # 2.595 is used as-is (not the usual 1.70158 * 1.525); tuned overshoot depends on it.
    if t < 0.5:
        return (math.pow(2 * t, 2) * ((2.595 + 1) * 2 * t - 2.595)) / 2
    return (math.pow(2 * t - 2, 2) * ((2.595 + 1) * (t * 2 - 2) + 2.595) + 2) / 2


def _elastic_in(t: float) -> float:
    if t == 0 or t == 1:
        return t
    return -math.pow(2, 10 * t - 10) * math.sin((t * 10 - 10.75) * ((2 * math.pi) / 3))


def _elastic_out(t: float) -> float:
    if t == 0 or t == 1:
        return t
    return math.pow(2, -10 * t) * math.sin((t * 10 - 0.75) * ((2 * math.pi) / 3)) + 1


def _elastic_in_out(t: float) -> float:
    if t == 0 or t == 1:
        return t
    if t < 0.5:
        return -(math.pow(2, 20 * t - 10) * math.sin((20 * t - 11.125) * ((2 * math.pi) / 4.5))) / 2
    return (math.pow(2, -20 * t + 10) * math.sin((20 * t - 11.125) * ((2 * math.pi) / 4.5))) / 2 + 1


_SHAPES: Dict[EasingBehavior, Callable[[float], float]] = {
    EasingBehavior.LINEAR: lambda t: t,
    EasingBehavior.START_VALUE: lambda t: 0.0,
    EasingBehavior.END_VALUE: lambda t: 1.0,
    EasingBehavior.QUAD_IN: lambda t: t * t,
    EasingBehavior.QUAD_OUT: lambda t: 1 - ((1 - t) * (1 - t)),
    EasingBehavior.QUAD_IN_OUT: _quad_in_out,
    EasingBehavior.CUBIC_IN: lambda t: t * t * t,
    EasingBehavior.CUBIC_OUT: lambda t: 1 - math.pow(1 - t, 3),
    EasingBehavior.CUBIC_IN_OUT: _cubic_in_out,
    EasingBehavior.TRIG_IN: lambda t: 1 - math.cos(t * math.pi / 2),
    EasingBehavior.TRIG_OUT: lambda t: math.sin(t * math.pi / 2),
    EasingBehavior.TRIG_IN_OUT: lambda t: (math.cos(math.pi * t) - 1) / -2,
    EasingBehavior.EXPO_IN: _expo_in,
    EasingBehavior.EXPO_OUT: _expo_out,
    EasingBehavior.EXPO_IN_OUT: _expo_in_out,
    EasingBehavior.BOUNCE_IN: lambda t: 1 - bounce_out(1 - t),
    EasingBehavior.BOUNCE_OUT: bounce_out,
    EasingBehavior.BOUNCE_IN_OUT: _bounce_in_out,
    EasingBehavior.BACK_IN: lambda t: (2.70158 * t * t * t) - (1.70158 * t * t),
    EasingBehavior.BACK_OUT: lambda t: 1 + (2.70158 * math.pow(t - 1, 3)) + (1.70158 * math.pow(t - 1, 2)),
    EasingBehavior.BACK_IN_OUT: _back_in_out,
    EasingBehavior.ELASTIC_IN: _elastic_in,
    EasingBehavior.ELASTIC_OUT: _elastic_out,
    EasingBehavior.ELASTIC_IN_OUT: _elastic_in_out,
}


def _ease(behavior, t: float, curve=None) -> Tuple[float, Optional[str]]:
    """Shape lookup returning (progress, issue). Issues never raise."""
    t = float(t)
    if behavior is EasingBehavior.CURVE:
        if curve is None:
            return t, "Easing's animation curve is None!"
        return float(curve.evaluate(t)), None

    fn = _SHAPES.get(behavior) if isinstance(behavior, EasingBehavior) else None
    if fn is None:
        return t, f"Easing not defined: {getattr(behavior, 'name', behavior)}"
    return fn(t), None


def ease(behavior: EasingBehavior, t: float, curve=None) -> float:
    """
    Raw progress for `behavior` at time factor `t` (not clamped).

    Unknown shapes, and CURVE without a curve, print a diagnostic and return `t`.
    """
    value, issue = _ease(behavior, t, curve)
    if issue is not None:
        _report_shape_issue(behavior, issue)
    return value


def _report_shape_issue(behavior, issue: str) -> None:
    key = f"easing:shape:{getattr(behavior, 'name', behavior)}"
    if behavior is EasingBehavior.CURVE:
        log_error("Easing", issue, once_key=key)
    else:
        log_warning("Easing", issue, once_key=key)


def lerp_unclamped(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# ----------------------------------------------------------------------
# Playback
# ----------------------------------------------------------------------


def _accept_duration(duration: Optional[float]) -> Optional[float]:
    if duration is None:
        return None
    duration = float(duration)
    if not math.isfinite(duration):
        return None
    if duration <= 0:
        raise ValueError("duration must be > 0")
    return duration


class Easing:
    """
    One interpolation in progress, owned by its caller.

    - begin(start, end[, duration]) starts playback on the current clock reading
    - sample() once per tick returns the current value
    - reset() rewinds to the unplayed state

    PING_PONG loops swap `start_value` / `end_value` on this instance each cycle.
    """

    def __init__(
        self,
        easing_type=EasingBehavior.NULL,
        loop_type: LoopBehavior = LoopBehavior.NO_LOOP,
        duration: Optional[float] = None,
        *,
        animation_curve=None,
        clock: Optional[GameClock] = None,
    ):
        if hasattr(easing_type, "evaluate"):
            # Easing(curve, loop) shorthand.
            animation_curve = easing_type
            easing_type = EasingBehavior.CURVE

        self.easing_type = easing_type
        self.loop_type = loop_type
        self.animation_curve = animation_curve
        self.time_scale_relative = True
        self.paused = False
        self.clock = clock

        self.duration = 1.0
        self.start_value = 0.0
        self.end_value = 1.0
        self.last_issue: Optional[str] = None

        self._play_state = PlayState.UNPLAYED
        self._start_time = float("-inf")

        accepted = _accept_duration(duration)
        if accepted is not None:
            self.duration = accepted

    @property
    def play_state(self) -> PlayState:
        return self._play_state

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def is_playing(self) -> bool:
        return self._play_state is PlayState.IS_PLAYING

    @property
    def is_finished(self) -> bool:
        return self._play_state is PlayState.FINISHED

    @property
    def progress(self) -> float:
        """Un-eased time factor of the current pass, clamped to [0, 1]. Does not advance state."""
        if self._play_state is PlayState.UNPLAYED:
            return 0.0
        if self._play_state is PlayState.FINISHED:
            return 1.0
        return min(1.0, max(0.0, self._time_factor()))

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def begin(self, start_value: float = 0.0, end_value: float = 1.0, duration: Optional[float] = None) -> None:
        """
        Mark the start time and endpoints.

        `begin(duration=d)` eases 0 -> 1 so the raw factor can drive an external lerp.
        """
        accepted = _accept_duration(duration)

        self._play_state = PlayState.IS_PLAYING
        self._start_time = self._now()
        self.start_value = float(start_value)
        self.end_value = float(end_value)
        self.last_issue = None

        if accepted is not None:
            self.duration = accepted

        if self.easing_type is EasingBehavior.NULL:
            self.last_issue = "Easing type not yet assigned!"
            log_error("Easing", self.last_issue)

    def reset(self) -> None:
        self._play_state = PlayState.UNPLAYED
        self._start_time = float("-inf")

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def sample(self) -> float:
        """Current value. Call at most once per tick."""
        if self.paused:
            self._start_time += self._clock().tick_delta(self.time_scale_relative)

        if self._play_state is PlayState.UNPLAYED:
            return self.start_value

        if self._play_state is PlayState.IS_PLAYING:
            time_factor = self._time_factor()

            if time_factor > 1:
                if self.loop_type is LoopBehavior.NO_LOOP:
                    self._play_state = PlayState.FINISHED
                    return self.end_value

                while time_factor > 1:
                    self._start_time += self.duration
                    time_factor = self._time_factor()

                    loop_type = self.loop_type
                    if loop_type is LoopBehavior.PING_PONG_ONCE:
                        # Reverse this once; the next overflow finishes.
                        self.loop_type = LoopBehavior.NO_LOOP
                        loop_type = LoopBehavior.PING_PONG

                    if loop_type is LoopBehavior.PING_PONG:
                        self.start_value, self.end_value = self.end_value, self.start_value
                    # RESET: same direction again.

            return self.get_value_at_time(time_factor)

        return self.end_value

    def get_value_at_time(self, t: float) -> float:
        """Eased value at time factor `t`, mapped onto the endpoints (unclamped)."""
        value, issue = _ease(self.easing_type, t, self.animation_curve)
        if issue is not None:
            self.last_issue = issue
            _report_shape_issue(self.easing_type, issue)
        return lerp_unclamped(self.start_value, self.end_value, value)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _clock(self) -> GameClock:
        return self.clock if self.clock is not None else get_clock()

    def _now(self) -> float:
        return self._clock().current_time(self.time_scale_relative)

    def _time_factor(self) -> float:
        return (self._now() - self._start_time) / self.duration
