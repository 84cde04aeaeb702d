"""Easing playback: state machine, looping, pause, diagnostics."""
import sys
from pathlib import Path
_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_root))

import pytest

from gamekit.graphics.curves import KeyframeCurve
from gamekit.graphics.easing import Easing, EasingBehavior, LoopBehavior, PlayState
from gamekit.sim.timebase import GameClock, set_clock


def test_sample_before_begin_returns_start_value(clock):
    e = Easing(EasingBehavior.LINEAR, clock=clock)
    assert e.play_state is PlayState.UNPLAYED
    assert e.sample() == 0.0
    clock.tick(5.0)
    assert e.sample() == 0.0
    assert e.start_time == float("-inf")


def test_linear_progress_and_finish(clock):
    e = Easing(EasingBehavior.LINEAR, LoopBehavior.NO_LOOP, clock=clock)
    e.begin(0.0, 1.0, 2.0)
    assert e.is_playing
    clock.tick(0.5)
    assert e.sample() == pytest.approx(0.25)
    clock.tick(1.5)
    assert e.sample() == 1.0
    clock.tick(0.5)
    assert e.sample() == 1.0
    assert e.is_finished
    clock.tick(10.0)
    assert e.sample() == 1.0


def test_endpoints_are_mapped_unclamped(clock):
    e = Easing(EasingBehavior.BACK_IN, duration=1.0, clock=clock)
    e.begin(10.0, 20.0)
    clock.tick(0.2)
    value = e.sample()
    assert value < 10.0
    assert value == pytest.approx(10.0 + 10.0 * ((2.70158 * 0.008) - (1.70158 * 0.04)))


def test_begin_duration_only_form_eases_zero_to_one(clock):
    e = Easing(EasingBehavior.QUAD_IN, clock=clock)
    e.begin(duration=4.0)
    assert e.duration == 4.0
    assert (e.start_value, e.end_value) == (0.0, 1.0)
    clock.tick(2.0)
    assert e.sample() == pytest.approx(0.25)


def test_begin_keeps_duration_unless_finite(clock):
    e = Easing(EasingBehavior.LINEAR, duration=3.0, clock=clock)
    e.begin(0.0, 1.0)
    assert e.duration == 3.0
    e.begin(0.0, 1.0, float("-inf"))
    assert e.duration == 3.0
    e.begin(0.0, 1.0, 0.5)
    assert e.duration == 0.5


@pytest.mark.parametrize("bad", [0.0, -1.0])
def test_non_positive_duration_rejected(clock, bad):
    with pytest.raises(ValueError):
        Easing(EasingBehavior.LINEAR, duration=bad, clock=clock)
    e = Easing(EasingBehavior.LINEAR, clock=clock)
    with pytest.raises(ValueError):
        e.begin(0.0, 1.0, bad)
    assert e.play_state is PlayState.UNPLAYED


def test_begin_records_clock_time(clock):
    clock.tick(3.0)
    e = Easing(EasingBehavior.LINEAR, clock=clock)
    e.begin()
    assert e.start_time == 3.0


def test_reset_from_any_state(clock):
    e = Easing(EasingBehavior.LINEAR, duration=1.0, clock=clock)
    e.begin(2.0, 4.0)
    clock.tick(2.0)
    assert e.sample() == 4.0
    assert e.is_finished

    e.reset()
    assert e.play_state is PlayState.UNPLAYED
    assert e.start_time == float("-inf")
    assert e.sample() == 2.0

    e.begin(2.0, 4.0)
    clock.tick(0.5)
    e.reset()
    assert e.sample() == 2.0


def test_reset_loop_restarts_same_direction(clock):
    e = Easing(EasingBehavior.LINEAR, LoopBehavior.RESET, 1.0, clock=clock)
    e.begin(0.0, 10.0)
    clock.tick(1.25)
    assert e.sample() == pytest.approx(2.5)
    clock.tick(1.0)
    assert e.sample() == pytest.approx(2.5)
    assert (e.start_value, e.end_value) == (0.0, 10.0)
    assert e.is_playing


def test_ping_pong_reverses_direction(clock):
    e = Easing(EasingBehavior.QUAD_IN, LoopBehavior.PING_PONG, 1.0, clock=clock)
    e.begin(0.0, 10.0)
    clock.tick(1.5)
    # Curve at 0.5 (0.25), mapped onto swapped endpoints.
    assert e.sample() == pytest.approx(7.5)
    assert (e.start_value, e.end_value) == (10.0, 0.0)

    clock.tick(1.0)
    assert e.sample() == pytest.approx(2.5)
    assert (e.start_value, e.end_value) == (0.0, 10.0)
    assert e.is_playing


def test_ping_pong_swaps_once_per_overflowed_pass(clock):
    e = Easing(EasingBehavior.LINEAR, LoopBehavior.PING_PONG, 1.0, clock=clock)
    e.begin(0.0, 10.0)
    clock.tick(2.5)  # two passes overflowed in a single tick
    assert e.sample() == pytest.approx(5.0)
    assert (e.start_value, e.end_value) == (0.0, 10.0)
    assert e.start_time == pytest.approx(2.0)


def test_ping_pong_once_reverses_then_finishes(clock):
    e = Easing(EasingBehavior.LINEAR, LoopBehavior.PING_PONG_ONCE, 1.0, clock=clock)
    e.begin(0.0, 10.0)
    clock.tick(1.5)
    assert e.sample() == pytest.approx(5.0)
    assert e.loop_type is LoopBehavior.NO_LOOP
    assert (e.start_value, e.end_value) == (10.0, 0.0)

    clock.tick(0.25)
    assert e.sample() == pytest.approx(2.5)

    clock.tick(0.5)
    assert e.sample() == 0.0
    assert e.is_finished


def test_ping_pong_once_with_long_overflow_reverses_once(clock):
    e = Easing(EasingBehavior.LINEAR, LoopBehavior.PING_PONG_ONCE, 1.0, clock=clock)
    e.begin(0.0, 10.0)
    clock.tick(2.5)
    # The loop keeps correcting time but only the first overflow swaps.
    assert e.sample() == pytest.approx(5.0)
    assert (e.start_value, e.end_value) == (10.0, 0.0)


def test_pause_holds_time_factor(clock):
    e = Easing(EasingBehavior.LINEAR, duration=1.0, clock=clock)
    e.begin(0.0, 1.0)
    clock.tick(0.25)
    before = e.sample()
    assert e.progress == pytest.approx(0.25)

    e.paused = True
    clock.tick(0.1)
    assert e.sample() == pytest.approx(before)
    clock.tick(0.1)
    assert e.sample() == pytest.approx(before)
    assert e.progress == pytest.approx(0.25)

    e.paused = False
    clock.tick(0.25)
    assert e.sample() == pytest.approx(0.5)


def test_unscaled_time_ignores_time_scale():
    clock = GameClock(time_scale=0.0)
    scaled = Easing(EasingBehavior.LINEAR, duration=1.0, clock=clock)
    unscaled = Easing(EasingBehavior.LINEAR, duration=1.0, clock=clock)
    unscaled.time_scale_relative = False
    scaled.begin()
    unscaled.begin()

    clock.tick(0.5)
    assert scaled.sample() == 0.0
    assert unscaled.sample() == pytest.approx(0.5)


def test_paused_unscaled_uses_unscaled_delta():
    clock = GameClock(time_scale=2.0)
    e = Easing(EasingBehavior.LINEAR, duration=1.0, clock=clock)
    e.time_scale_relative = False
    e.begin()
    e.paused = True
    clock.tick(0.3)
    assert e.sample() == pytest.approx(0.0)


def test_default_clock_is_used_when_none_given():
    clock = GameClock()
    set_clock(clock)
    e = Easing(EasingBehavior.LINEAR, duration=2.0)
    e.begin()
    clock.tick(1.0)
    assert e.sample() == pytest.approx(0.5)


def test_progress_reports_pass_position(clock):
    e = Easing(EasingBehavior.CUBIC_IN, duration=2.0, clock=clock)
    assert e.progress == 0.0
    e.begin()
    clock.tick(0.5)
    assert e.progress == pytest.approx(0.25)
    clock.tick(5.0)
    e.sample()
    assert e.progress == 1.0


def test_curve_shorthand_constructor(clock):
    curve = KeyframeCurve.linear(0.0, 0.0, 1.0, 0.5)
    e = Easing(curve, LoopBehavior.NO_LOOP, 1.0, clock=clock)
    assert e.easing_type is EasingBehavior.CURVE
    assert e.animation_curve is curve
    e.begin(0.0, 100.0)
    clock.tick(0.5)
    assert e.sample() == pytest.approx(25.0)


def test_unassigned_type_reports_but_still_plays(clock, capsys):
    e = Easing(clock=clock)
    e.begin(0.0, 8.0, 1.0)
    assert e.is_playing
    assert e.last_issue == "Easing type not yet assigned!"
    assert "[Easing] ERROR: Easing type not yet assigned!" in capsys.readouterr().out

    clock.tick(0.5)
    assert e.sample() == pytest.approx(4.0)
    assert e.last_issue.startswith("Easing not defined")


def test_missing_curve_passes_through(clock, capsys):
    e = Easing(EasingBehavior.CURVE, duration=1.0, clock=clock)
    e.begin(0.0, 2.0)
    clock.tick(0.25)
    assert e.sample() == pytest.approx(0.5)
    assert e.last_issue == "Easing's animation curve is None!"
    assert "[Easing] ERROR:" in capsys.readouterr().out


def test_get_value_at_time_accepts_out_of_range(clock):
    e = Easing(EasingBehavior.LINEAR, clock=clock)
    e.begin(0.0, 10.0)
    assert e.get_value_at_time(1.5) == pytest.approx(15.0)
    assert e.get_value_at_time(-0.5) == pytest.approx(-5.0)
