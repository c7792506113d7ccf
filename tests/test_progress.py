"""Unit tests for ProgressIndicator."""
from __future__ import annotations

import math

import pytest

from core.animation import ManualAnimationEngine
from core.config import PROGRESS_KEY, SPIN_DURATION, SPIN_KEY, TRANSITION_STEP
from core.progress import ProgressIndicator, normalize_progress


@pytest.mark.parametrize("value, expected", [
    (-0.3, 0.0),
    (1.25, 0.25),
    (2.0, 0.0),
    (0.5, 0.5),
    (0.0, 0.0),
])
def test_set_progress_normalizes(fake_engine, value, expected):
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(value)
    assert ind.get_progress() == pytest.approx(expected)


@pytest.mark.parametrize("value", [-5.0, -1e-9, 0.999999, 1.0, 3.75, 1e9 + 0.5, 123.456, math.inf, -math.inf, math.nan])
def test_progress_always_in_range(value):
    result = normalize_progress(value)
    assert 0.0 <= result < 1.0


def test_set_progress_requests_redraw_and_does_not_animate(fake_engine):
    redraws = []
    ind = ProgressIndicator(fake_engine, request_redraw=lambda: redraws.append(1))
    ind.set_progress(0.4)
    assert redraws == [1]
    assert fake_engine.added == []


def test_tint_defaults_to_black(fake_engine):
    redraws = []
    ind = ProgressIndicator(fake_engine, request_redraw=lambda: redraws.append(1))
    assert ind.tint_color == "#000000"
    ind.set_tint_color("#ff0000")
    assert ind.tint_color == "#ff0000"
    ind.set_tint_color(None)
    assert ind.tint_color == "#000000"
    assert len(redraws) == 2


def test_rejects_non_engine():
    with pytest.raises(TypeError):
        ProgressIndicator(object())


def test_state_machine(fake_engine):
    ind = ProgressIndicator(fake_engine)
    assert not ind.spinning
    ind.spin()
    assert ind.spinning
    key, anim = fake_engine.added[-1]
    assert key == SPIN_KEY
    assert anim.from_value == 0.0 and anim.to_value == 1.0
    assert anim.duration == SPIN_DURATION
    assert anim.repeats_forever
    ind.stop()
    assert not ind.spinning
    assert SPIN_KEY in fake_engine.removed


def test_stop_when_idle_is_noop(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(0.3)
    ind.stop()
    assert not ind.spinning
    assert ind.progress == pytest.approx(0.3)
    assert SPIN_KEY not in fake_engine.removed


def test_spin_twice_is_ignored(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.spin()
    ind.spin()
    assert [k for k, _ in fake_engine.added].count(SPIN_KEY) == 1


def test_stop_commits_presented_value(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(0.1)
    ind.spin()
    fake_engine.presented = 0.63
    assert ind.presented_progress == pytest.approx(0.63)
    ind.stop()
    assert ind.progress == pytest.approx(0.63)


def test_presented_defaults_to_resting(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(0.42)
    assert ind.presented_progress == pytest.approx(0.42)


def test_animated_set_starts_from_presented_value(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(0.2)
    fake_engine.presented = 0.15
    ind.set_progress_animated(0.3)
    key, anim = fake_engine.added[-1]
    assert key == PROGRESS_KEY
    assert anim.from_value == pytest.approx(0.15)
    assert anim.to_value == pytest.approx(0.3)
    assert anim.by_value == TRANSITION_STEP
    assert anim.timing == "linear"
    assert ind.progress == pytest.approx(0.3)


def test_animated_set_while_spinning_only_commits(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.spin()
    ind.set_progress_animated(0.5)
    assert [k for k, _ in fake_engine.added] == [SPIN_KEY]
    assert ind.progress == pytest.approx(0.5)


def test_ten_increments_wrap_to_zero(fake_engine):
    ind = ProgressIndicator(fake_engine)
    for press in range(1, 11):
        ind.advance(0.1)
        if press < 10:
            assert ind.progress == pytest.approx(press / 10)
    assert ind.progress == 0.0


def test_spin_and_stop_with_manual_engine():
    engine = ManualAnimationEngine()
    ind = ProgressIndicator(engine)
    engine.on_frame = lambda: None
    ind.spin()
    engine.tick(0.5)
    assert ind.presented_progress == pytest.approx(0.25)
    engine.tick(2.0)
    assert ind.presented_progress == pytest.approx(0.25)
    ind.stop()
    assert ind.progress == pytest.approx(0.25)
    assert engine.presented_value() is None
    pie = ind.render(300, 300)
    assert math.degrees(pie.sweep) == pytest.approx(90.0)


def test_render_uses_presented_value_and_tint(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.set_tint_color("#00ff00")
    ind.set_progress(0.1)
    fake_engine.presented = 0.5
    pie = ind.render(100, 100)
    assert pie.fill == "#00ff00"
    assert pie.sweep == pytest.approx(math.pi)


def test_set_progress_non_finite_is_zero(fake_engine):
    """Infinite input is normalized like any other out-of-range value."""
    ind = ProgressIndicator(fake_engine)
    ind.set_progress(math.inf)
    assert ind.progress == 0.0
    ind.advance(math.inf)
    assert ind.progress == 0.0


def test_set_progress_cancels_running_transition():
    """A plain set wins over a transition still heading to an older target."""
    engine = ManualAnimationEngine()
    ind = ProgressIndicator(engine)
    ind.set_progress_animated(0.5)
    engine.tick(0.1)
    assert ind.presented_progress < 0.5
    ind.set_progress(0.9)
    assert PROGRESS_KEY not in engine.keys()
    assert ind.presented_progress == pytest.approx(0.9)


def test_animated_set_replaces_pending_transition():
    """The newest animated set decides where the display ends up."""
    engine = ManualAnimationEngine()
    ind = ProgressIndicator(engine)
    ind.set_progress_animated(0.5)
    engine.tick(0.1)
    midway = ind.presented_progress
    ind.set_progress_animated(0.8)
    assert engine.keys() == [PROGRESS_KEY]
    assert ind.presented_progress == pytest.approx(midway)
    engine.tick(1.0)
    assert engine.keys() == []
    assert ind.presented_progress == pytest.approx(0.8)


def test_set_progress_while_spinning_keeps_spin(fake_engine):
    ind = ProgressIndicator(fake_engine)
    ind.spin()
    ind.set_progress(0.4)
    assert SPIN_KEY in fake_engine.running
    assert PROGRESS_KEY not in fake_engine.removed
