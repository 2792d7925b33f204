from __future__ import annotations

import pytest

from basic_face.animation.animator import FaceAnimator
from basic_face.animation.blink import Phase
from basic_face.config import Config
from basic_face.face.renderer import FaceRenderer
from basic_face.scheduler import FrameScheduler


class _Clock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class _Source:
    def __init__(self, volume: float = 0.0) -> None:
        self.volume = volume


class _FixedRandom:
    def random(self) -> float:
        return 0.0


def _animator():
    clock = _Clock()
    scheduler = FrameScheduler(clock=clock)
    source = _Source()
    animator = FaceAnimator(scheduler, source, Config(), rng=_FixedRandom())
    return clock, scheduler, source, animator


def test_resting_face():
    _, scheduler, _, animator = _animator()
    animator.start()
    scheduler.tick()
    params = animator.update()
    assert params.eye_scale == 1.0
    assert params.mouth_scale == 0.0


def test_volume_drives_mouth():
    _, scheduler, source, animator = _animator()
    source.volume = 1.0
    scheduler.tick()
    assert animator.update().mouth_scale == pytest.approx(0.45)

    # Unchanged reading is not resampled
    assert animator.update().mouth_scale == pytest.approx(0.45)

    source.volume = 0.0
    assert animator.update().mouth_scale == pytest.approx(0.315)


def test_blink_and_mouth_combine_each_frame():
    clock, scheduler, source, animator = _animator()
    animator.start()
    source.volume = 0.4

    eye_scales = []
    for frame in range(150):
        clock.now = frame / 60
        scheduler.tick()
        params = animator.update()
        eye_scales.append(params.eye_scale)

    # One blink at 2.0s, back open afterwards
    assert min(eye_scales) < 0.2
    assert eye_scales[-1] == 1.0
    assert animator.blink.phase is Phase.IDLE
    assert animator.smoother.value == pytest.approx(0.12)


def test_frames_render_from_animator_output():
    clock, scheduler, source, animator = _animator()
    renderer = FaceRenderer(Config().display, Config().face)
    animator.start()
    source.volume = 0.8
    scheduler.tick()
    img = renderer.render(animator.update())
    assert img.size == (400, 400)


def test_dispose_leaves_nothing_scheduled():
    clock, scheduler, _, animator = _animator()
    animator.start()
    animator.blink.trigger_blink()
    scheduler.tick()
    animator.dispose()
    assert scheduler.pending_frames == 0
    assert scheduler.pending_timers == 0
