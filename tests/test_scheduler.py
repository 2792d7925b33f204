from __future__ import annotations

from basic_face.scheduler import FrameScheduler


class _Clock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_frame_callback_runs_once_with_tick_timestamp():
    scheduler = FrameScheduler(clock=_Clock())
    seen: list[float] = []
    scheduler.request_frame(seen.append)

    scheduler.tick(1.5)
    scheduler.tick(1.6)

    assert seen == [1.5]
    assert scheduler.pending_frames == 0


def test_frame_requested_inside_callback_waits_for_next_tick():
    scheduler = FrameScheduler(clock=_Clock())
    seen: list[float] = []

    def step(ts: float) -> None:
        seen.append(ts)
        if len(seen) < 3:
            scheduler.request_frame(step)

    scheduler.request_frame(step)
    scheduler.tick(0.0)
    assert seen == [0.0]
    scheduler.tick(0.1)
    scheduler.tick(0.2)
    scheduler.tick(0.3)
    assert seen == [0.0, 0.1, 0.2]


def test_cancelled_frame_does_not_run():
    scheduler = FrameScheduler(clock=_Clock())
    seen: list[float] = []
    handle = scheduler.request_frame(seen.append)
    scheduler.cancel_frame(handle)
    scheduler.tick(1.0)
    assert seen == []


def test_frame_cancelled_by_earlier_callback_in_same_tick_is_skipped():
    scheduler = FrameScheduler(clock=_Clock())
    seen: list[str] = []
    handles: dict[str, int] = {}

    def first(_ts: float) -> None:
        seen.append("first")
        scheduler.cancel_frame(handles["second"])

    handles["first"] = scheduler.request_frame(first)
    handles["second"] = scheduler.request_frame(lambda _ts: seen.append("second"))
    scheduler.tick(0.0)

    assert seen == ["first"]


def test_timer_fires_once_when_due():
    clock = _Clock(10.0)
    scheduler = FrameScheduler(clock=clock)
    fired: list[float] = []
    scheduler.after(2.0, lambda: fired.append(clock.now))

    clock.now = 11.9
    scheduler.tick()
    assert fired == []

    clock.now = 12.0
    scheduler.tick()
    clock.now = 20.0
    scheduler.tick()
    assert fired == [12.0]
    assert scheduler.pending_timers == 0


def test_due_timers_fire_in_deadline_order_before_frames():
    clock = _Clock()
    scheduler = FrameScheduler(clock=clock)
    order: list[str] = []
    scheduler.request_frame(lambda _ts: order.append("frame"))
    scheduler.after(0.5, lambda: order.append("late"))
    scheduler.after(0.2, lambda: order.append("early"))

    clock.now = 1.0
    scheduler.tick()

    assert order == ["early", "late", "frame"]


def test_cancel_after_and_unknown_handles_are_harmless():
    clock = _Clock()
    scheduler = FrameScheduler(clock=clock)
    fired: list[int] = []
    handle = scheduler.after(1.0, lambda: fired.append(1))
    scheduler.cancel_after(handle)
    scheduler.cancel_after(handle)
    scheduler.cancel_frame(12345)

    clock.now = 5.0
    scheduler.tick()
    assert fired == []
    assert scheduler.pending_timers == 0
