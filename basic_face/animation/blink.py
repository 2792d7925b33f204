import logging
import math
import random
from dataclasses import dataclass
from enum import Enum, auto

from basic_face.config import BlinkConfig
from basic_face.scheduler import FrameScheduler
from basic_face.utils.math_helpers import clamp

log = logging.getLogger("basic-face")


class Phase(Enum):
    IDLE = auto()
    BLINKING = auto()


@dataclass
class BlinkSession:
    duration: float
    start_time: float | None = None  # set by the first frame of the blink


def blink_curve(u: float) -> float:
    """Eye openness at blink progress u (0..1).
    Half sine: open at 0, closed at 0.5, open again at 1."""
    u = clamp(u, 0.0, 1.0)
    return 1.0 - math.sin(u * math.pi)


class BlinkController:
    """Fires randomized blinks and animates eye_scale through each one.

    Holds at most one idle timer and one frame callback on the scheduler.
    """

    def __init__(self, scheduler: FrameScheduler, config: BlinkConfig,
                 rng: random.Random | None = None):
        if config.speed <= 0:
            raise ValueError(f"blink speed must be positive, got {config.speed}")
        if config.duration <= 0:
            raise ValueError(f"blink duration must be positive, got {config.duration}")
        if config.interval_max < config.interval_min:
            raise ValueError(
                f"blink interval_max ({config.interval_max}) is below "
                f"interval_min ({config.interval_min})"
            )
        self._scheduler = scheduler
        self._cfg = config
        self._rng = rng or random.Random()

        self._phase = Phase.IDLE
        self._eye_scale = 1.0
        self._session: BlinkSession | None = None

        # Outstanding scheduler handles
        self._frame_handle: int | None = None
        self._timer_handle: int | None = None

    @property
    def eye_scale(self) -> float:
        return self._eye_scale

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def session(self) -> BlinkSession | None:
        return self._session

    @property
    def duration(self) -> float:
        """Effective blink length in seconds after applying speed."""
        return self._cfg.duration / self._cfg.speed

    def start(self):
        """Begin the idle/blink cycle. No-op if already running."""
        if self._timer_handle is None:
            self._schedule_next()

    def trigger_blink(self):
        """Start a blink now, superseding any blink still animating."""
        if self._frame_handle is not None:
            self._scheduler.cancel_frame(self._frame_handle)
        self._session = BlinkSession(duration=self.duration)
        self._phase = Phase.BLINKING
        self._frame_handle = self._scheduler.request_frame(self._step)

    def dispose(self):
        """Cancel every outstanding callback. The controller stays inert after."""
        if self._frame_handle is not None:
            self._scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None
        if self._timer_handle is not None:
            self._scheduler.cancel_after(self._timer_handle)
            self._timer_handle = None
        self._session = None
        self._phase = Phase.IDLE

    def _schedule_next(self):
        lo, hi = self._cfg.interval_min, self._cfg.interval_max
        delay = lo + self._rng.random() * (hi - lo)
        self._timer_handle = self._scheduler.after(delay, self._on_timer)
        log.debug(f"Next blink in {delay:.2f}s")

    def _on_timer(self):
        self._timer_handle = None
        self.trigger_blink()
        self._schedule_next()

    def _step(self, timestamp: float):
        self._frame_handle = None
        session = self._session
        if session is None:
            return
        if session.start_time is None:
            session.start_time = timestamp

        progress = timestamp - session.start_time
        self._eye_scale = blink_curve(progress / session.duration)

        if progress < session.duration:
            self._frame_handle = self._scheduler.request_frame(self._step)
        else:
            # Land exactly open regardless of frame timing
            self._eye_scale = 1.0
            self._session = None
            self._phase = Phase.IDLE
