import random

from basic_face.animation.blink import BlinkController
from basic_face.animation.volume import VolumeSmoother
from basic_face.config import Config
from basic_face.face.face_state import FaceParameters
from basic_face.scheduler import FrameScheduler


class FaceAnimator:
    """Combines blink and mouth signals into FaceParameters each frame.

    volume_source is anything exposing a current `volume` float.
    """

    def __init__(self, scheduler: FrameScheduler, volume_source, config: Config,
                 rng: random.Random | None = None):
        self._blink = BlinkController(scheduler, config.blink, rng)
        self._smoother = VolumeSmoother.from_config(config.mouth)
        self._source = volume_source
        self._params = FaceParameters()

    @property
    def blink(self) -> BlinkController:
        return self._blink

    @property
    def smoother(self) -> VolumeSmoother:
        return self._smoother

    def start(self):
        self._blink.start()

    def update(self) -> FaceParameters:
        """Read both signals. Call after the scheduler has ticked for this frame."""
        self._params.mouth_scale = self._smoother.poll(self._source)
        self._params.eye_scale = self._blink.eye_scale
        return self._params

    def dispose(self):
        self._blink.dispose()
