"""Low-pass smoothing of a raw volume signal into mouth openness."""

from basic_face.config import MouthConfig


class VolumeSmoother:
    """Single-pole exponential smoother: s <- s * smoothing + v * (1 - smoothing).

    The smoothed value is never clamped; mouth geometry has its own floor.
    """

    def __init__(self, smoothing: float = 0.7, gain: float = 1.5):
        self._smoothing = smoothing
        self._gain = gain
        self._value = 0.0
        self._last_sample: float | None = None

    @classmethod
    def from_config(cls, config: MouthConfig) -> "VolumeSmoother":
        return cls(smoothing=config.smoothing, gain=config.gain)

    @property
    def value(self) -> float:
        return self._value

    @property
    def mouth_scale(self) -> float:
        return self._value * self._gain

    def push(self, sample: float) -> float:
        """Fold in one delivered sample. Returns the new mouth_scale."""
        self._value = self._value * self._smoothing + sample * (1.0 - self._smoothing)
        self._last_sample = sample
        return self.mouth_scale

    def poll(self, source) -> float:
        """Read source.volume and fold it in only if it changed since the last read."""
        sample = source.volume
        if sample != self._last_sample:
            self.push(sample)
        return self.mouth_scale

    def reset(self):
        self._value = 0.0
        self._last_sample = None
