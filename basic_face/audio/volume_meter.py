"""Volume readings from raw PCM audio chunks."""

import numpy as np


def compute_rms_volume(pcm_chunk: bytes) -> float:
    """RMS of a little-endian int16 PCM chunk, normalized to 0..1."""
    n_samples = len(pcm_chunk) // 2
    if n_samples == 0:
        return 0.0
    samples = np.frombuffer(pcm_chunk[: n_samples * 2], dtype="<i2").astype(np.float64)
    rms = np.sqrt(np.mean(samples * samples)) / 32768.0
    return float(min(1.0, rms))


class PcmVolumeMeter:
    """Holds the volume of the most recent chunk, read via `volume`."""

    def __init__(self):
        self.volume = 0.0

    def feed(self, pcm_chunk: bytes) -> float:
        self.volume = compute_rms_volume(pcm_chunk)
        return self.volume

    def reset(self):
        self.volume = 0.0
