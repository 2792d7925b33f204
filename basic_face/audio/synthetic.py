"""Talking-like test signal for running the face without a microphone."""

import random

import numpy as np


class SyntheticSpeech:
    """Generates int16 PCM: a tone shaped into syllables, with pauses between phrases."""

    def __init__(self, sample_rate: int = 16000, pitch: float = 180.0,
                 syllable_rate: float = 4.0, level: float = 0.3,
                 seed: int | None = None):
        self._rate = sample_rate
        self._pitch = pitch
        self._syllable_rate = syllable_rate
        self._level = level
        self._rng = random.Random(seed)

        self._position = 0  # samples generated so far
        self._talking = True
        self._segment_end = self._next_segment_length(talking=True)

    @property
    def talking(self) -> bool:
        return self._talking

    def _next_segment_length(self, talking: bool) -> float:
        # Phrases of 1-3s, pauses of 0.3-1.2s
        if talking:
            return self._rng.uniform(1.0, 3.0)
        return self._rng.uniform(0.3, 1.2)

    def chunk(self, duration: float) -> bytes:
        """Next `duration` seconds of audio as little-endian int16 bytes."""
        n = max(0, int(round(duration * self._rate)))
        start_s = self._position / self._rate
        if start_s >= self._segment_end:
            self._talking = not self._talking
            self._segment_end = start_s + self._next_segment_length(self._talking)

        t = (self._position + np.arange(n)) / self._rate
        self._position += n

        if not self._talking:
            return np.zeros(n, dtype="<i2").tobytes()

        envelope = np.abs(np.sin(np.pi * self._syllable_rate * t))
        tone = np.sin(2 * np.pi * self._pitch * t)
        wave = self._level * envelope * tone
        return (np.clip(wave, -1.0, 1.0) * 32767).astype("<i2").tobytes()
