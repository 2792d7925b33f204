from dataclasses import dataclass


@dataclass
class FaceParameters:
    """Shape parameters for a single frame."""

    # Eye openness: 1.0 = open, 0.0 = closed
    eye_scale: float = 1.0

    # Mouth openness multiplier, 0.0 = resting (still drawn a few px tall)
    mouth_scale: float = 0.0
