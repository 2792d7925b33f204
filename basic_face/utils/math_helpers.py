import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (0.0-1.0)."""
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min_val and max_val."""
    return max(min_val, min(max_val, value))


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """GLSL smoothstep: cubic Hermite between edge0 and edge1."""
    # Scale, bias and saturate to 0..1
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3 - 2 * t)


# Easing curves, all mapping 0..1 onto 0..1

def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_out_expo(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - (t - 1) ** 2)


def ease_out_quint(t: float) -> float:
    return 1 - (1 - t) ** 5
