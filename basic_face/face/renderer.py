"""Procedural cartoon face: gradient face disc, two blinking eyes and a D-shaped mouth."""

import logging
import math
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from basic_face.config import DisplayConfig, FaceConfig
from basic_face.face.face_state import FaceParameters

log = logging.getLogger("basic-face")

FACE_MARGIN = 10
LIGHTEN_AMOUNT = 40
MIN_MOUTH_HALF_HEIGHT = 5

WHITE = (255, 255, 255)
DARK = (51, 51, 51)
GLINT = (255, 255, 255, 230)  # 90% white

# Fill used to clear each supported surface mode
_CLEAR = {
    "RGB": (0, 0, 0),
    "RGBA": (0, 0, 0, 0),
}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


@dataclass
class FaceLayout:
    """Feature positions and sizes, all proportional to the surface size."""

    center_x: float
    center_y: float
    radius: float
    eye_radius: float
    pupil_radius: float
    eye_offset_x: float
    eye_offset_y: float
    mouth_center_y: float
    mouth_half_width: float
    mouth_height_factor: float


def face_layout(width: int, height: int) -> FaceLayout:
    center_x = width / 2
    center_y = height / 2
    eye_radius = width / 16
    return FaceLayout(
        center_x=center_x,
        center_y=center_y,
        radius=width / 2 - FACE_MARGIN,
        eye_radius=eye_radius,
        pupil_radius=eye_radius / 2,
        eye_offset_x=width / 5,
        eye_offset_y=-height / 12,
        mouth_center_y=center_y + height / 7,
        mouth_half_width=width / 8,
        mouth_height_factor=height / 6,
    )


def lid_offset(eye_radius: float, eye_scale: float) -> float:
    """Vertical offset of the eyelid center from the eye center.
    -2r (retracted above the eye) at eye_scale 1, 0 (covering it) at 0."""
    return -eye_radius * 2 + eye_radius * 2 * (1 - eye_scale)


def mouth_half_height(layout: FaceLayout, mouth_scale: float) -> float:
    return max(MIN_MOUTH_HALF_HEIGHT, layout.mouth_height_factor * mouth_scale)


def lighten_color(color: str | None, amount: int = LIGHTEN_AMOUNT) -> tuple | None:
    """Lighter variant of a "#RRGGBB" color, or None if color isn't one."""
    if not color or len(color) != 7 or not color.startswith("#"):
        return None
    if not set(color[1:]) <= _HEX_DIGITS:
        return None
    channels = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return tuple(max(0, min(255, c + amount)) for c in channels)


def _resolve_color(color: str | None) -> tuple:
    if not color:
        return WHITE
    try:
        return ImageColor.getrgb(color)[:3]
    except ValueError:
        log.warning(f"Unrecognized face color {color!r}, using white")
        return WHITE


def _circle(draw: ImageDraw.ImageDraw, cx: float, cy: float, r: float, fill):
    if r <= 0:
        return
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill)


def _radial_gradient(size: tuple, cx: float, cy: float, r0: float, r1: float,
                     inner: tuple, outer: tuple) -> Image.Image:
    """RGB image shaded from inner (within r0) to outer (at r1 and beyond)."""
    width, height = size
    ys, xs = np.mgrid[0:height, 0:width]
    dist = np.hypot(xs + 0.5 - cx, ys + 0.5 - cy)
    t = np.clip((dist - r0) / (r1 - r0), 0.0, 1.0)[..., np.newaxis]
    inner_arr = np.asarray(inner, dtype=np.float64)
    outer_arr = np.asarray(outer, dtype=np.float64)
    rgb = inner_arr + (outer_arr - inner_arr) * t
    return Image.fromarray(np.round(rgb).astype(np.uint8))


@dataclass
class FaceFill:
    """Face disc gradient, its circular mask and the lid color for one size and color."""

    size: tuple
    color: str | None
    base: tuple
    gradient: Image.Image | None
    mask: Image.Image | None


def face_fill(size: tuple, color: str | None = None) -> FaceFill:
    """Build the parts of the face that only change with size or color."""
    layout = face_layout(*size)
    base = _resolve_color(color)
    inner = lighten_color(color) or base
    if layout.radius <= 0:
        return FaceFill(size=size, color=color, base=base, gradient=None, mask=None)

    cx, cy, r = layout.center_x, layout.center_y, layout.radius
    gradient = _radial_gradient(size, cx, cy, r * 0.5, r, inner, base)
    mask = Image.new("L", size, 0)
    _circle(ImageDraw.Draw(mask), cx, cy, r, 255)
    return FaceFill(size=size, color=color, base=base, gradient=gradient, mask=mask)


def _draw_eye(surface: Image.Image, layout: FaceLayout, ex: float, ey: float,
              eye_scale: float, lid_color: tuple):
    """Draw one eye on its own layer, then paste it through a circular clip."""
    r = layout.eye_radius
    pr = layout.pupil_radius

    # Layer covers just the eye; integer origin keeps the rasterization unchanged
    x0 = math.floor(ex - r)
    y0 = math.floor(ey - r)
    box = (math.ceil(ex + r) - x0 + 1, math.ceil(ey + r) - y0 + 1)
    lx, ly = ex - x0, ey - y0

    # Opaque RGB layer so the glint blends onto the pupil
    layer = Image.new("RGB", box, (0, 0, 0))
    d = ImageDraw.Draw(layer, "RGBA")

    # 1. Sclera
    _circle(d, lx, ly, r, WHITE)

    # 2. Pupil
    _circle(d, lx, ly, pr, DARK)

    # 3. Glint, up and to the left
    _circle(d, lx - pr * 0.3, ly - pr * 0.3, pr / 2.5, GLINT)

    # 4. Eyelid, drawn last so it covers everything as it drops
    _circle(d, lx, ly + lid_offset(r, eye_scale), r * 1.5, lid_color)

    clip = Image.new("L", box, 0)
    _circle(ImageDraw.Draw(clip), lx, ly, r, 255)
    surface.paste(layer, (x0, y0), clip)


def _draw_mouth(surface: Image.Image, layout: FaceLayout, mouth_scale: float):
    """Lower half of an ellipse: flat edge up."""
    cx, my = layout.center_x, layout.mouth_center_y
    hw = layout.mouth_half_width
    hh = mouth_half_height(layout, mouth_scale)
    d = ImageDraw.Draw(surface, "RGBA")
    d.pieslice([cx - hw, my - hh, cx + hw, my + hh], start=0, end=180,
               fill=DARK + (255,))


def render_face(surface: Image.Image, eye_scale: float, mouth_scale: float,
                color: str | None = None, fill: FaceFill | None = None):
    """Clear surface and draw the whole face on it.

    Geometry scales with the surface size. eye_scale and mouth_scale are
    used as given; out-of-range values extrapolate the lid and mouth.
    fill is an optional face_fill() result for this surface size and color;
    one that doesn't match is rebuilt.
    """
    if surface.mode not in _CLEAR:
        raise ValueError(f"Unsupported surface mode {surface.mode!r}, use RGB or RGBA")

    width, height = surface.size
    layout = face_layout(width, height)

    if fill is None or fill.size != surface.size or fill.color != color:
        fill = face_fill(surface.size, color)

    surface.paste(_CLEAR[surface.mode], (0, 0, width, height))

    if fill.gradient is not None:
        surface.paste(fill.gradient, (0, 0), fill.mask)

    ey = layout.center_y + layout.eye_offset_y
    for ex in (layout.center_x - layout.eye_offset_x,
               layout.center_x + layout.eye_offset_x):
        _draw_eye(surface, layout, ex, ey, eye_scale, fill.base)

    _draw_mouth(surface, layout, mouth_scale)


class FaceRenderer:
    """Renders faces into a preallocated image of the configured size.

    The face gradient and mask are built once per color.
    """

    def __init__(self, display: DisplayConfig, face: FaceConfig):
        if display.mode not in _CLEAR:
            raise ValueError(f"Unsupported display mode {display.mode!r}, use RGB or RGBA")
        self._img = Image.new(display.mode, (display.width, display.height),
                              _CLEAR[display.mode])
        self._fill = face_fill(self._img.size, face.color)

    @property
    def color(self) -> str | None:
        return self._fill.color

    @color.setter
    def color(self, color: str | None):
        if color != self._fill.color:
            self._fill = face_fill(self._img.size, color)

    @property
    def fill(self) -> FaceFill:
        return self._fill

    def render(self, params: FaceParameters) -> Image.Image:
        """Render from params. Returns the internal image (do not modify)."""
        render_face(self._img, params.eye_scale, params.mouth_scale,
                    self._fill.color, self._fill)
        return self._img
