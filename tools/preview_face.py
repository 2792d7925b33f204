#!/usr/bin/env python3
"""Renders face images to PNG files for checking the drawing on a desktop."""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from basic_face.config import DisplayConfig, FaceConfig
from basic_face.face.face_state import FaceParameters
from basic_face.face.renderer import FaceRenderer


def main():
    previews = {
        "open": (None, FaceParameters()),
        "blink_half": (None, FaceParameters(eye_scale=0.5)),
        "blink_full": (None, FaceParameters(eye_scale=0.0)),
        "talking": (None, FaceParameters(mouth_scale=0.6)),
        "shouting": (None, FaceParameters(mouth_scale=1.2)),
        "orange": ("#FFB347", FaceParameters(mouth_scale=0.3)),
        "orange_blink": ("#FFB347", FaceParameters(eye_scale=0.2)),
        "named_color": ("lightblue", FaceParameters(eye_scale=0.7, mouth_scale=0.4)),
    }

    renderer = FaceRenderer(DisplayConfig(width=400, height=400), FaceConfig())

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "preview_output")
    os.makedirs(out_dir, exist_ok=True)

    for name, (color, params) in previews.items():
        renderer.color = color
        img = renderer.render(params)
        path = os.path.join(out_dir, f"{name}.png")
        # Copy image since renderer reuses internal buffer
        img.copy().save(path)
        print(f"Saved {path}")

    print(f"\nAll previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
