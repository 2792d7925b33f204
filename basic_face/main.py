#!/usr/bin/env python3
"""Basic Face - render loop entry point."""

import argparse
import logging
import signal
import time
from pathlib import Path

from basic_face.animation.animator import FaceAnimator
from basic_face.audio.synthetic import SyntheticSpeech
from basic_face.audio.volume_meter import PcmVolumeMeter
from basic_face.config import load_config
from basic_face.face.renderer import FaceRenderer
from basic_face.scheduler import FrameScheduler

log = logging.getLogger("basic-face")


class FaceApp:
    def __init__(self, config_path: str = "config.yaml", output_dir: str | None = None,
                 color: str | None = None):
        self.config = load_config(config_path)
        if color is not None:
            self.config.face.color = color
        self._output_dir = Path(output_dir) if output_dir else None
        self._running = False
        self._render_fps = 0.0
        self.scheduler: FrameScheduler | None = None
        self.frames_rendered = 0

    def start(self, seconds: float | None = None):
        self._running = True

        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        if self._output_dir is not None:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            log.info(f"Writing frames to {self._output_dir}")

        audio_cfg = self.config.audio
        speech = SyntheticSpeech(
            sample_rate=audio_cfg.sample_rate,
            pitch=audio_cfg.pitch,
            syllable_rate=audio_cfg.syllable_rate,
            level=audio_cfg.level,
        )
        meter = PcmVolumeMeter()

        scheduler = self.scheduler = FrameScheduler()
        animator = FaceAnimator(scheduler, meter, self.config)
        renderer = FaceRenderer(self.config.display, self.config.face)
        animator.start()

        target_fps = self.config.display.fps_target
        frame_time = 1.0 / target_fps
        started = time.monotonic()
        last_time = started
        frame_count = 0
        self.frames_rendered = 0
        fps_timer = started

        log.info(f"Entering render loop at {target_fps} FPS target")

        try:
            while self._running:
                now = time.monotonic()
                dt = now - last_time
                last_time = now

                if seconds is not None and now - started >= seconds:
                    break

                # Audio for the elapsed frame interval
                meter.feed(speech.chunk(dt))

                # Advance blink timers and frame callbacks, then read both signals
                scheduler.tick(now)
                params = animator.update()

                img = renderer.render(params)
                if self._output_dir is not None:
                    img.save(self._output_dir / f"frame_{self.frames_rendered:05d}.png")
                self.frames_rendered += 1

                # FPS counting
                frame_count += 1
                if now - fps_timer >= 1.0:
                    self._render_fps = frame_count / (now - fps_timer)
                    frame_count = 0
                    fps_timer = now
                    log.info(f"Render FPS: {self._render_fps:.1f} "
                             f"(eyes {params.eye_scale:.2f}, mouth {params.mouth_scale:.2f})")

                # Frame rate limiting
                elapsed = time.monotonic() - now
                sleep_time = frame_time - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            log.info("Interrupted")
        finally:
            self._running = False
            animator.dispose()
            log.info(f"Rendered {self.frames_rendered} frames")

    def stop(self):
        self._running = False


def main():
    parser = argparse.ArgumentParser(description="Basic Face")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--seconds", type=float, default=None,
                        help="Stop after this many seconds (default: run until stopped)")
    parser.add_argument("--output-dir", default=None, help="Save every frame as PNG here")
    parser.add_argument("--color", default=None, help="Face color, e.g. #FFB347")
    args = parser.parse_args()

    app = FaceApp(config_path=args.config, output_dir=args.output_dir, color=args.color)

    # Handle SIGTERM gracefully
    signal.signal(signal.SIGTERM, lambda *_: app.stop())

    app.start(seconds=args.seconds)


if __name__ == "__main__":
    main()
