from dataclasses import dataclass, field
from pathlib import Path
import yaml


@dataclass
class DisplayConfig:
    width: int = 400
    height: int = 400
    fps_target: int = 60
    mode: str = "RGBA"


@dataclass
class FaceConfig:
    # "#RRGGBB" gets a lightened gradient center; other colors are drawn flat
    color: str | None = None


@dataclass
class BlinkConfig:
    interval_min: float = 2.0
    interval_max: float = 5.0
    duration: float = 0.15
    speed: float = 1.0


@dataclass
class MouthConfig:
    smoothing: float = 0.7
    gain: float = 1.5


@dataclass
class AudioConfig:
    sample_rate: int = 16000
    pitch: float = 180.0
    syllable_rate: float = 4.0
    level: float = 0.3


@dataclass
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    face: FaceConfig = field(default_factory=FaceConfig)
    blink: BlinkConfig = field(default_factory=BlinkConfig)
    mouth: MouthConfig = field(default_factory=MouthConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "display" in data:
        d = data["display"]
        config.display = DisplayConfig(
            width=d.get("width", config.display.width),
            height=d.get("height", config.display.height),
            fps_target=d.get("fps_target", config.display.fps_target),
            mode=d.get("mode", config.display.mode),
        )

    if "face" in data:
        config.face = FaceConfig(
            color=data["face"].get("color", config.face.color),
        )

    if "blink" in data:
        b = data["blink"]
        config.blink = BlinkConfig(
            interval_min=b.get("interval_min", config.blink.interval_min),
            interval_max=b.get("interval_max", config.blink.interval_max),
            duration=b.get("duration", config.blink.duration),
            speed=b.get("speed", config.blink.speed),
        )

    if "mouth" in data:
        m = data["mouth"]
        config.mouth = MouthConfig(
            smoothing=m.get("smoothing", config.mouth.smoothing),
            gain=m.get("gain", config.mouth.gain),
        )

    if "audio" in data:
        a = data["audio"]
        config.audio = AudioConfig(
            sample_rate=a.get("sample_rate", config.audio.sample_rate),
            pitch=a.get("pitch", config.audio.pitch),
            syllable_rate=a.get("syllable_rate", config.audio.syllable_rate),
            level=a.get("level", config.audio.level),
        )

    if "logging" in data:
        config.log_level = data["logging"].get("level", config.log_level)

    return config
