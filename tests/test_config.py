from __future__ import annotations

from basic_face.config import Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config == Config()
    assert config.blink.duration == 0.15
    assert config.blink.interval_min == 2.0
    assert config.blink.interval_max == 5.0
    assert config.mouth.smoothing == 0.7
    assert config.mouth.gain == 1.5
    assert config.face.color is None


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


def test_partial_sections_keep_other_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "display:\n"
        "  width: 256\n"
        "face:\n"
        "  color: '#FFB347'\n"
        "blink:\n"
        "  speed: 2.0\n"
        "mouth:\n"
        "  gain: 2.5\n"
        "audio:\n"
        "  level: 0.5\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(str(path))

    assert config.display.width == 256
    assert config.display.height == 400
    assert config.display.mode == "RGBA"
    assert config.face.color == "#FFB347"
    assert config.blink.speed == 2.0
    assert config.blink.duration == 0.15
    assert config.mouth.gain == 2.5
    assert config.mouth.smoothing == 0.7
    assert config.audio.level == 0.5
    assert config.audio.sample_rate == 16000
    assert config.log_level == "DEBUG"
