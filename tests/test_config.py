import dataclasses
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from face_pose_tracker.config.settings import TrackerConfig
from face_pose_tracker.utils import config_loader, logging_config
from face_pose_tracker.utils.config_loader import Config, ConfigSection
from face_pose_tracker.utils.logging_config import get_logger


def test_tracker_config_defaults():
    config = TrackerConfig()
    assert config.max_num_faces == 1
    assert config.min_detection_confidence == 0.5
    assert config.min_tracking_confidence == 0.5
    assert config.enable_segmentation is False
    assert config.use_gpu is False


@pytest.mark.parametrize("kwargs", [
    {'max_num_faces': 0},
    {'min_detection_confidence': 1.5},
    {'min_tracking_confidence': -0.1},
])
def test_tracker_config_validation(kwargs):
    with pytest.raises(ValueError):
        TrackerConfig(**kwargs)


def test_tracker_config_is_immutable():
    config = TrackerConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_num_faces = 3


def test_config_dotted_and_attribute_access(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "tracker:\n"
        "  use_gpu: true\n"
        "  unknown_option: 3\n"
        "logging:\n"
        "  console:\n"
        "    level: DEBUG\n",
        encoding="utf-8",
    )
    config = Config(str(path))

    assert config.get('tracker.use_gpu') is True
    assert config.get('tracker.missing', 'fallback') == 'fallback'
    assert config.logging.console.level == 'DEBUG'
    assert isinstance(config.tracker, ConfigSection)
    with pytest.raises(AttributeError):
        config.nothing_here

    tracker_config = TrackerConfig.from_config(config)
    assert tracker_config.use_gpu is True
    assert tracker_config.max_num_faces == 1


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "absent.yaml"))


def test_config_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("tracker: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Config(str(path))


def test_config_env_override(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("tracker:\n  max_num_faces: 4\n", encoding="utf-8")
    monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(path))

    config = Config()
    assert config.config_path == path
    assert TrackerConfig.from_config(config).max_num_faces == 4


def test_get_logger_does_not_duplicate_handlers():
    logger = get_logger("face_pose_tracker.tests.duplicate")
    count = len(logger.handlers)
    assert get_logger("face_pose_tracker.tests.duplicate") is logger
    assert len(logger.handlers) == count
    assert isinstance(logger, logging.Logger)


def test_tracker_section_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("tracker:\n  - max_num_faces\n", encoding="utf-8")
    config = Config(str(path))

    with pytest.raises(ValueError):
        config.section('tracker')
    with pytest.raises(ValueError):
        TrackerConfig.from_config(config)
    assert config.section('absent') == {}


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- tracker\n- logging\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Config(str(path))


def test_logging_defaults_when_config_is_broken(tmp_path, monkeypatch):
    path = tmp_path / "broken.yaml"
    path.write_text("tracker: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(path))
    monkeypatch.setattr(config_loader, "_global_config", None)

    section = logging_config._load_logging_section()
    assert section.level == 'INFO'
    assert section.console.enabled is True
    assert section.file.enabled is False

    logger = get_logger("face_pose_tracker.tests.broken_config")
    assert logger.handlers


def test_package_imports_with_broken_config(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("tracker: [unclosed\n", encoding="utf-8")
    env = dict(os.environ, **{config_loader.CONFIG_ENV_VAR: str(path)})

    completed = subprocess.run(
        [sys.executable, "-c", "import face_pose_tracker; face_pose_tracker.FaceTracker"],
        cwd=str(Path(__file__).resolve().parents[1]),
        env=env,
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
