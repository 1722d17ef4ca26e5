"""
Pytest configuration and fixtures for gesture configuration tests.
"""

from pathlib import Path

import pytest

from gesture_config.paths import ConfigPaths

from .samples import SAMPLE_CONFIG, RecordingStore


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def home_dir(tmp_path) -> Path:
    home = tmp_path / "home" / "user"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def system_dir(tmp_path) -> Path:
    system = tmp_path / "usr" / "share" / "touchegg"
    system.mkdir(parents=True)
    return system


@pytest.fixture
def config_paths(home_dir, system_dir) -> ConfigPaths:
    return ConfigPaths(home=home_dir, system_config_dir=system_dir)


@pytest.fixture
def system_config(config_paths) -> Path:
    """Installed default configuration."""
    config_paths.system_config_file.write_text(SAMPLE_CONFIG)
    return config_paths.system_config_file


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(content: str, name: str = "touchegg.conf") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
