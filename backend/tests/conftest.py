"""
Pytest configuration and shared fixtures for backend tests.
"""
import sys
from pathlib import Path

import pytest

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from ffmpeg_fluent import FfmpegCommand
from ffmpeg_fluent.config import clear_settings_cache

SETTINGS_ENV_VARS = (
    "FFMPEG_FLUENT_FFMPEG_PATH",
    "FFMPEG_FLUENT_PRESETS_DIR",
    "FFMPEG_FLUENT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, whatever the environment holds."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def command():
    """A fresh command with only the placeholder output."""
    return FfmpegCommand()


@pytest.fixture
def file_command():
    """A command with one file input and one file output."""
    return FfmpegCommand("/media/input.mp4").add_output("/media/output.mp4")
