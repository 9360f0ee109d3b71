"""Tests for builder settings."""

import logging

import pytest

from ffmpeg_fluent.config import (
    PACKAGE_LOGGER,
    BuilderSettings,
    clear_settings_cache,
    get_settings,
    set_log_level,
)


class TestBuilderSettings:
    def test_defaults(self):
        settings = BuilderSettings()

        assert settings.ffmpeg_path == "ffmpeg"
        assert settings.presets_dir is None
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FFMPEG_FLUENT_FFMPEG_PATH", "/opt/ffmpeg")
        monkeypatch.setenv("FFMPEG_FLUENT_PRESETS_DIR", "/etc/ffmpeg-presets")

        settings = BuilderSettings()

        assert settings.ffmpeg_path == "/opt/ffmpeg"
        assert settings.presets_dir == "/etc/ffmpeg-presets"


class TestSettingsCache:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_forces_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FFMPEG_FLUENT_FFMPEG_PATH", "/opt/ffmpeg")

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings().ffmpeg_path == "/opt/ffmpeg"


class TestSetLogLevel:
    @pytest.fixture(autouse=True)
    def restore_level(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        original = package_logger.level
        yield
        package_logger.setLevel(original)

    def test_sets_package_logger_level(self):
        set_log_level("debug")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_invalid_level_falls_back_to_info(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ffmpeg_fluent.config"):
            set_log_level("LOUD")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
        assert any("LOUD" in r.getMessage() for r in caplog.records)

    def test_uses_configured_level(self, monkeypatch):
        monkeypatch.setenv("FFMPEG_FLUENT_LOG_LEVEL", "ERROR")
        set_log_level()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
