"""Tests for log_utils — log injection sanitizer and source rendering."""

import io
import logging
from pathlib import Path

from ffmpeg_fluent import FfmpegCommand
from ffmpeg_fluent.log_utils import (
    _safe_record_factory,
    _sanitize_value,
    describe_source,
    install_safe_logging,
)

from tests.fixtures.ffmpeg_factories import FakeReadable


class TestSanitizeValue:
    def test_strips_newlines(self):
        assert _sanitize_value("in\nput.mp4") == "in\\nput.mp4"

    def test_strips_crlf(self):
        assert _sanitize_value("a\r\nb") == "a\\r\\nb"

    def test_escapes_control_characters(self):
        assert _sanitize_value("a\x1bb") == "a\\x1bb"

    def test_keeps_tabs(self):
        assert _sanitize_value("a\tb") == "a\tb"

    def test_passes_non_strings(self):
        assert _sanitize_value(42) == 42
        assert _sanitize_value(None) is None


class TestSafeRecordFactory:
    def _make_record(self, msg, args):
        return _safe_record_factory(
            "test", logging.INFO, __file__, 0, msg, args, None,
        )

    def test_sanitizes_tuple_args(self):
        record = self._make_record("Added input #%d: %s", (0, "/media/evil\nINFO forged"))
        assert record.getMessage() == "Added input #0: /media/evil\\nINFO forged"

    def test_no_args_unchanged(self):
        record = self._make_record("Simple message", None)
        assert record.getMessage() == "Simple message"


class TestInstallSafeLogging:
    def setup_method(self):
        self._original = logging.getLogRecordFactory()

    def teardown_method(self):
        logging.setLogRecordFactory(self._original)

    def test_installs_factory(self):
        install_safe_logging()
        assert logging.getLogRecordFactory() is _safe_record_factory


class TestDescribeSource:
    def test_path_string(self):
        assert describe_source("/media/in.mp4") == "/media/in.mp4"

    def test_pathlike(self):
        assert describe_source(Path("/media/in.mp4")) == "/media/in.mp4"

    def test_stream(self):
        assert describe_source(io.BytesIO()) == "<stream BytesIO>"

    def test_none(self):
        assert describe_source(None) == "<none>"


class TestBuilderLogging:
    def test_input_registration_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ffmpeg_fluent"):
            FfmpegCommand(FakeReadable())

        messages = [r.getMessage() for r in caplog.records]
        assert any("<stream FakeReadable>" in m for m in messages)

    def test_custom_logger(self):
        logger = logging.getLogger("tests.builder")
        command = FfmpegCommand(logger=logger)

        assert command.logger is logger
