"""
Unit tests for the FFMPEG Fluent audio filter module.
"""
import pytest

from ffmpeg_fluent import FilterDescriptor
from ffmpeg_fluent.errors import InvalidFilterError

from tests.fixtures.ffmpeg_factories import create_filter_spec


class TestAudioFilters:
    """Tests for adding audio filters to the current output."""

    def test_single_string(self, file_command):
        file_command.audio_filters("volume=2")
        assert file_command.current_output.audio_filters.to_list() == ["volume=2"]

    def test_string_list(self, file_command):
        file_command.audio_filters(["volume=2", "atempo=1.5"])
        assert file_command.current_output.audio_filters.to_list() == ["volume=2", "atempo=1.5"]

    def test_descriptor_with_mapping(self, file_command):
        file_command.audio_filters(create_filter_spec("volume", {"v": "2"}))
        assert file_command.current_output.audio_filters.to_list() == ["volume=v=2"]

    def test_variadic_mixed(self, file_command):
        file_command.audio_filters(
            FilterDescriptor("highpass", {"f": 200}),
            "lowpass=f=3000",
            create_filter_spec("aecho", ["0.8", "0.9", "1000", "0.3"]),
        )
        assert file_command.current_output.audio_filters.to_list() == [
            "highpass=f=200",
            "lowpass=f=3000",
            "aecho=0.8:0.9:1000:0.3",
        ]

    def test_calls_accumulate(self, file_command):
        """Each call appends its own tokens; chains are never merged."""
        file_command.audio_filters("volume=2").audio_filters("atempo=1.5")
        assert file_command.current_output.audio_filters.to_list() == ["volume=2", "atempo=1.5"]

    def test_empty_call_is_noop(self, file_command):
        file_command.audio_filters()
        assert file_command.current_output.audio_filters.to_list() == []

    def test_invalid_filter_leaves_state(self, file_command):
        """A bad item in a call appends nothing from that call."""
        file_command.audio_filters("volume=2")

        with pytest.raises(InvalidFilterError):
            file_command.audio_filters("atempo=1.5", 3)

        assert file_command.current_output.audio_filters.to_list() == ["volume=2"]
