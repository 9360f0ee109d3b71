"""
FFMPEG Fluent - chainable construction of ffmpeg command lines.

Provides a builder for multi-input, multi-output ffmpeg jobs, filter
normalization, validation, and argument generation.
"""

from ffmpeg_fluent.args import Args
from ffmpeg_fluent.command import FfmpegCommand
from ffmpeg_fluent.command_generator import build_arguments, generate_command
from ffmpeg_fluent.common import ValidationResult
from ffmpeg_fluent.errors import (
    DuplicateStreamInputError,
    DuplicateStreamOutputError,
    FfmpegCommandError,
    IncompleteCommandError,
    InvalidFilterError,
    InvalidInputError,
    InvalidOutputError,
    NoCurrentInputError,
    PresetLoadError,
)
from ffmpeg_fluent.filters import FilterDescriptor, make_filter_strings
from ffmpeg_fluent.models import CommandSnapshot, InputSnapshot, OutputSnapshot
from ffmpeg_fluent.validation import validate_command

__version__ = "0.1.0"

__all__ = [
    "Args",
    "FfmpegCommand",
    "FilterDescriptor",
    "make_filter_strings",
    "build_arguments",
    "generate_command",
    "validate_command",
    "ValidationResult",
    "CommandSnapshot",
    "InputSnapshot",
    "OutputSnapshot",
    "FfmpegCommandError",
    "InvalidInputError",
    "InvalidOutputError",
    "DuplicateStreamInputError",
    "DuplicateStreamOutputError",
    "NoCurrentInputError",
    "InvalidFilterError",
    "PresetLoadError",
    "IncompleteCommandError",
]
