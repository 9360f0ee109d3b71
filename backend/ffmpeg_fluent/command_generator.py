"""Argument list generation from a built command."""

import logging
from typing import List, Optional

from ffmpeg_fluent.config import get_settings
from ffmpeg_fluent.errors import IncompleteCommandError
from ffmpeg_fluent.models import InputSnapshot, OutputSnapshot
from ffmpeg_fluent.validation import as_snapshot, validate_command

logger = logging.getLogger(__name__)

STDIN_PIPE = "pipe:0"
STDOUT_PIPE = "pipe:1"


def generate_input_flags(source: InputSnapshot) -> List[str]:
    """Input options followed by ``-i <source>``."""
    flags = list(source.options)
    flags.extend(["-i", STDIN_PIPE if source.is_stream else source.source])
    return flags


def generate_output_flags(output: OutputSnapshot) -> List[str]:
    """Audio, video and generic options of one output, target last."""
    flags: List[str] = list(output.audio)

    if output.audio_filters:
        flags.extend(["-filter:a", ",".join(output.audio_filters)])

    flags.extend(output.video)

    # Size filters run after the user's video filters
    video_filters = list(output.video_filters) + list(output.size_filters)
    if video_filters:
        flags.extend(["-filter:v", ",".join(video_filters)])

    flags.extend(output.options)

    # Output target is always last
    flags.append(STDOUT_PIPE if output.is_stream else output.target)
    return flags


def build_arguments(command) -> List[str]:
    """Generate the ffmpeg argument list for a command (or its snapshot).

    Argument order: [input_opts] -i <input> ... then for every output
                    [audio] [-filter:a] [video] [-filter:v] [options] <output>

    Raises:
        IncompleteCommandError: the command has no input or an output
            without a target.
    """
    snapshot = as_snapshot(command)

    result = validate_command(snapshot)
    if not result.valid:
        raise IncompleteCommandError(result)
    for warning in result.warnings:
        logger.warning("%s", warning)

    args: List[str] = []
    for source in snapshot.inputs:
        args.extend(generate_input_flags(source))
    for output in snapshot.outputs:
        args.extend(generate_output_flags(output))

    logger.debug("Generated %d arguments for %d input(s) and %d output(s)",
                 len(args), len(snapshot.inputs), len(snapshot.outputs))
    return args


def generate_command(command, ffmpeg_path: Optional[str] = None) -> List[str]:
    """Generate a complete command list, binary first."""
    binary = ffmpeg_path or get_settings().ffmpeg_path
    return [binary] + build_arguments(command)
