"""Consistency checks for a built command before its arguments are generated."""

import os
from typing import Optional, Sequence

from ffmpeg_fluent.args import Args
from ffmpeg_fluent.common import ValidationResult
from ffmpeg_fluent.models import CommandSnapshot, OutputSnapshot

# Map of format -> typical file extension(s)
FORMAT_EXTENSIONS = {
    "mp4": {"mp4", "m4v"},
    "m4v": {"m4v", "mp4"},
    "matroska": {"mkv", "mka"},
    "webm": {"webm"},
    "mpegts": {"ts", "m2ts", "mts"},
    "flv": {"flv"},
    "avi": {"avi"},
    "mov": {"mov"},
    "ogg": {"ogg", "ogv", "oga"},
    "mp3": {"mp3"},
    "wav": {"wav"},
    "hls": {"m3u8"},
    "dash": {"mpd"},
    "null": set(),
}


def as_snapshot(command) -> CommandSnapshot:
    if isinstance(command, CommandSnapshot):
        return command
    return command.snapshot()


def _option_value(tokens: Sequence[str], flag: str) -> Optional[str]:
    found = Args(tokens).find(flag)
    return found[0] if found else None


def _extension(target: str) -> str:
    return os.path.splitext(target)[1].lstrip(".").lower()


def validate_output(output: OutputSnapshot, index: int) -> ValidationResult:
    """Validate one output's options against each other."""
    result = ValidationResult()
    label = f"Output #{index}"

    if output.target is None:
        result.add_error(f"{label} has no target")

    audio_codec = _option_value(output.audio, "-acodec")
    if audio_codec == "copy" and output.audio_filters:
        result.add_warning(f"{label}: audio filters will be ignored when audio codec is 'copy'")

    video_codec = _option_value(output.video, "-vcodec")
    if video_codec == "copy" and (output.video_filters or output.size_filters):
        result.add_warning(f"{label}: video filters will be ignored when video codec is 'copy'")

    if "-an" in output.audio and len(output.audio) > 1:
        result.add_warning(f"{label}: audio options are set but audio is disabled (-an)")
    if "-vn" in output.video and len(output.video) > 1:
        result.add_warning(f"{label}: video options are set but video is disabled (-vn)")

    for flag, tokens in (("-acodec", output.audio), ("-vcodec", output.video)):
        if tokens.count(flag) > 1:
            result.add_warning(f"{label}: {flag} given more than once, the last one wins")

    fmt = _option_value(output.options, "-f")
    ext = _extension(output.target) if output.is_file else ""

    # Warn on extension/format mismatch
    if fmt and ext:
        expected_exts = FORMAT_EXTENSIONS.get(fmt, set())
        if expected_exts and ext not in expected_exts:
            result.add_warning(
                f"{label}: file extension '.{ext}' does not match format '{fmt}' "
                f"(expected: {', '.join('.' + e for e in sorted(expected_exts))})"
            )

    if output.flags.get("flvmeta") and (fmt or ext) and (fmt or ext) != "flv":
        result.add_warning(f"{label}: flvmeta requested for a non-flv output")

    return result


def validate_command(command) -> ValidationResult:
    """Validate a command (or its snapshot).

    Returns a ValidationResult with errors for commands ffmpeg cannot run
    and warnings for options that are ignored or overridden.
    """
    snapshot = as_snapshot(command)
    result = ValidationResult()

    if not snapshot.inputs:
        result.add_error("At least one input is required")

    for index, output in enumerate(snapshot.outputs):
        result.merge(validate_output(output, index))

    return result
