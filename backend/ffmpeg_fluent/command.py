"""The fluent ffmpeg command builder."""

import logging
from typing import List, Optional

from ffmpeg_fluent.audio_codec import AudioCodecMixin
from ffmpeg_fluent.audio_filters import AudioFilterMixin
from ffmpeg_fluent.command_generator import build_arguments
from ffmpeg_fluent.config import get_settings
from ffmpeg_fluent.input import Input, InputMixin
from ffmpeg_fluent.models import CommandSnapshot
from ffmpeg_fluent.output import Output, OutputMixin
from ffmpeg_fluent.preset_loader import PresetMixin
from ffmpeg_fluent.stream_mapping import StreamMappingMixin
from ffmpeg_fluent.validation import validate_command
from ffmpeg_fluent.video_codec import VideoCodecMixin
from ffmpeg_fluent.video_filters import VideoFilterMixin


class FfmpegCommand(
    InputMixin,
    OutputMixin,
    AudioCodecMixin,
    AudioFilterMixin,
    VideoCodecMixin,
    VideoFilterMixin,
    StreamMappingMixin,
    PresetMixin,
):
    """Chainable description of an ffmpeg job with several inputs and outputs.

    Input options go to the most recently added input and output options
    to the most recently added output::

        command = (
            FfmpegCommand("/media/in.mp4")
            .seek_input(10)
            .add_output("/media/out.webm")
            .video_codec("libvpx-vp9")
            .audio_codec("libopus")
            .audio_bitrate(96)
        )
        args = command.get_arguments()

    A command starts with one output that has no target yet, so single
    output jobs can set output options before (or without ever) calling
    add_output(). Nothing here touches the filesystem or runs ffmpeg.

    Args:
        source: Optional first input (path/URI or readable stream).
        presets_dir: Directory searched for named presets. Defaults to the
            configured ``presets_dir``.
        logger: Logger for builder events. Defaults to this module's logger.
    """

    def __init__(
        self,
        source=None,
        presets_dir: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.presets_dir = presets_dir if presets_dir is not None else get_settings().presets_dir
        self._inputs: List[Input] = []
        self._outputs: List[Output] = []
        self._current_input_index: Optional[int] = None
        self._current_output_index: Optional[int] = None

        if source is not None:
            self.add_input(source)
        self.add_output()

    def snapshot(self) -> CommandSnapshot:
        """Return a frozen copy of the command for argument generation."""
        return CommandSnapshot(
            inputs=tuple(i.snapshot() for i in self._inputs),
            outputs=tuple(o.snapshot() for o in self._outputs),
        )

    def validate(self):
        """Check the command; see :func:`ffmpeg_fluent.validation.validate_command`."""
        return validate_command(self)

    def get_arguments(self) -> List[str]:
        """Return the ffmpeg argument list (without the binary)."""
        return build_arguments(self)

    def __repr__(self) -> str:
        return f"<FfmpegCommand inputs={len(self._inputs)} outputs={len(self._outputs)}>"
