"""Output registration and generic output options."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ffmpeg_fluent.args import Args
from ffmpeg_fluent.common import has_capability, is_file_uri, is_path_like, split_custom_options
from ffmpeg_fluent.errors import DuplicateStreamOutputError, InvalidOutputError
from ffmpeg_fluent.log_utils import describe_source
from ffmpeg_fluent.models import OutputSnapshot


@dataclass
class Output:
    """One ffmpeg output.

    ``target`` is None only for the placeholder output a command creates
    on construction, which the first add_output() call fills in.
    """

    target: Any = None
    is_file: bool = False
    pipe_options: Dict[str, Any] = field(default_factory=dict)
    flags: Dict[str, bool] = field(default_factory=dict)
    options: Args = field(default_factory=Args)
    audio: Args = field(default_factory=Args)
    audio_filters: Args = field(default_factory=Args)
    video: Args = field(default_factory=Args)
    video_filters: Args = field(default_factory=Args)
    size_filters: Args = field(default_factory=Args)

    @property
    def is_stream(self) -> bool:
        return self.target is not None and not isinstance(self.target, str)

    def snapshot(self) -> OutputSnapshot:
        return OutputSnapshot(
            target=self.target,
            is_file=self.is_file,
            is_stream=self.is_stream,
            pipe_options=dict(self.pipe_options),
            flags=dict(self.flags),
            options=tuple(self.options),
            audio=tuple(self.audio),
            audio_filters=tuple(self.audio_filters),
            video=tuple(self.video),
            video_filters=tuple(self.video_filters),
            size_filters=tuple(self.size_filters),
        )


def _is_missing(target) -> bool:
    return target is None or (isinstance(target, str) and not target)


class OutputMixin:
    """Output methods of FfmpegCommand.

    Output options apply to the current output, which is always the most
    recently added one (or the placeholder created on construction).
    """

    _outputs: List[Output]
    _current_output_index: Optional[int]

    @property
    def outputs(self) -> tuple:
        return tuple(self._outputs)

    @property
    def current_output(self) -> Optional[Output]:
        if self._current_output_index is None:
            return None
        return self._outputs[self._current_output_index]

    def add_output(self, target=None, pipe_options: Optional[dict] = None):
        """Add an output and make it the current output.

        ``target`` is a file path or URI, or a writable stream;
        ``pipe_options`` only matter for stream targets. The first call on a
        new command sets the target of the placeholder output instead of
        adding a second one.
        """
        current = self.current_output
        is_file = False

        if _is_missing(target):
            # Only the constructor may create an output without a target
            if current is not None:
                raise InvalidOutputError("Invalid output: a target is required")
            target = None
        elif is_path_like(target):
            target = os.fspath(target)
            is_file = is_file_uri(target)
        elif not has_capability(target, "writable"):
            raise InvalidOutputError("Invalid output: expected a path or a writable stream")

        pipe_options = dict(pipe_options or {})

        if target is not None and current is not None and current.target is None:
            current.target = target
            current.is_file = is_file
            current.pipe_options = pipe_options
            self.logger.debug(
                "Set target of output #%d: %s", self._current_output_index, describe_source(target)
            )
            return self

        if target is not None and not isinstance(target, str):
            if any(existing.is_stream for existing in self._outputs):
                raise DuplicateStreamOutputError("Only one output stream is supported")

        self._outputs.append(Output(target=target, is_file=is_file, pipe_options=pipe_options))
        self._current_output_index = len(self._outputs) - 1
        self.logger.debug(
            "Added output #%d: %s (file=%s)", self._current_output_index, describe_source(target), is_file
        )
        return self

    output = add_output

    def seek(self, seek):
        """Seek the current output (``-ss``), decoding and discarding up to ``seek``."""
        self.current_output.options.append("-ss", seek)
        return self

    def duration(self, duration):
        """Limit the current output's duration (``-t``)."""
        self.current_output.options.append("-t", duration)
        return self

    def format(self, format):
        """Set the current output's container format (``-f``)."""
        self.current_output.options.append("-f", format)
        return self

    def flvmeta(self):
        """Request flvmeta post-processing of the current output.

        Only sets a flag; no ffmpeg argument is produced for it.
        """
        self.current_output.flags["flvmeta"] = True
        return self

    def output_options(self, *options):
        """Append custom options to the current output."""
        self.current_output.options.append(split_custom_options(options))
        return self
