"""Input registration and input-scoped options."""

import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ffmpeg_fluent.args import Args
from ffmpeg_fluent.common import has_capability, is_file_uri, is_path_like, split_custom_options
from ffmpeg_fluent.errors import DuplicateStreamInputError, InvalidInputError, NoCurrentInputError
from ffmpeg_fluent.log_utils import describe_source
from ffmpeg_fluent.models import InputSnapshot


@dataclass
class Input:
    """One ffmpeg input: a path/URI or a readable stream plus its options."""

    source: Any
    is_file: bool = False
    is_stream: bool = False
    options: Args = field(default_factory=Args)

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            source=self.source,
            is_file=self.is_file,
            is_stream=self.is_stream,
            options=tuple(self.options),
        )


class InputMixin:
    """Input methods of FfmpegCommand.

    Input options apply to the current input, which is always the most
    recently added one.
    """

    _inputs: List[Input]
    _current_input_index: Optional[int]

    @property
    def inputs(self) -> tuple:
        return tuple(self._inputs)

    @property
    def current_input(self) -> Optional[Input]:
        if self._current_input_index is None:
            return None
        return self._inputs[self._current_input_index]

    def _require_input(self) -> Input:
        current = self.current_input
        if current is None:
            raise NoCurrentInputError("No input specified")
        return current

    def add_input(self, source):
        """Add an input and make it the current input.

        ``source`` is a file path or URI, or a readable stream. Only one
        stream input is supported per command; the stream is paused until
        whatever runs the command starts consuming it.
        """
        is_file = False
        is_stream = False

        if is_path_like(source):
            source = os.fspath(source)
            is_file = is_file_uri(source)
        else:
            if not has_capability(source, "readable"):
                raise InvalidInputError("Invalid input: expected a path or a readable stream")
            if any(existing.is_stream for existing in self._inputs):
                raise DuplicateStreamInputError("Only one input stream is supported")
            is_stream = True
            pause = getattr(source, "pause", None)
            if callable(pause):
                pause()

        self._inputs.append(Input(source=source, is_file=is_file, is_stream=is_stream))
        self._current_input_index = len(self._inputs) - 1
        self.logger.debug(
            "Added input #%d: %s (file=%s, stream=%s)",
            self._current_input_index, describe_source(source), is_file, is_stream,
        )
        return self

    input = add_input

    def input_format(self, format):
        """Force the format of the current input (``-f``)."""
        self._require_input().options.append("-f", format)
        return self

    def input_fps(self, fps):
        """Set the frame rate of the current input (``-r``), for raw formats."""
        self._require_input().options.append("-r", fps)
        return self

    def native(self):
        """Read the current input at its native frame rate (``-re``)."""
        self._require_input().options.append("-re")
        return self

    def seek_input(self, seek):
        """Seek the current input (``-ss``) to seconds or ``[[hh:]mm:]ss[.xxx]``."""
        self._require_input().options.append("-ss", seek)
        return self

    def loop(self, duration=None):
        """Loop the current input (``-loop 1``).

        The optional ``duration`` is set on the current output, as the
        output's ``-t``, since that is what bounds a looped input.
        """
        self._require_input().options.append("-loop", "1")
        if duration is not None:
            self.duration(duration)
        return self

    def input_options(self, *options):
        """Append custom options to the current input."""
        current = self._require_input()
        current.options.append(split_custom_options(options))
        return self
