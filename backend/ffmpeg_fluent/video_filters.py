"""Video filter chain, scaling and aspect ratio of the current output."""

import re

from ffmpeg_fluent.filters import make_filter_strings

SIZE_FIXED_RE = re.compile(r"^(\d+)x(\d+)$")
SIZE_FIXED_WIDTH_RE = re.compile(r"^(\d+)x\?$")
SIZE_FIXED_HEIGHT_RE = re.compile(r"^\?x(\d+)$")
SIZE_PERCENT_RE = re.compile(r"^(\d+)%$")
ASPECT_RE = re.compile(r"^\d+(\.\d+)?(:\d+(\.\d+)?)?$")


def scale_filter(size: str) -> str:
    """Translate a size spec into a scale filter.

    Supported specs: ``WxH``, ``Wx?`` and ``?xH`` (the other side follows the
    aspect ratio, rounded to an even number) and ``N%``.
    """
    spec = str(size).strip()

    match = SIZE_FIXED_RE.match(spec)
    if match:
        return f"scale={match.group(1)}:{match.group(2)}"

    match = SIZE_FIXED_WIDTH_RE.match(spec)
    if match:
        return f"scale={match.group(1)}:trunc(ow/a/2)*2"

    match = SIZE_FIXED_HEIGHT_RE.match(spec)
    if match:
        return f"scale=trunc(oh*a/2)*2:{match.group(1)}"

    match = SIZE_PERCENT_RE.match(spec)
    if match:
        percent = match.group(1)
        return f"scale=trunc(iw*{percent}/100/2)*2:trunc(ih*{percent}/100/2)*2"

    raise ValueError(f"Invalid size specified: '{size}'")


class VideoFilterMixin:
    """Video filter and size methods of FfmpegCommand."""

    def video_filters(self, *filters):
        """Add video filters to the current output.

        Takes the same argument shapes as ``audio_filters``.
        """
        self.current_output.video_filters.append(make_filter_strings(filters))
        return self

    def size(self, size):
        """Scale the current output; replaces any earlier size."""
        token = scale_filter(size)
        self.current_output.size_filters.clear().append(token)
        return self

    def aspect(self, aspect):
        """Set the display aspect ratio, as a number or a ``W:H`` string."""
        if not ASPECT_RE.match(str(aspect)):
            raise ValueError(f"Invalid aspect ratio: '{aspect}'")
        self.current_output.video.append("-aspect", aspect)
        return self
