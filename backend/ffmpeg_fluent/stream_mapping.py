"""Stream mapping for the current output."""

import re

# Optional surrounding brackets around a stream specifier or filter label
STREAM_RE = re.compile(r"^\[?(.*?)\]?$", re.DOTALL)


def bracket_stream_spec(spec: str) -> str:
    """Return ``spec`` wrapped in exactly one pair of square brackets."""
    return f"[{STREAM_RE.fullmatch(spec).group(1)}]"


class StreamMappingMixin:
    """Mapping methods of FfmpegCommand."""

    def map(self, spec: str):
        """Map a stream or filter graph label into the current output.

        ``"0:a"`` and ``"[0:a]"`` both produce ``-map [0:a]``.
        """
        self.current_output.options.append("-map", bracket_stream_spec(spec))
        return self
