"""Audio filter chain of the current output."""

from ffmpeg_fluent.filters import make_filter_strings


class AudioFilterMixin:
    """Audio filter methods of FfmpegCommand."""

    def audio_filters(self, *filters):
        """Add audio filters to the current output.

        Accepts filter strings, filter descriptors (or ``{"filter": ...,
        "options": ...}`` dicts) and lists of either::

            command.audio_filters("volume=0.5")
            command.audio_filters(["volume=0.5", "atempo=1.5"])
            command.audio_filters(FilterDescriptor("equalizer", {"f": 1000, "g": 3}))
        """
        self.current_output.audio_filters.append(make_filter_strings(filters))
        return self
