"""Audio codec and encoding options for the current output."""

from ffmpeg_fluent.common import normalize_bitrate


class AudioCodecMixin:
    """Audio methods of FfmpegCommand."""

    def no_audio(self):
        """Drop audio from the current output (``-an``).

        Earlier audio options and filters on this output are discarded.
        """
        output = self.current_output
        output.audio.clear()
        output.audio_filters.clear()
        output.audio.append("-an")
        return self

    def audio_codec(self, codec):
        self.current_output.audio.append("-acodec", codec)
        return self

    def audio_bitrate(self, bitrate):
        """Set the audio bitrate in kbps; ``128`` and ``"128k"`` are equivalent."""
        self.current_output.audio.append("-b:a", normalize_bitrate(bitrate))
        return self

    def audio_channels(self, channels):
        self.current_output.audio.append("-ac", channels)
        return self

    def audio_frequency(self, freq):
        """Set the audio sample rate in Hz (``-ar``)."""
        self.current_output.audio.append("-ar", freq)
        return self

    def audio_quality(self, quality):
        self.current_output.audio.append("-aq", quality)
        return self
