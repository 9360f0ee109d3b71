"""Video codec and encoding options for the current output."""

from ffmpeg_fluent.common import normalize_bitrate

CONSTANT_BITRATE_BUFSIZE = "3M"


class VideoCodecMixin:
    """Video methods of FfmpegCommand."""

    def no_video(self):
        """Drop video from the current output (``-vn``).

        Earlier video options and filters on this output are discarded;
        the size filter is left alone.
        """
        output = self.current_output
        output.video.clear()
        output.video_filters.clear()
        output.video.append("-vn")
        return self

    def video_codec(self, codec):
        self.current_output.video.append("-vcodec", codec)
        return self

    def video_bitrate(self, bitrate, constant: bool = False):
        """Set the video bitrate in kbps.

        With ``constant`` the rate is also used as min and max rate so the
        encoder produces constant bitrate output.
        """
        bitrate = normalize_bitrate(bitrate)
        output = self.current_output
        output.video.append("-b:v", bitrate)
        if constant:
            output.video.append(
                "-maxrate", bitrate,
                "-minrate", bitrate,
                "-bufsize", CONSTANT_BITRATE_BUFSIZE,
            )
        return self

    def fps(self, fps):
        """Set the output frame rate (``-r``)."""
        self.current_output.video.append("-r", fps)
        return self

    def frames(self, frames):
        """Stop after encoding ``frames`` video frames."""
        self.current_output.video.append("-vframes", frames)
        return self
