"""DivX-compatible AVI output."""


def load(command):
    command \
        .format("avi") \
        .video_bitrate("1024k") \
        .video_codec("mpeg4") \
        .size("720x?") \
        .audio_bitrate("128k") \
        .audio_channels(2) \
        .audio_codec("libmp3lame") \
        .output_options(["-vtag DIVX"])
