"""Small FLV output for flash players, with flvmeta post-processing."""


def load(command):
    command \
        .format("flv") \
        .flvmeta() \
        .size("320x?") \
        .video_bitrate("512k") \
        .video_codec("libx264") \
        .fps(24) \
        .audio_bitrate("96k") \
        .audio_codec("aac") \
        .audio_frequency(22050) \
        .audio_channels(2)
