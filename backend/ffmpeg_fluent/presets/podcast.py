"""Low resolution m4v output for podcast players."""


def load(command):
    command \
        .format("m4v") \
        .video_bitrate("512k") \
        .video_codec("libx264") \
        .size("320x176") \
        .audio_bitrate("128k") \
        .audio_codec("aac") \
        .audio_channels(1) \
        .output_options([
            "-flags", "+loop",
            "-cmp", "+chroma",
            "-partitions", "+parti4x4+partp8x8+partb8x8",
            "-flags2", "+mixed_refs",
            "-me_method umh",
            "-subq 5",
            "-bufsize 2M",
            "-rc_eq 'blurCplx^(1-qComp)'",
            "-qcomp 0.6",
            "-qmin 10",
            "-qmax 51",
            "-qdiff 4",
            "-level 13",
        ])
