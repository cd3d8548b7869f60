"""Quality tables and codec defaults."""

from types import MappingProxyType

from mediaconv.domain.enums import CompressionLevel, MediaKind, VideoCodec

VIDEO_CRF_LEVELS = MappingProxyType(
    {
        CompressionLevel.LOSSLESS: 0,
        CompressionLevel.HIGH: 18,
        CompressionLevel.MEDIUM: 23,
        CompressionLevel.LOW: 28,
        CompressionLevel.VERY_LOW: 33,
    }
)

AUDIO_BITRATE_LEVELS = MappingProxyType(
    {
        CompressionLevel.LOSSLESS: 320,
        CompressionLevel.HIGH: 256,
        CompressionLevel.MEDIUM: 192,
        CompressionLevel.LOW: 128,
        CompressionLevel.VERY_LOW: 96,
    }
)

IMAGE_QUALITY_LEVELS = MappingProxyType(
    {
        CompressionLevel.LOSSLESS: 2,
        CompressionLevel.HIGH: 5,
        CompressionLevel.MEDIUM: 10,
        CompressionLevel.LOW: 15,
        CompressionLevel.VERY_LOW: 20,
    }
)

COMPRESSION_TABLES = MappingProxyType(
    {
        MediaKind.VIDEO: VIDEO_CRF_LEVELS,
        MediaKind.AUDIO: AUDIO_BITRATE_LEVELS,
        MediaKind.IMAGE: IMAGE_QUALITY_LEVELS,
    }
)

# CRF used by convert when no quality is given.
DEFAULT_CRF = MappingProxyType(
    {
        VideoCodec.LIBX264: 23,
        VideoCodec.LIBX265: 23,
        VideoCodec.LIBVPX_VP9: 30,
    }
)

MAX_CRF = MappingProxyType(
    {
        VideoCodec.LIBX264: 51,
        VideoCodec.LIBX265: 51,
        VideoCodec.LIBVPX_VP9: 63,
    }
)

CONVERT_FORMATS = MappingProxyType(
    {
        MediaKind.VIDEO: ("mp4", "webm", "mkv", "mov", "avi"),
        MediaKind.AUDIO: ("mp3", "wav", "aac", "ogg", "flac"),
        MediaKind.IMAGE: ("jpg", "png", "webp", "gif", "bmp"),
    }
)

DEFAULT_CONVERT_FORMATS = MappingProxyType(
    {
        MediaKind.VIDEO: "mp4",
        MediaKind.AUDIO: "mp3",
        MediaKind.IMAGE: "jpg",
    }
)

# Image quantizer bounds shared by rescale, convert and compress.
IMAGE_QUALITY_MIN = 1
IMAGE_QUALITY_MAX = 31
