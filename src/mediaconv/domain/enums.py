"""Enumerations for media kinds, operations and FFmpeg option vocabularies."""

from enum import Enum


class MediaKind(Enum):
    """Kind of media file, derived from its extension."""

    VIDEO = "video"
    AUDIO = "audio"
    IMAGE = "image"


class OperationType(Enum):
    """Operations that can be compiled into an FFmpeg invocation."""

    RESCALE = "rescale"
    SPEED = "speed"
    CONVERT = "convert"
    COMPRESS = "compress"


class ScaleFilter(Enum):
    """Scaling algorithm passed to the scale filter's ``flags`` option."""

    BICUBIC = "bicubic"
    BILINEAR = "bilinear"
    NEIGHBOR = "neighbor"
    LANCZOS = "lanczos"


class EncodingPreset(Enum):
    """x264/x265 encoding speed preset."""

    VERYSLOW = "veryslow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    VERYFAST = "veryfast"


class VideoCodec(Enum):
    """Video encoders available for format conversion.

    COPY remuxes both streams without re-encoding.
    """

    LIBX264 = "libx264"
    LIBX265 = "libx265"
    LIBVPX_VP9 = "libvpx-vp9"
    COPY = "copy"


class CompressionLevel(Enum):
    """Named compression levels, from best to worst quality."""

    LOSSLESS = "lossless"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "very low"
