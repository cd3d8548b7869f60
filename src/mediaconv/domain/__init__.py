"""Domain types for mediaconv."""

from mediaconv.domain.enums import (
    CompressionLevel,
    EncodingPreset,
    MediaKind,
    OperationType,
    ScaleFilter,
    VideoCodec,
)
from mediaconv.domain.models import (
    DEFAULT_SAMPLE_RATE,
    CompiledJob,
    CompressOptions,
    ConvertOptions,
    JobOperation,
    JobRequest,
    RescaleOptions,
    SpeedOptions,
)

__all__ = [
    "CompiledJob",
    "CompressionLevel",
    "CompressOptions",
    "ConvertOptions",
    "DEFAULT_SAMPLE_RATE",
    "EncodingPreset",
    "JobOperation",
    "JobRequest",
    "MediaKind",
    "OperationType",
    "RescaleOptions",
    "ScaleFilter",
    "SpeedOptions",
    "VideoCodec",
]
