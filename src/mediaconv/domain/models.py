"""Immutable value types passed between the forms, compiler and executor."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from mediaconv.domain.enums import (
    CompressionLevel,
    EncodingPreset,
    MediaKind,
    OperationType,
    ScaleFilter,
    VideoCodec,
)

DEFAULT_SAMPLE_RATE = 44100


@dataclass(frozen=True)
class RescaleOptions:
    """Options for resizing a video or image.

    Attributes:
        width: Target width in pixels.
        height: Target height in pixels. Only used when the aspect ratio
            is not maintained.
        maintain_aspect_ratio: Let FFmpeg derive the height from the width.
        scale_filter: Scaling algorithm.
        preset: Encoding preset (video only).
        keep_audio: Copy the audio stream unchanged (video only).
        quality: JPEG-style quantizer 1-31 (image only).
    """

    width: int
    height: int | None = None
    maintain_aspect_ratio: bool = True
    scale_filter: ScaleFilter = ScaleFilter.BICUBIC
    preset: EncodingPreset = EncodingPreset.MEDIUM
    keep_audio: bool = True
    quality: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.height is not None and self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")
        if not self.maintain_aspect_ratio and self.height is None:
            raise ValueError(
                "height is required when the aspect ratio is not maintained"
            )


@dataclass(frozen=True)
class SpeedOptions:
    """Options for changing playback speed.

    Attributes:
        speed: Playback speed multiplier for the main stream.
        audio_speed: Separate audio multiplier (video only). Defaults to speed.
        maintain_pitch: Shift audio by resampling instead of time-stretching.
        sample_rate: Sample rate used by the pitch-preserving chain.
    """

    speed: float
    audio_speed: float | None = None
    maintain_pitch: bool = False
    sample_rate: int = DEFAULT_SAMPLE_RATE

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.audio_speed is not None and self.audio_speed <= 0:
            raise ValueError(f"audio speed must be positive, got {self.audio_speed}")
        if self.sample_rate <= 0:
            raise ValueError(f"sample rate must be positive, got {self.sample_rate}")

    @property
    def effective_audio_speed(self) -> float:
        """Audio multiplier actually applied."""
        return self.speed if self.audio_speed is None else self.audio_speed


@dataclass(frozen=True)
class ConvertOptions:
    """Options for converting to another container or encoding.

    Attributes:
        target_format: Output extension without the dot (e.g. "webm").
        codec: Video encoder (video only).
        quality: CRF for video, kbps for audio, quantizer for images.
        max_quality: Request the lossless or best-quality variant.
    """

    target_format: str
    codec: VideoCodec = VideoCodec.LIBX264
    quality: int | None = None
    max_quality: bool = False


@dataclass(frozen=True)
class CompressOptions:
    """Options for recompressing at a named level or explicit quality value."""

    level: CompressionLevel = CompressionLevel.MEDIUM
    quality: int | None = None


JobOperation = RescaleOptions | SpeedOptions | ConvertOptions | CompressOptions

_OPERATION_TYPES: dict[type, OperationType] = {
    RescaleOptions: OperationType.RESCALE,
    SpeedOptions: OperationType.SPEED,
    ConvertOptions: OperationType.CONVERT,
    CompressOptions: OperationType.COMPRESS,
}


@dataclass(frozen=True)
class JobRequest:
    """A validated request: which file, what kind it is, and what to do."""

    input_path: Path
    media_kind: MediaKind
    operation: JobOperation

    @property
    def operation_type(self) -> OperationType:
        return _OPERATION_TYPES[type(self.operation)]


@dataclass(frozen=True)
class CompiledJob:
    """FFmpeg arguments for one job, excluding the executable itself.

    Attributes:
        argv: Arguments, starting with ``-i <input>`` and ending with
            ``-y <output>``.
        output_path: Path FFmpeg will write.
    """

    argv: tuple[str, ...]
    output_path: Path

    def command(self, ffmpeg_path: Path | str) -> list[str]:
        """Return the full command line for the given FFmpeg executable."""
        return [str(ffmpeg_path), *self.argv]

    def describe(self, ffmpeg_path: Path | str = "ffmpeg") -> str:
        """Return a shell-quoted rendering of the command for display."""
        return shlex.join(self.command(ffmpeg_path))
