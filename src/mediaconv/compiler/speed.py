"""Playback speed changes for videos and audio."""

from __future__ import annotations

from mediaconv.compiler.naming import derive_output_path, finalize_argv, format_number
from mediaconv.domain.enums import MediaKind, OperationType
from mediaconv.domain.models import CompiledJob, JobRequest, SpeedOptions
from mediaconv.errors import UnsupportedOperationError

# Factor range accepted by a single atempo filter.
ATEMPO_MIN = 0.5
ATEMPO_MAX = 2.0


def build_tempo_chain(factor: float) -> str:
    """Build an atempo filter chain applying ``factor`` overall.

    Factors outside [0.5, 2.0] are split into several chained atempo
    stages, e.g. 4 becomes ``atempo=2,atempo=2``.

    Raises:
        ValueError: If factor is not positive.
    """
    if factor <= 0:
        raise ValueError(f"tempo factor must be positive, got {factor}")

    stages: list[float] = []
    remaining = float(factor)
    while remaining > ATEMPO_MAX:
        stages.append(ATEMPO_MAX)
        remaining /= ATEMPO_MAX
    while remaining < ATEMPO_MIN:
        stages.append(ATEMPO_MIN)
        remaining /= ATEMPO_MIN
    stages.append(remaining)

    return ",".join(f"atempo={format_number(stage)}" for stage in stages)


def build_pitch_chain(audio_speed: float, sample_rate: int) -> str:
    """Build a resampling chain that shifts speed together with pitch."""
    return (
        f"asetrate={sample_rate}*{format_number(audio_speed)},"
        f"aresample={sample_rate},atempo=1"
    )


def compile_speed(request: JobRequest) -> CompiledJob:
    """Compile a speed change request.

    Raises:
        UnsupportedOperationError: If the input is an image.
    """
    options = request.operation
    if not isinstance(options, SpeedOptions):
        raise TypeError(f"Expected SpeedOptions, got {type(options).__name__}")

    kind = request.media_kind
    suffixes = [f"{format_number(options.speed)}x"]

    if kind == MediaKind.VIDEO:
        audio_speed = options.effective_audio_speed
        if options.maintain_pitch:
            audio_filter = build_pitch_chain(audio_speed, options.sample_rate)
        else:
            audio_filter = build_tempo_chain(audio_speed)
        body = [
            "-filter:v",
            f"setpts={format_number(1 / options.speed)}*PTS",
            "-filter:a",
            audio_filter,
        ]
        if audio_speed != options.speed:
            suffixes.append(f"a{format_number(audio_speed)}x")
        if options.maintain_pitch:
            suffixes.append("pitch")
    elif kind == MediaKind.AUDIO:
        body = ["-filter:a", build_tempo_chain(options.speed)]
    else:
        raise UnsupportedOperationError(OperationType.SPEED.value, kind.value)

    output_path = derive_output_path(request.input_path, suffixes)
    return CompiledJob(
        argv=finalize_argv(request.input_path, body, output_path),
        output_path=output_path,
    )
