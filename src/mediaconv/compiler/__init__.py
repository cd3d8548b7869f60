"""Argument compiler: turns a JobRequest into FFmpeg arguments.

Compilation is pure. It never touches the filesystem or spawns processes,
so equal requests always yield identical arguments and output paths.
"""

from __future__ import annotations

from collections.abc import Callable

from mediaconv.compiler.compress import compile_compress
from mediaconv.compiler.convert import compile_convert
from mediaconv.compiler.naming import derive_output_path, format_number
from mediaconv.compiler.rescale import compile_rescale
from mediaconv.compiler.speed import build_tempo_chain, compile_speed
from mediaconv.domain.models import (
    CompiledJob,
    CompressOptions,
    ConvertOptions,
    JobRequest,
    RescaleOptions,
    SpeedOptions,
)
from mediaconv.errors import UnsupportedOperationError
from mediaconv.media.detection import OPERATION_KINDS

_COMPILERS: dict[type, Callable[[JobRequest], CompiledJob]] = {
    RescaleOptions: compile_rescale,
    SpeedOptions: compile_speed,
    ConvertOptions: compile_convert,
    CompressOptions: compile_compress,
}


def compile_job(request: JobRequest) -> CompiledJob:
    """Compile a job request into FFmpeg arguments and an output path.

    Args:
        request: Validated request.

    Returns:
        The compiled job.

    Raises:
        UnsupportedOperationError: If the operation has no mapping for the
            request's media kind, or the payload type is unknown.
    """
    compiler = _COMPILERS.get(type(request.operation))
    if compiler is None:
        raise UnsupportedOperationError(type(request.operation).__name__)

    operation_type = request.operation_type
    if request.media_kind not in OPERATION_KINDS[operation_type]:
        raise UnsupportedOperationError(operation_type.value, request.media_kind.value)

    return compiler(request)


__all__ = [
    "build_tempo_chain",
    "compile_job",
    "derive_output_path",
    "format_number",
]
