"""Recompression at a named level or an explicit quality value."""

from __future__ import annotations

from mediaconv.compiler.naming import derive_output_path, finalize_argv
from mediaconv.compiler.presets import COMPRESSION_TABLES
from mediaconv.domain.enums import MediaKind
from mediaconv.domain.models import CompiledJob, CompressOptions, JobRequest


def resolve_compression_value(options: CompressOptions, media_kind: MediaKind) -> int:
    """Return the CRF, bitrate or quantizer to use.

    An explicit quality always takes precedence over the named level.
    """
    if options.quality is not None:
        return options.quality
    return COMPRESSION_TABLES[media_kind][options.level]


def compile_compress(request: JobRequest) -> CompiledJob:
    """Compile a compression request, keeping the input's extension."""
    options = request.operation
    if not isinstance(options, CompressOptions):
        raise TypeError(f"Expected CompressOptions, got {type(options).__name__}")

    kind = request.media_kind
    value = resolve_compression_value(options, kind)

    if kind == MediaKind.VIDEO:
        body = ["-crf", str(value), "-preset", "medium"]
        suffix = f"crf{value}"
    elif kind == MediaKind.AUDIO:
        body = ["-b:a", f"{value}k"]
        suffix = f"{value}kbps"
    else:
        body = ["-q:v", str(value)]
        suffix = f"q{value}"

    output_path = derive_output_path(request.input_path, [suffix])
    return CompiledJob(
        argv=finalize_argv(request.input_path, body, output_path),
        output_path=output_path,
    )
