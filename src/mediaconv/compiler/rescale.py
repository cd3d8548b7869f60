"""Resolution change for videos and resize for images."""

from __future__ import annotations

from mediaconv.compiler.naming import derive_output_path, finalize_argv
from mediaconv.domain.enums import EncodingPreset, MediaKind, OperationType
from mediaconv.domain.models import CompiledJob, JobRequest, RescaleOptions
from mediaconv.errors import UnsupportedOperationError

# Height placeholder letting FFmpeg keep the aspect ratio. Video needs an
# even height for most encoders, hence -2.
_AUTO_HEIGHT = {
    MediaKind.VIDEO: "-2",
    MediaKind.IMAGE: "-1",
}

_WIDTH_MARKER = {
    MediaKind.VIDEO: "p",
    MediaKind.IMAGE: "w",
}


def build_scale_filter(options: RescaleOptions, media_kind: MediaKind) -> str:
    """Return the ``scale=...`` filter expression for the options."""
    if options.maintain_aspect_ratio or options.height is None:
        height = _AUTO_HEIGHT[media_kind]
    else:
        height = str(options.height)
    return f"scale={options.width}:{height}:flags={options.scale_filter.value}"


def _size_suffix(options: RescaleOptions, media_kind: MediaKind) -> str:
    if options.maintain_aspect_ratio or options.height is None:
        return f"{options.width}{_WIDTH_MARKER[media_kind]}"
    return f"{options.width}x{options.height}"


def compile_rescale(request: JobRequest) -> CompiledJob:
    """Compile a rescale request.

    Raises:
        UnsupportedOperationError: If the input is an audio file.
    """
    options = request.operation
    if not isinstance(options, RescaleOptions):
        raise TypeError(f"Expected RescaleOptions, got {type(options).__name__}")

    kind = request.media_kind
    if kind not in _AUTO_HEIGHT:
        raise UnsupportedOperationError(OperationType.RESCALE.value, kind.value)

    body = ["-vf", build_scale_filter(options, kind)]
    suffixes = [_size_suffix(options, kind)]

    if kind == MediaKind.VIDEO:
        body.extend(["-preset", options.preset.value])
        if options.keep_audio:
            body.extend(["-c:a", "copy"])
        if options.preset != EncodingPreset.MEDIUM:
            suffixes.append(options.preset.value)
    elif options.quality is not None:
        body.extend(["-q:v", str(options.quality)])
        suffixes.append(f"q{options.quality}")

    output_path = derive_output_path(request.input_path, suffixes)
    return CompiledJob(
        argv=finalize_argv(request.input_path, body, output_path),
        output_path=output_path,
    )
