"""Container and encoding conversion."""

from __future__ import annotations

from mediaconv.compiler.naming import derive_output_path, finalize_argv
from mediaconv.compiler.presets import DEFAULT_CRF
from mediaconv.domain.enums import MediaKind, VideoCodec
from mediaconv.domain.models import CompiledJob, ConvertOptions, JobRequest


def _video_args(options: ConvertOptions) -> tuple[list[str], list[str]]:
    codec = options.codec
    if codec == VideoCodec.COPY:
        return ["-c:v", "copy", "-c:a", "copy"], []

    args = ["-c:v", codec.value]
    suffixes = [codec.value]

    if codec == VideoCodec.LIBVPX_VP9:
        # Constant quality mode needs the target bitrate zeroed.
        args.extend(["-b:v", "0"])
        if options.max_quality:
            args.extend(["-crf", "0", "-row-mt", "1", "-cpu-used", "0"])
            suffixes.append("lossless")
        else:
            crf = options.quality if options.quality is not None else DEFAULT_CRF[codec]
            args.extend(["-crf", str(crf), "-row-mt", "1"])
            suffixes.append(f"q{crf}")
        args.extend(["-c:a", "libopus"])
        return args, suffixes

    if options.max_quality:
        args.extend(["-crf", "0", "-preset", "veryslow"])
        suffixes.append("lossless")
    else:
        crf = options.quality if options.quality is not None else DEFAULT_CRF[codec]
        args.extend(["-crf", str(crf)])
        suffixes.append(f"q{crf}")
    args.extend(["-c:a", "copy"])
    return args, suffixes


def _audio_args(options: ConvertOptions) -> tuple[list[str], list[str]]:
    if options.max_quality:
        return ["-c:a", "flac", "-compression_level", "12"], ["lossless"]
    if options.quality is not None:
        return ["-b:a", f"{options.quality}k"], [f"{options.quality}k"]
    return [], []


def _image_args(options: ConvertOptions) -> tuple[list[str], list[str]]:
    if options.max_quality:
        return ["-q:v", "1"], ["max"]
    if options.quality is not None:
        return ["-q:v", str(options.quality)], [f"q{options.quality}"]
    return [], []


_KIND_BUILDERS = {
    MediaKind.VIDEO: _video_args,
    MediaKind.AUDIO: _audio_args,
    MediaKind.IMAGE: _image_args,
}


def compile_convert(request: JobRequest) -> CompiledJob:
    """Compile a format conversion request.

    The output takes the target format as its extension.
    """
    options = request.operation
    if not isinstance(options, ConvertOptions):
        raise TypeError(f"Expected ConvertOptions, got {type(options).__name__}")

    body, suffixes = _KIND_BUILDERS[request.media_kind](options)
    output_path = derive_output_path(
        request.input_path, suffixes, extension=options.target_format
    )
    return CompiledJob(
        argv=finalize_argv(request.input_path, body, output_path),
        output_path=output_path,
    )
