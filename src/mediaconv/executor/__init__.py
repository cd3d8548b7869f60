"""FFmpeg process execution."""

from mediaconv.executor.progress import (
    FFmpegProgress,
    parse_duration,
    parse_stderr_progress,
)
from mediaconv.executor.runner import FFmpegRunner, ProgressCallback, RunResult

__all__ = [
    "FFmpegProgress",
    "FFmpegRunner",
    "ProgressCallback",
    "RunResult",
    "parse_duration",
    "parse_stderr_progress",
]
