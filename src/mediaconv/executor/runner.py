"""Spawn FFmpeg for a compiled job and collect its outcome."""

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from mediaconv.domain.models import CompiledJob
from mediaconv.errors import ProcessExecutionError, ProcessLaunchError
from mediaconv.executor.progress import (
    FFmpegProgress,
    parse_duration,
    parse_stderr_progress,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[FFmpegProgress, float | None], None]


@dataclass(frozen=True)
class RunResult:
    """Result of a successful FFmpeg run."""

    output_path: Path
    """File FFmpeg wrote."""

    exit_code: int
    """Process exit code (always 0 for a returned result)."""

    stderr: str
    """Everything FFmpeg wrote to stderr."""


class FFmpegRunner:
    """Runs compiled jobs through a specific FFmpeg executable.

    Exactly one process is spawned per run. There is no timeout, retry or
    cleanup of partial output.
    """

    def __init__(self, ffmpeg_path: Path | str) -> None:
        """Initialize the runner.

        Args:
            ffmpeg_path: FFmpeg executable to invoke.
        """
        self._ffmpeg_path = ffmpeg_path

    @property
    def ffmpeg_path(self) -> Path | str:
        return self._ffmpeg_path

    def build_command(self, job: CompiledJob) -> list[str]:
        """Return the full command line for a job."""
        return job.command(self._ffmpeg_path)

    def run(
        self,
        job: CompiledJob,
        progress_callback: ProgressCallback | None = None,
    ) -> RunResult:
        """Run FFmpeg for the job and wait for it to exit.

        Args:
            job: Compiled job to run.
            progress_callback: Optional callback receiving each parsed
                progress line and the input duration in seconds, if known.

        Returns:
            RunResult for the completed process.

        Raises:
            ProcessLaunchError: If the executable cannot be started.
            ProcessExecutionError: If FFmpeg exits with a non-zero code.
        """
        cmd = self.build_command(job)
        logger.info("Running FFmpeg: %s", job.describe(self._ffmpeg_path))

        try:
            process = subprocess.Popen(  # nosec B603 - argv list, no shell
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Failed to start FFmpeg at %s: %s", self._ffmpeg_path, e)
            raise ProcessLaunchError(f"Failed to start FFmpeg: {e}") from e

        stderr_lines = self._collect_stderr(process, progress_callback)
        returncode = process.wait()
        stderr_text = "\n".join(stderr_lines)

        if returncode != 0:
            logger.error(
                "FFmpeg exited with code %d while writing %s",
                returncode,
                job.output_path,
            )
            raise ProcessExecutionError(returncode, stderr_text)

        logger.info("FFmpeg finished: %s", job.output_path)
        return RunResult(
            output_path=job.output_path,
            exit_code=returncode,
            stderr=stderr_text,
        )

    def _collect_stderr(
        self,
        process: subprocess.Popen,
        progress_callback: ProgressCallback | None,
    ) -> list[str]:
        """Read stderr line by line until EOF, reporting progress."""
        lines: list[str] = []
        if process.stderr is None:
            return lines

        duration: float | None = None
        try:
            for raw_line in process.stderr:
                line = raw_line.rstrip("\r\n")
                lines.append(line)
                logger.debug("ffmpeg: %s", line)

                if duration is None:
                    duration = parse_duration(line)
                if progress_callback is None:
                    continue
                progress = parse_stderr_progress(line)
                if progress is None:
                    continue
                try:
                    progress_callback(progress, duration)
                except Exception as e:
                    logger.warning("Progress callback error: %s", e)
        finally:
            process.stderr.close()

        return lines
