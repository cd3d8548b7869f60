"""Job submission: compile, guard the output path, run.

Typical usage:
    request = build_job_request(OperationType.COMPRESS, path, {"level": "high"})
    outcome = submit_job(request, FFmpegRunner(ffmpeg_path), config)
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from mediaconv.compiler import compile_job
from mediaconv.config.models import BehaviorConfig, MediaConvConfig
from mediaconv.domain.models import CompiledJob, JobRequest
from mediaconv.errors import InvalidInputError
from mediaconv.executor.runner import FFmpegRunner, ProgressCallback
from mediaconv.logging.context import job_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobOutcome:
    """Result of a successfully completed job."""

    job_id: str
    output_path: Path
    argv: tuple[str, ...]
    stderr: str = ""


def preview_job(request: JobRequest) -> CompiledJob:
    """Compile a request without running it."""
    return compile_job(request)


def check_output_path(
    request: JobRequest,
    job: CompiledJob,
    behavior: BehaviorConfig,
) -> None:
    """Validate the compiled output path before FFmpeg runs.

    Raises:
        InvalidInputError: If the output would overwrite the input and
            input protection is enabled.
    """
    if job.output_path == request.input_path:
        if behavior.protect_input:
            raise InvalidInputError(
                f"Output would overwrite the input file: {job.output_path.name}. "
                "Change at least one option.",
                field="output_path",
            )
        logger.warning("Overwriting input file %s in place", job.output_path)
    elif job.output_path.exists():
        logger.warning(
            "Output file exists and will be overwritten: %s", job.output_path
        )


def submit_job(
    request: JobRequest,
    runner: FFmpegRunner,
    config: MediaConvConfig | None = None,
    progress_callback: ProgressCallback | None = None,
) -> JobOutcome:
    """Compile and run a job.

    Args:
        request: Validated job request.
        runner: Runner bound to the FFmpeg executable.
        config: Configuration. Defaults apply when None.
        progress_callback: Passed through to the runner.

    Returns:
        JobOutcome describing the written file.

    Raises:
        UnsupportedOperationError: If the request cannot be compiled.
        InvalidInputError: If the output path guard rejects the job.
        ProcessLaunchError: If FFmpeg cannot be started.
        ProcessExecutionError: If FFmpeg exits with a non-zero code.
    """
    behavior = config.behavior if config is not None else BehaviorConfig()
    job_id = uuid.uuid4().hex[:8]

    with job_context(job_id, request.input_path):
        logger.info(
            "Submitting %s job for %s (%s)",
            request.operation_type.value,
            request.input_path.name,
            request.media_kind.value,
        )
        job = compile_job(request)
        check_output_path(request, job, behavior)

        result = runner.run(job, progress_callback)
        logger.info("Created %s", result.output_path.name)

    return JobOutcome(
        job_id=job_id,
        output_path=result.output_path,
        argv=job.argv,
        stderr=result.stderr,
    )
