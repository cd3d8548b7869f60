"""Shared plumbing for the operation commands."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

import click

from mediaconv.cli.exit_codes import ExitCode, exit_code_for
from mediaconv.cli.output import CLIResult, error_exit, success_output, warning_output
from mediaconv.config.env import EnvReader
from mediaconv.config.loader import resolve_ffmpeg_path
from mediaconv.config.models import MediaConvConfig
from mediaconv.domain.enums import MediaKind, OperationType
from mediaconv.errors import MediaConvError, ProcessExecutionError
from mediaconv.executor.progress import FFmpegProgress
from mediaconv.executor.runner import FFmpegRunner, ProgressCallback
from mediaconv.forms.request import build_job_request
from mediaconv.jobs.service import check_output_path, preview_job, submit_job
from mediaconv.media.detection import (
    OPERATION_KINDS,
    reference_to_path,
    resolve_candidate,
)

logger = logging.getLogger(__name__)

# Path or file:// URI of the file currently selected by the caller's
# environment, used when INPUT is omitted.
RECENT_FILE_ENV = "MEDIACONV_RECENT_FILE"

# Lines of FFmpeg stderr shown when a job fails.
STDERR_TAIL_LINES = 10


def job_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the INPUT argument and the --dry-run/--json flags to a command."""
    func = click.option(
        "--json",
        "json_output",
        is_flag=True,
        default=False,
        help="Output the result as JSON.",
    )(func)
    func = click.option(
        "--dry-run",
        is_flag=True,
        default=False,
        help="Print the FFmpeg command without running it.",
    )(func)
    return click.argument("input_ref", metavar="INPUT", required=False)(func)


def resolve_input(
    reference: str | None,
    kinds: Iterable[MediaKind],
    env_reader: EnvReader | None = None,
) -> Path | None:
    """Resolve the job input from INPUT or the recent-file fallback.

    An explicit reference is returned as-is (existence and kind are checked
    when the request is built). The fallback is only used if it names an
    existing file of an accepted kind.
    """
    if reference:
        return reference_to_path(reference)
    reader = env_reader or EnvReader()
    return resolve_candidate(reader.get_str(RECENT_FILE_ENV), kinds)


def _progress_printer() -> tuple[ProgressCallback, Callable[[], None]]:
    shown = False

    def report(progress: FFmpegProgress, duration: float | None) -> None:
        nonlocal shown
        seconds = progress.out_time_seconds
        if seconds is None:
            return
        if duration:
            text = f"\r{progress.get_percent(duration):5.1f}%"
        else:
            text = f"\r{seconds:.1f}s"
        click.echo(text, err=True, nl=False)
        shown = True

    def finish() -> None:
        if shown:
            click.echo("", err=True)

    return report, finish


def _failure_message(error: MediaConvError) -> str:
    if isinstance(error, ProcessExecutionError):
        tail = "\n".join(error.stderr.splitlines()[-STDERR_TAIL_LINES:])
        return f"FFmpeg failed with code {error.exit_code}. Error: {tail}"
    return str(error)


def run_operation(
    ctx: click.Context,
    operation: OperationType,
    reference: str | None,
    values: Mapping[str, Any],
    *,
    dry_run: bool,
    json_output: bool,
    allowed_kinds: Iterable[MediaKind] | None = None,
) -> None:
    """Validate, compile and (unless dry-run) run one operation.

    Exits the process with the mapped ExitCode on failure.
    """
    config: MediaConvConfig = ctx.obj["config"]
    kinds = frozenset(OPERATION_KINDS[operation])
    if allowed_kinds is not None:
        kinds &= frozenset(allowed_kinds)

    input_path = resolve_input(reference, kinds)
    if input_path is None:
        error_exit(
            f"No input file given. Pass INPUT or set {RECENT_FILE_ENV}.",
            ExitCode.TARGET_NOT_FOUND,
            json_output,
        )

    supplied = {key: value for key, value in values.items() if value is not None}
    finish_progress: Callable[[], None] | None = None

    try:
        request = build_job_request(operation, input_path, supplied, kinds)
        ffmpeg_path = resolve_ffmpeg_path(config)

        if dry_run:
            job = preview_job(request)
            check_output_path(request, job, config.behavior)
            if job.output_path == request.input_path:
                warning_output("Output would overwrite the input file", json_output)
            success_output(
                CLIResult(
                    message=job.describe(ffmpeg_path),
                    data={
                        "command": job.command(ffmpeg_path),
                        "output_path": str(job.output_path),
                    },
                ),
                json_output,
            )
            return

        progress_callback = None
        if not json_output:
            progress_callback, finish_progress = _progress_printer()

        outcome = submit_job(
            request,
            FFmpegRunner(ffmpeg_path),
            config,
            progress_callback=progress_callback,
        )
    except MediaConvError as e:
        if finish_progress is not None:
            finish_progress()
        logger.debug("%s failed: %s", operation.value, e)
        error_exit(_failure_message(e), exit_code_for(e), json_output)
    except KeyboardInterrupt:
        error_exit("Interrupted", ExitCode.INTERRUPTED, json_output)

    if finish_progress is not None:
        finish_progress()
    success_output(
        CLIResult(
            message=f"Created {outcome.output_path.name}",
            data={
                "job_id": outcome.job_id,
                "output_path": str(outcome.output_path),
                "command": [str(ffmpeg_path), *outcome.argv],
            },
        ),
        json_output,
    )
