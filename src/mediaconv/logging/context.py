"""Job context for structured logging.

Uses contextvars to attach the current job's id and input file to every
log record emitted while the job is being processed.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_job_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "job_id", default=None
)
_file_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_path", default=None
)


def set_job_context(job_id: str, file_path: Path | str | None = None) -> None:
    """Set the current job context."""
    _job_id.set(job_id)
    _file_path.set(str(file_path) if file_path is not None else None)


def clear_job_context() -> None:
    """Clear the current job context."""
    _job_id.set(None)
    _file_path.set(None)


@contextmanager
def job_context(
    job_id: str,
    file_path: Path | str | None = None,
) -> Generator[None, None, None]:
    """Context manager scoping log records to a job.

    Restores the previous context on exit.

    Example:
        with job_context("3f2a9c1b", "/videos/clip.mp4"):
            logger.info("Compiling")  # Record carries job_id and file_path
    """
    old_job_id = _job_id.get()
    old_file_path = _file_path.get()
    try:
        set_job_context(job_id, file_path)
        yield
    finally:
        _job_id.set(old_job_id)
        _file_path.set(old_file_path)


def get_job_context() -> tuple[str | None, str | None]:
    """Return (job_id, file_path) for the current context."""
    return _job_id.get(), _file_path.get()


class JobContextFilter(logging.Filter):
    """Logging filter that injects job context into log records.

    Adds ``job_id`` and ``file_path`` attributes for JSON output and a
    ``job_tag`` such as ``[job:3f2a9c1b] `` for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        job_id, file_path = get_job_context()

        record.job_id = job_id
        record.file_path = file_path
        record.job_tag = f"[job:{job_id}] " if job_id else ""

        return True  # Never filter out records
