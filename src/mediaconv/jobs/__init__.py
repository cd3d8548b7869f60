"""Job submission pipeline."""

from mediaconv.jobs.service import (
    JobOutcome,
    check_output_path,
    preview_job,
    submit_job,
)

__all__ = ["JobOutcome", "check_output_path", "preview_job", "submit_job"]
