"""Error types shared across mediaconv.

Every failure a caller can observe derives from MediaConvError so that the
CLI (or any other front end) can map the category to a message and exit code.
"""

from __future__ import annotations


class MediaConvError(Exception):
    """Base class for all mediaconv errors."""


class InvalidInputError(MediaConvError):
    """Raised when a user-supplied value or input file cannot be accepted.

    Attributes:
        field: Name of the offending form field, if the error relates to one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class UnsupportedOperationError(MediaConvError):
    """Raised when an operation is requested for a media kind it cannot handle."""

    def __init__(self, operation: str, media_kind: str | None = None) -> None:
        self.operation = operation
        self.media_kind = media_kind
        if media_kind is None:
            message = f"Unsupported operation: {operation}"
        else:
            message = f"Operation '{operation}' is not supported for {media_kind} files"
        super().__init__(message)


class ProcessLaunchError(MediaConvError):
    """Raised when the FFmpeg process cannot be started."""


class ProcessExecutionError(MediaConvError):
    """Raised when FFmpeg runs but exits with a non-zero status.

    Attributes:
        exit_code: The process exit code.
        stderr: Everything the process wrote to stderr.
    """

    def __init__(self, exit_code: int, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"FFmpeg failed with code {exit_code}. Error: {stderr}")


class ConfigurationError(MediaConvError):
    """Raised when a configuration file cannot be read or holds invalid values."""
