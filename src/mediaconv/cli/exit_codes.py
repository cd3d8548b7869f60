"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (input, config)
    20-29: Target/file errors
    30-39: Tool errors
    40-49: Operation errors
"""

from enum import IntEnum

from mediaconv.errors import (
    ConfigurationError,
    InvalidInputError,
    MediaConvError,
    ProcessExecutionError,
    ProcessLaunchError,
    UnsupportedOperationError,
)


class ExitCode(IntEnum):
    """Exit codes for mediaconv commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Validation errors (10-19)
    INVALID_INPUT = 10
    CONFIG_ERROR = 11

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20
    UNSUPPORTED_OPERATION = 21

    # Tool errors (30-39)
    TOOL_NOT_AVAILABLE = 30

    # Operation errors (40-49)
    OPERATION_FAILED = 40


_ERROR_EXIT_CODES: tuple[tuple[type[MediaConvError], ExitCode], ...] = (
    (InvalidInputError, ExitCode.INVALID_INPUT),
    (ConfigurationError, ExitCode.CONFIG_ERROR),
    (UnsupportedOperationError, ExitCode.UNSUPPORTED_OPERATION),
    (ProcessLaunchError, ExitCode.TOOL_NOT_AVAILABLE),
    (ProcessExecutionError, ExitCode.OPERATION_FAILED),
)


def exit_code_for(error: MediaConvError) -> ExitCode:
    """Map an error to its exit code, GENERAL_ERROR if unmapped."""
    for error_type, code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.GENERAL_ERROR
