"""Derive logging configuration from CLI overrides."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from mediaconv.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig | None = None,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return ``base`` with any given overrides applied.

    Args:
        base: Starting configuration. Defaults to LoggingConfig().
        level: Log level override.
        file: Log file override.
        format: Log format override ("text" or "json").
        include_stderr: Also log to stderr when a file is set.

    Returns:
        New LoggingConfig. Validation runs again on the result.
    """
    config = base or LoggingConfig()
    overrides: dict[str, object] = {}
    if level is not None:
        overrides["level"] = level
    if file is not None:
        overrides["file"] = file
    if format is not None:
        overrides["format"] = format
    if include_stderr is not None:
        overrides["include_stderr"] = include_stderr
    if not overrides:
        return config
    return replace(config, **overrides)
