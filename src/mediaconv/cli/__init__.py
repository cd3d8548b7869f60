"""CLI module for mediaconv."""

import logging
from pathlib import Path

import click

from mediaconv.cli.exit_codes import ExitCode
from mediaconv.cli.output import error_exit
from mediaconv.config.loader import get_config
from mediaconv.config.logging_factory import build_logging_config
from mediaconv.config.models import MediaConvConfig
from mediaconv.errors import ConfigurationError
from mediaconv.logging import configure_logging

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    config: MediaConvConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the loaded config and CLI overrides."""
    global _logging_configured
    if _logging_configured:
        return

    configure_logging(
        build_logging_config(
            config.logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    )
    _logging_configured = True


@click.group()
@click.version_option(package_name="mediaconv")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.mediaconv/config.toml).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="FFmpeg executable to run.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    config_path: Path | None,
    ffmpeg_path: Path | None,
) -> None:
    """mediaconv - Resize, retime, convert and compress media with FFmpeg."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(config_path, ffmpeg_path=ffmpeg_path)
        except ConfigurationError as e:
            error_exit(str(e), ExitCode.CONFIG_ERROR)

    _configure_logging(ctx.obj["config"], log_level, log_file, log_json)


# Defer import to avoid circular dependency
def _register_commands():
    from mediaconv.cli.compress import compress_command
    from mediaconv.cli.convert import convert_command
    from mediaconv.cli.rescale import (
        rescale_command,
        resize_image_command,
        resolution_command,
    )
    from mediaconv.cli.speed import speed_command

    main.add_command(rescale_command)
    main.add_command(resolution_command)
    main.add_command(resize_image_command)
    main.add_command(speed_command)
    main.add_command(convert_command)
    main.add_command(compress_command)


_register_commands()
