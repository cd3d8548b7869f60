"""Command for compression."""

from __future__ import annotations

import click

from mediaconv.cli.common import job_options, run_operation
from mediaconv.domain.enums import CompressionLevel, OperationType


@click.command("compress")
@job_options
@click.option(
    "--level",
    type=click.Choice(
        [level.value for level in CompressionLevel], case_sensitive=False
    ),
    default=CompressionLevel.MEDIUM.value,
    show_default=True,
    help="Compression level.",
)
@click.option(
    "--quality",
    default=None,
    help="Explicit CRF, kbps or image quality; overrides --level.",
)
@click.pass_context
def compress_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    level: str,
    quality: str | None,
) -> None:
    """Compress a video, audio or image file."""
    run_operation(
        ctx,
        OperationType.COMPRESS,
        input_ref,
        {"level": level.lower(), "quality": quality},
        dry_run=dry_run,
        json_output=json_output,
    )
