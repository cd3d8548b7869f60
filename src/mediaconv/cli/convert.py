"""Command for format conversion."""

from __future__ import annotations

import click

from mediaconv.cli.common import job_options, run_operation
from mediaconv.domain.enums import OperationType, VideoCodec


@click.command("convert")
@job_options
@click.option(
    "--format",
    "target_format",
    default=None,
    help="Output format (default: mp4, mp3 or jpg by media kind).",
)
@click.option(
    "--codec",
    type=click.Choice([c.value for c in VideoCodec], case_sensitive=False),
    default=None,
    help="Video codec (default: libx264).",
)
@click.option(
    "--quality",
    default=None,
    help="CRF for video, kbps for audio, 1-31 for images.",
)
@click.option(
    "--max-quality",
    is_flag=True,
    default=False,
    help="Use the lossless or best-quality variant.",
)
@click.pass_context
def convert_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    target_format: str | None,
    codec: str | None,
    quality: str | None,
    max_quality: bool,
) -> None:
    """Convert a video, audio or image file to another format."""
    run_operation(
        ctx,
        OperationType.CONVERT,
        input_ref,
        {
            "target_format": target_format,
            "codec": codec.lower() if codec else None,
            "quality": quality,
            "max_quality": max_quality,
        },
        dry_run=dry_run,
        json_output=json_output,
    )
