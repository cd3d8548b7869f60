"""Command for playback speed changes."""

from __future__ import annotations

import click

from mediaconv.cli.common import job_options, run_operation
from mediaconv.domain.enums import OperationType


@click.command("speed")
@job_options
@click.option(
    "--speed",
    default="2.0",
    show_default=True,
    help="Playback speed multiplier (0.5 = half, 2 = double).",
)
@click.option(
    "--audio-speed",
    default=None,
    help="Separate audio speed multiplier (video only).",
)
@click.option(
    "--maintain-pitch",
    is_flag=True,
    default=False,
    help="Change audio speed by resampling (video only).",
)
@click.option(
    "--sample-rate",
    default=None,
    help="Sample rate used with --maintain-pitch (default: 44100).",
)
@click.pass_context
def speed_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    speed: str,
    audio_speed: str | None,
    maintain_pitch: bool,
    sample_rate: str | None,
) -> None:
    """Speed up or slow down a video or audio file."""
    run_operation(
        ctx,
        OperationType.SPEED,
        input_ref,
        {
            "speed": speed,
            "audio_speed": audio_speed,
            "maintain_pitch": maintain_pitch,
            "sample_rate": sample_rate,
        },
        dry_run=dry_run,
        json_output=json_output,
    )
