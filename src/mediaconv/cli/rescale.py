"""Commands for video resolution and image resize."""

from __future__ import annotations

import click

from mediaconv.cli.common import job_options, run_operation
from mediaconv.domain.enums import EncodingPreset, MediaKind, OperationType, ScaleFilter

# Common target widths offered by the resolution command.
RESOLUTION_WIDTHS = ("3840", "2560", "1920", "1280", "854")

_FILTER_CHOICE = click.Choice([f.value for f in ScaleFilter], case_sensitive=False)
_PRESET_CHOICE = click.Choice([p.value for p in EncodingPreset], case_sensitive=False)


def _scaling_options(func):
    func = click.option(
        "--filter",
        "scale_filter",
        type=_FILTER_CHOICE,
        default=ScaleFilter.BICUBIC.value,
        show_default=True,
        help="Scaling algorithm.",
    )(func)
    func = click.option(
        "--keep-aspect/--no-keep-aspect",
        "maintain_aspect_ratio",
        default=True,
        show_default=True,
        help="Derive the height from the width.",
    )(func)
    return click.option(
        "--height",
        default=None,
        help="Target height in pixels (requires --no-keep-aspect).",
    )(func)


def _video_options(func):
    func = click.option(
        "--keep-audio/--no-keep-audio",
        default=None,
        help="Copy the audio stream unchanged (default: keep).",
    )(func)
    return click.option(
        "--preset",
        type=_PRESET_CHOICE,
        default=None,
        help="Encoding speed preset (default: medium).",
    )(func)


def _image_options(func):
    return click.option(
        "--quality",
        default=None,
        help="Image quality 1-31, lower is better.",
    )(func)


@click.command("rescale")
@job_options
@click.option("--width", required=True, help="Target width in pixels.")
@_scaling_options
@_video_options
@_image_options
@click.pass_context
def rescale_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    width: str,
    height: str | None,
    maintain_aspect_ratio: bool,
    scale_filter: str,
    preset: str | None,
    keep_audio: bool | None,
    quality: str | None,
) -> None:
    """Resize a video or an image.

    INPUT is a file path or file:// URI. Video-only options are --preset
    and --keep-audio; --quality applies to images.
    """
    run_operation(
        ctx,
        OperationType.RESCALE,
        input_ref,
        {
            "width": width,
            "height": height,
            "maintain_aspect_ratio": maintain_aspect_ratio,
            "scale_filter": scale_filter.lower(),
            "preset": preset.lower() if preset else None,
            "keep_audio": keep_audio,
            "quality": quality,
        },
        dry_run=dry_run,
        json_output=json_output,
    )


@click.command("resolution")
@job_options
@click.option(
    "--width",
    type=click.Choice(RESOLUTION_WIDTHS),
    default="1920",
    show_default=True,
    help="Target width in pixels.",
)
@_scaling_options
@_video_options
@click.pass_context
def resolution_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    width: str,
    height: str | None,
    maintain_aspect_ratio: bool,
    scale_filter: str,
    preset: str | None,
    keep_audio: bool | None,
) -> None:
    """Change the resolution of a video."""
    run_operation(
        ctx,
        OperationType.RESCALE,
        input_ref,
        {
            "width": width,
            "height": height,
            "maintain_aspect_ratio": maintain_aspect_ratio,
            "scale_filter": scale_filter.lower(),
            "preset": preset.lower() if preset else None,
            "keep_audio": keep_audio,
        },
        dry_run=dry_run,
        json_output=json_output,
        allowed_kinds={MediaKind.VIDEO},
    )


@click.command("resize-image")
@job_options
@click.option("--width", required=True, help="Target width in pixels.")
@_scaling_options
@_image_options
@click.pass_context
def resize_image_command(
    ctx: click.Context,
    input_ref: str | None,
    dry_run: bool,
    json_output: bool,
    width: str,
    height: str | None,
    maintain_aspect_ratio: bool,
    scale_filter: str,
    quality: str | None,
) -> None:
    """Resize an image."""
    run_operation(
        ctx,
        OperationType.RESCALE,
        input_ref,
        {
            "width": width,
            "height": height,
            "maintain_aspect_ratio": maintain_aspect_ratio,
            "scale_filter": scale_filter.lower(),
            "quality": quality,
        },
        dry_run=dry_run,
        json_output=json_output,
        allowed_kinds={MediaKind.IMAGE},
    )
