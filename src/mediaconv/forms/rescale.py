"""Form for video resolution and image resize."""

from __future__ import annotations

from pydantic import Field, model_validator

from mediaconv.compiler.presets import IMAGE_QUALITY_MAX, IMAGE_QUALITY_MIN
from mediaconv.domain.enums import EncodingPreset, MediaKind, ScaleFilter
from mediaconv.domain.models import RescaleOptions
from mediaconv.forms.base import FormModel, check_range, reject_for_kind


class RescaleForm(FormModel):
    """Raw rescale options.

    ``preset``, ``keep_audio`` and ``quality`` are optional here so that an
    option given for the wrong media kind can be reported rather than
    silently dropped.
    """

    width: int = Field(gt=0)
    height: int | None = Field(default=None, gt=0)
    maintain_aspect_ratio: bool = True
    scale_filter: ScaleFilter = ScaleFilter.BICUBIC
    preset: EncodingPreset | None = None
    keep_audio: bool | None = None
    quality: int | None = None

    @model_validator(mode="after")
    def require_height_without_aspect(self) -> RescaleForm:
        if not self.maintain_aspect_ratio and self.height is None:
            raise ValueError(
                "height is required when the aspect ratio is not maintained"
            )
        return self

    def to_options(self, media_kind: MediaKind) -> RescaleOptions:
        """Build typed options for the given media kind."""
        if media_kind == MediaKind.VIDEO:
            if self.quality is not None:
                raise reject_for_kind("quality", media_kind.value, "image")
        else:
            if self.preset is not None:
                raise reject_for_kind("preset", media_kind.value, "video")
            if self.keep_audio is not None:
                raise reject_for_kind("keep_audio", media_kind.value, "video")
            check_range(self.quality, "quality", IMAGE_QUALITY_MIN, IMAGE_QUALITY_MAX)

        return RescaleOptions(
            width=self.width,
            height=self.height,
            maintain_aspect_ratio=self.maintain_aspect_ratio,
            scale_filter=self.scale_filter,
            preset=self.preset or EncodingPreset.MEDIUM,
            keep_audio=True if self.keep_audio is None else self.keep_audio,
            quality=self.quality,
        )
