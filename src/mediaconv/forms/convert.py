"""Form for format conversion."""

from __future__ import annotations

from pydantic import field_validator

from mediaconv.compiler.presets import (
    CONVERT_FORMATS,
    DEFAULT_CONVERT_FORMATS,
    IMAGE_QUALITY_MAX,
    IMAGE_QUALITY_MIN,
    MAX_CRF,
)
from mediaconv.domain.enums import MediaKind, VideoCodec
from mediaconv.domain.models import ConvertOptions
from mediaconv.errors import InvalidInputError
from mediaconv.forms.base import FormModel, check_range, reject_for_kind


class ConvertForm(FormModel):
    """Raw conversion options.

    ``target_format`` defaults per media kind (mp4, mp3 or jpg) when left
    empty. ``quality`` means CRF for video, kbps for audio and the
    quantizer for images.
    """

    target_format: str | None = None
    codec: VideoCodec | None = None
    quality: int | None = None
    max_quality: bool = False

    @field_validator("target_format")
    @classmethod
    def normalize_format(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.lower().lstrip(".")

    def to_options(self, media_kind: MediaKind) -> ConvertOptions:
        """Build typed options for the given media kind."""
        target = self.target_format or DEFAULT_CONVERT_FORMATS[media_kind]
        allowed = CONVERT_FORMATS[media_kind]
        if target not in allowed:
            raise InvalidInputError(
                f"Unsupported {media_kind.value} format '{target}'. "
                f"Choose one of: {', '.join(allowed)}",
                field="target_format",
            )

        if media_kind == MediaKind.VIDEO:
            codec = self.codec or VideoCodec.LIBX264
            if codec == VideoCodec.COPY:
                if self.quality is not None:
                    raise InvalidInputError(
                        "quality cannot be used with the copy codec", field="quality"
                    )
            else:
                check_range(self.quality, "quality", 0, MAX_CRF[codec])
        else:
            if self.codec is not None:
                raise reject_for_kind("codec", media_kind.value, "video")
            codec = VideoCodec.LIBX264
            if media_kind == MediaKind.AUDIO:
                check_range(self.quality, "quality", 1)
            else:
                check_range(
                    self.quality, "quality", IMAGE_QUALITY_MIN, IMAGE_QUALITY_MAX
                )

        return ConvertOptions(
            target_format=target,
            codec=codec,
            quality=self.quality,
            max_quality=self.max_quality,
        )
