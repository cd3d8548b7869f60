"""Form for compression."""

from __future__ import annotations

from mediaconv.compiler.presets import IMAGE_QUALITY_MAX, IMAGE_QUALITY_MIN, MAX_CRF
from mediaconv.domain.enums import CompressionLevel, MediaKind, VideoCodec
from mediaconv.domain.models import CompressOptions
from mediaconv.forms.base import FormModel, check_range


class CompressForm(FormModel):
    """Raw compression options. A given quality overrides the level."""

    level: CompressionLevel = CompressionLevel.MEDIUM
    quality: int | None = None

    def to_options(self, media_kind: MediaKind) -> CompressOptions:
        """Build typed options for the given media kind."""
        if media_kind == MediaKind.VIDEO:
            check_range(self.quality, "quality", 0, MAX_CRF[VideoCodec.LIBX264])
        elif media_kind == MediaKind.AUDIO:
            check_range(self.quality, "quality", 1)
        else:
            check_range(self.quality, "quality", IMAGE_QUALITY_MIN, IMAGE_QUALITY_MAX)
        return CompressOptions(level=self.level, quality=self.quality)
