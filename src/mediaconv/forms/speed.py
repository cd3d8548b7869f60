"""Form for playback speed changes."""

from __future__ import annotations

from pydantic import Field

from mediaconv.domain.enums import MediaKind
from mediaconv.domain.models import DEFAULT_SAMPLE_RATE, SpeedOptions
from mediaconv.errors import InvalidInputError
from mediaconv.forms.base import FormModel, reject_for_kind


class SpeedForm(FormModel):
    """Raw speed options. Audio speed and pitch handling apply to video.

    ``sample_rate`` is only meaningful together with ``maintain_pitch``.
    """

    speed: float = Field(gt=0, allow_inf_nan=False)
    audio_speed: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    maintain_pitch: bool = False
    sample_rate: int | None = Field(default=None, gt=0)

    def to_options(self, media_kind: MediaKind) -> SpeedOptions:
        """Build typed options for the given media kind."""
        if media_kind != MediaKind.VIDEO:
            for name in ("audio_speed", "sample_rate"):
                if getattr(self, name) is not None:
                    raise reject_for_kind(name, media_kind.value, "video")
            if self.maintain_pitch:
                raise reject_for_kind("maintain_pitch", media_kind.value, "video")
        elif self.sample_rate is not None and not self.maintain_pitch:
            raise InvalidInputError(
                "sample_rate only applies when maintain_pitch is set",
                field="sample_rate",
            )

        return SpeedOptions(
            speed=self.speed,
            audio_speed=self.audio_speed,
            maintain_pitch=self.maintain_pitch,
            sample_rate=self.sample_rate or DEFAULT_SAMPLE_RATE,
        )
