"""Media kind detection and input resolution."""

from mediaconv.media.detection import (
    AUDIO_EXTENSIONS,
    IMAGE_EXTENSIONS,
    KIND_EXTENSIONS,
    OPERATION_KINDS,
    VIDEO_EXTENSIONS,
    detect_media_kind,
    reference_to_path,
    resolve_candidate,
)

__all__ = [
    "AUDIO_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "KIND_EXTENSIONS",
    "OPERATION_KINDS",
    "VIDEO_EXTENSIONS",
    "detect_media_kind",
    "reference_to_path",
    "resolve_candidate",
]
