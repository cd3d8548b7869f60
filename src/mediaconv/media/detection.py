"""Media kind detection and input file resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import unquote, urlparse

from mediaconv.domain.enums import MediaKind, OperationType

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = frozenset({"mp4", "mov", "avi", "mkv", "webm"})
AUDIO_EXTENSIONS = frozenset({"mp3", "m4a", "wav", "aac", "ogg", "flac"})
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})

KIND_EXTENSIONS: dict[MediaKind, frozenset[str]] = {
    MediaKind.VIDEO: VIDEO_EXTENSIONS,
    MediaKind.AUDIO: AUDIO_EXTENSIONS,
    MediaKind.IMAGE: IMAGE_EXTENSIONS,
}

# Media kinds each operation can be compiled for.
OPERATION_KINDS: dict[OperationType, frozenset[MediaKind]] = {
    OperationType.RESCALE: frozenset({MediaKind.VIDEO, MediaKind.IMAGE}),
    OperationType.SPEED: frozenset({MediaKind.VIDEO, MediaKind.AUDIO}),
    OperationType.CONVERT: frozenset(MediaKind),
    OperationType.COMPRESS: frozenset(MediaKind),
}


def detect_media_kind(path: Path | str) -> MediaKind | None:
    """Classify a file by its extension.

    Args:
        path: File path. Only the extension is inspected.

    Returns:
        The media kind, or None if the extension is not recognized.
    """
    extension = Path(path).suffix.lower().lstrip(".")
    if not extension:
        return None
    for kind, extensions in KIND_EXTENSIONS.items():
        if extension in extensions:
            return kind
    return None


def reference_to_path(reference: str) -> Path:
    """Convert a path or ``file://`` URI into a filesystem path.

    URI references are percent-decoded. Plain paths have ``~`` expanded.
    """
    if reference.startswith("file://"):
        parsed = urlparse(reference)
        return Path(unquote(parsed.path))
    return Path(reference).expanduser()


def resolve_candidate(
    reference: str | None,
    kinds: Iterable[MediaKind],
) -> Path | None:
    """Resolve an externally supplied file reference for use as job input.

    Used for the "current selection" fallback, where a reference is only
    accepted if it points at an existing file of one of the wanted kinds.

    Args:
        reference: Path or ``file://`` URI, or None.
        kinds: Media kinds acceptable for the operation at hand.

    Returns:
        The resolved path, or None if the reference is empty, missing on
        disk, or of the wrong kind.
    """
    if not reference:
        return None

    path = reference_to_path(reference.strip())
    if not path.is_file():
        logger.debug("Ignoring candidate %s: not an existing file", path)
        return None

    kind = detect_media_kind(path)
    if kind is None or kind not in frozenset(kinds):
        logger.debug("Ignoring candidate %s: kind %s not accepted", path, kind)
        return None

    return path
