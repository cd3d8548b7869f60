"""Shared test fixtures for mediaconv."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from mediaconv.domain import JobOperation, JobRequest, MediaKind


@pytest.fixture
def make_media_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory creating empty media files under tmp_path."""

    def _make(name: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x00")
        return path

    return _make


@pytest.fixture
def make_request() -> Callable[..., JobRequest]:
    """Return a factory for requests on fixed, non-existent paths.

    The compiler never touches the filesystem, so these paths need not exist.
    """

    def _make(
        operation: JobOperation,
        kind: MediaKind = MediaKind.VIDEO,
        path: str | None = None,
    ) -> JobRequest:
        default_names = {
            MediaKind.VIDEO: "/media/clip.mp4",
            MediaKind.AUDIO: "/media/song.mp3",
            MediaKind.IMAGE: "/media/photo.jpg",
        }
        return JobRequest(
            input_path=Path(path or default_names[kind]),
            media_kind=kind,
            operation=operation,
        )

    return _make


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
