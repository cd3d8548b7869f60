"""Fixtures for CLI tests."""

import stat
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mediaconv.config import MediaConvConfig, ToolPathsConfig


@pytest.fixture(autouse=True)
def _isolate_cli(monkeypatch):
    """Keep CLI tests away from the real logging setup and environment."""
    monkeypatch.delenv("MEDIACONV_RECENT_FILE", raising=False)
    with patch("mediaconv.cli._configure_logging"):
        yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_ffmpeg(tmp_path: Path):
    """Return a factory for stub ffmpeg scripts exiting with a given code."""

    def _make(exit_code: int = 0, stderr: str = "stub ffmpeg") -> Path:
        script = tmp_path / "bin" / "ffmpeg"
        script.parent.mkdir(exist_ok=True)
        script.write_text(f'#!/bin/sh\necho "{stderr}" >&2\nexit {exit_code}\n')
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _make


@pytest.fixture
def cli_obj():
    """Return a factory for the click context object holding the config."""

    def _make(ffmpeg: Path | str = "/usr/bin/ffmpeg") -> dict:
        return {"config": MediaConvConfig(tools=ToolPathsConfig(ffmpeg=Path(ffmpeg)))}

    return _make
