"""Tests for FFmpegRunner."""

import logging
import stat
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mediaconv.domain import CompiledJob
from mediaconv.errors import ProcessExecutionError, ProcessLaunchError
from mediaconv.executor import FFmpegRunner


@pytest.fixture
def job(tmp_path: Path) -> CompiledJob:
    output = tmp_path / "clip.crf23.mp4"
    return CompiledJob(
        argv=("-i", str(tmp_path / "clip.mp4"), "-crf", "23", "-y", str(output)),
        output_path=output,
    )


@pytest.fixture
def make_stub(tmp_path: Path):
    """Return a factory writing an executable shell script standing in for ffmpeg."""

    def _make(body: str) -> Path:
        script = tmp_path / "fake-ffmpeg"
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _make


def _mock_process(stderr_lines: list[str], returncode: int) -> MagicMock:
    process = MagicMock()
    process.stderr = StringIO("".join(stderr_lines))
    process.wait.return_value = returncode
    return process


class TestFFmpegRunnerWithStub:
    """Runs against a stub executable."""

    def test_success_collects_stderr(self, job, make_stub):
        stub = make_stub('echo "ffmpeg version stub" >&2\nexit 0')

        result = FFmpegRunner(stub).run(job)

        assert result.exit_code == 0
        assert result.output_path == job.output_path
        assert "ffmpeg version stub" in result.stderr

    def test_receives_compiled_argv(self, job, make_stub, tmp_path):
        """The stub is called with exactly the compiled arguments."""
        record = tmp_path / "args.txt"
        stub = make_stub(f'for a in "$@"; do printf "%s\\n" "$a" >> "{record}"; done')

        FFmpegRunner(stub).run(job)

        assert tuple(record.read_text().splitlines()) == job.argv

    def test_non_zero_exit(self, job, make_stub):
        stub = make_stub('echo "Unknown encoder" >&2\nexit 3')

        with pytest.raises(ProcessExecutionError) as exc_info:
            FFmpegRunner(stub).run(job)

        assert exc_info.value.exit_code == 3
        assert exc_info.value.stderr == "Unknown encoder"
        assert str(exc_info.value) == "FFmpeg failed with code 3. Error: Unknown encoder"

    def test_missing_executable(self, job, tmp_path):
        with pytest.raises(ProcessLaunchError, match="Failed to start FFmpeg"):
            FFmpegRunner(tmp_path / "no-such-ffmpeg").run(job)

    def test_progress_callback(self, job, make_stub):
        stub = make_stub(
            'echo "  Duration: 00:00:10.00, start: 0.000000" >&2\n'
            'echo "frame=  10 fps=25 size=  1kB time=00:00:05.00 speed=1x" >&2'
        )
        seen = []

        FFmpegRunner(stub).run(job, lambda progress, duration: seen.append((progress, duration)))

        assert len(seen) == 1
        progress, duration = seen[0]
        assert duration == 10.0
        assert progress.get_percent(duration) == 50.0


class TestFFmpegRunnerMocked:
    """Tests with subprocess.Popen patched."""

    def test_command_and_pipes(self, job):
        with patch("mediaconv.executor.runner.subprocess.Popen") as mock_popen:
            mock_popen.return_value = _mock_process([], 0)
            FFmpegRunner("/opt/ffmpeg").run(job)

        args, kwargs = mock_popen.call_args
        assert args[0] == ["/opt/ffmpeg", *job.argv]
        assert kwargs["stderr"] is not None
        assert kwargs["text"] is True
        assert "shell" not in kwargs

    def test_spawns_once(self, job):
        with patch("mediaconv.executor.runner.subprocess.Popen") as mock_popen:
            mock_popen.return_value = _mock_process(["x\n"], 1)
            with pytest.raises(ProcessExecutionError):
                FFmpegRunner("ffmpeg").run(job)

        assert mock_popen.call_count == 1

    def test_os_error_maps_to_launch_error(self, job):
        with patch(
            "mediaconv.executor.runner.subprocess.Popen",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(ProcessLaunchError, match="denied"):
                FFmpegRunner("ffmpeg").run(job)

    def test_callback_errors_logged(self, job, caplog):
        """A failing progress callback does not abort the run."""
        lines = ["frame= 1 fps=1 time=00:00:01.00 speed=1x\n"]

        def broken(progress, duration):
            raise RuntimeError("display gone")

        with patch("mediaconv.executor.runner.subprocess.Popen") as mock_popen:
            mock_popen.return_value = _mock_process(lines, 0)
            with caplog.at_level(logging.WARNING):
                result = FFmpegRunner("ffmpeg").run(job, broken)

        assert result.exit_code == 0
        assert "display gone" in caplog.text

    def test_command_logged(self, job, caplog):
        with patch("mediaconv.executor.runner.subprocess.Popen") as mock_popen:
            mock_popen.return_value = _mock_process([], 0)
            with caplog.at_level(logging.INFO, logger="mediaconv.executor.runner"):
                FFmpegRunner("ffmpeg").run(job)

        assert "Running FFmpeg: ffmpeg -i" in caplog.text
