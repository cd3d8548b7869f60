"""Tests for compile_job() dispatch and cross-operation invariants."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from mediaconv.compiler import compile_job
from mediaconv.domain import (
    CompressOptions,
    ConvertOptions,
    JobRequest,
    MediaKind,
    RescaleOptions,
    SpeedOptions,
    VideoCodec,
)
from mediaconv.errors import UnsupportedOperationError

SUPPORTED_CASES = [
    (RescaleOptions(width=1280), MediaKind.VIDEO),
    (RescaleOptions(width=300, quality=5), MediaKind.IMAGE),
    (SpeedOptions(speed=1.5, maintain_pitch=True), MediaKind.VIDEO),
    (SpeedOptions(speed=0.25), MediaKind.AUDIO),
    (ConvertOptions(target_format="webm", codec=VideoCodec.LIBVPX_VP9), MediaKind.VIDEO),
    (ConvertOptions(target_format="flac", max_quality=True), MediaKind.AUDIO),
    (ConvertOptions(target_format="png"), MediaKind.IMAGE),
    (CompressOptions(), MediaKind.VIDEO),
    (CompressOptions(quality=64), MediaKind.AUDIO),
    (CompressOptions(), MediaKind.IMAGE),
]


class TestCompileJobInvariants:
    """Properties that hold for every supported request."""

    @pytest.mark.parametrize(("operation", "kind"), SUPPORTED_CASES)
    def test_argv_shape(self, make_request, operation, kind):
        """argv starts with the input and ends with the overwriting output."""
        request = make_request(operation, kind)
        job = compile_job(request)

        assert job.argv[:2] == ("-i", str(request.input_path))
        assert job.argv[-2:] == ("-y", str(job.output_path))

    @pytest.mark.parametrize(("operation", "kind"), SUPPORTED_CASES)
    def test_output_next_to_input(self, make_request, operation, kind):
        """The output is always in the input's directory."""
        request = make_request(operation, kind)
        assert compile_job(request).output_path.parent == request.input_path.parent

    @pytest.mark.parametrize(("operation", "kind"), SUPPORTED_CASES)
    def test_deterministic(self, make_request, operation, kind):
        """Equal requests compile to identical jobs."""
        first = compile_job(make_request(operation, kind))
        second = compile_job(make_request(operation, kind))
        assert first == second

    def test_no_filesystem_access(self, make_request):
        """Compilation works for paths that do not exist."""
        request = make_request(CompressOptions(), path="/does/not/exist/clip.mp4")
        assert not request.input_path.exists()
        assert compile_job(request).output_path == Path("/does/not/exist/clip.crf23.mp4")

    def test_output_equal_to_input_allowed(self, make_request):
        """The compiler does not reject outputs that match the input."""
        request = make_request(ConvertOptions(target_format="mp4", codec=VideoCodec.COPY))
        assert compile_job(request).output_path == request.input_path


class TestCompileJobDispatch:
    """Tests for dispatch and unsupported combinations."""

    @pytest.mark.parametrize(
        ("operation", "kind"),
        [
            (RescaleOptions(width=640), MediaKind.AUDIO),
            (SpeedOptions(speed=2.0), MediaKind.IMAGE),
        ],
    )
    def test_unsupported_kind(self, make_request, operation, kind):
        """Unmapped kind/operation pairs raise before producing arguments."""
        with pytest.raises(UnsupportedOperationError) as exc_info:
            compile_job(make_request(operation, kind))
        assert exc_info.value.media_kind == kind.value

    def test_unknown_payload(self):
        """Payload types without a compiler are rejected."""

        @dataclass(frozen=True)
        class TrimOptions:
            start: float

        request = JobRequest(
            input_path=Path("/media/clip.mp4"),
            media_kind=MediaKind.VIDEO,
            operation=TrimOptions(start=1.0),  # type: ignore[arg-type]
        )
        with pytest.raises(UnsupportedOperationError, match="TrimOptions"):
            compile_job(request)

    def test_operation_type_property(self, make_request):
        """Requests report their operation type."""
        request = make_request(SpeedOptions(speed=2.0))
        assert request.operation_type.value == "speed"

    def test_describe_quotes_paths(self):
        """describe() shell-quotes paths with spaces."""
        request = JobRequest(
            input_path=Path("/media/my clip.mp4"),
            media_kind=MediaKind.VIDEO,
            operation=CompressOptions(),
        )
        text = compile_job(request).describe("/usr/bin/ffmpeg")
        assert text.startswith("/usr/bin/ffmpeg -i '/media/my clip.mp4'")
