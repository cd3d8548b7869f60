"""Tests for number formatting and output path derivation."""

from pathlib import Path

import pytest

from mediaconv.compiler.naming import derive_output_path, finalize_argv, format_number


class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.0, "2"),
            (1.0, "1"),
            (0.5, "0.5"),
            (1.5, "1.5"),
            (1 / 3, "0.3333333333333333"),
            (4, "4"),
            (44100, "44100"),
        ],
    )
    def test_shortest_form(self, value, expected):
        """Integral floats drop the fraction, others use repr."""
        assert format_number(value) == expected


class TestDeriveOutputPath:
    """Tests for derive_output_path()."""

    def test_suffixes_before_original_extension(self):
        """Suffix tokens are dot-joined between stem and extension."""
        result = derive_output_path(Path("/media/clip.mp4"), ["2x", "pitch"])
        assert result == Path("/media/clip.2x.pitch.mp4")

    def test_replacement_extension(self):
        """An explicit extension replaces the input's."""
        result = derive_output_path(Path("/media/clip.mov"), ["libx264", "q23"], "mp4")
        assert result == Path("/media/clip.libx264.q23.mp4")

    def test_no_suffixes_keeps_name(self):
        """Without suffixes the original name is reproduced."""
        assert derive_output_path(Path("/media/clip.mp4"), []) == Path("/media/clip.mp4")

    def test_empty_tokens_skipped(self):
        """Empty suffix tokens do not produce double dots."""
        result = derive_output_path(Path("/media/photo.png"), ["", "q5"])
        assert result == Path("/media/photo.q5.png")

    def test_dotted_stem_preserved(self):
        """Only the final extension is treated as the extension."""
        result = derive_output_path(Path("/media/my.holiday.clip.mkv"), ["1280p"])
        assert result == Path("/media/my.holiday.clip.1280p.mkv")

    def test_output_stays_in_input_directory(self):
        """Output is always placed next to the input."""
        result = derive_output_path(Path("/a/b/c/song.flac"), ["128kbps"])
        assert result.parent == Path("/a/b/c")


class TestFinalizeArgv:
    """Tests for finalize_argv()."""

    def test_wraps_body(self):
        """Input flag comes first and the overwrite flag and output last."""
        argv = finalize_argv(Path("/in.mp4"), ["-crf", "23"], Path("/out.mp4"))
        assert argv == ("-i", "/in.mp4", "-crf", "23", "-y", "/out.mp4")
