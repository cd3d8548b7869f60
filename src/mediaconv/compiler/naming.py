"""Number formatting and output path derivation shared by all compilers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def format_number(value: float | int) -> str:
    """Render a number in its shortest form.

    Integral floats lose their fractional part (``2.0`` -> ``"2"``); other
    floats use the shortest round-trip representation (``0.5``,
    ``0.3333333333333333``).
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def derive_output_path(
    input_path: Path,
    suffixes: Sequence[str],
    extension: str | None = None,
) -> Path:
    """Build the output path next to the input file.

    Args:
        input_path: The job's input file.
        suffixes: Tokens joined with dots and placed between the input stem
            and the extension. Empty tokens are skipped.
        extension: Replacement extension without the dot. Defaults to the
            input's own extension.

    Returns:
        ``<dir>/<stem>.<suffix tokens>.<extension>``
    """
    ext = input_path.suffix if extension is None else f".{extension}"
    name = ".".join([input_path.stem, *(s for s in suffixes if s)])
    return input_path.parent / f"{name}{ext}"


def finalize_argv(
    input_path: Path,
    body: Sequence[str],
    output_path: Path,
) -> tuple[str, ...]:
    """Wrap operation arguments with the input and overwriting output flags."""
    return ("-i", str(input_path), *body, "-y", str(output_path))
