"""FFmpeg stderr progress parsing.

FFmpeg reports encoding statistics on stderr in lines such as::

    frame= 1234 fps= 30 size= 2048kB time=00:01:23.45 bitrate=5000kbits/s speed=2x

Audio-only and image jobs omit ``frame=`` but still report ``size=`` and
``time=``. The input duration is announced once near the top of the output
as ``Duration: 00:10:00.00``.
"""

import re
from dataclasses import dataclass

_TIME_PATTERN = r"(\d+):(\d+):(\d+)\.(\d+)"


@dataclass
class FFmpegProgress:
    """Parsed FFmpeg progress line."""

    frame: int | None = None
    fps: float | None = None
    size: str | None = None
    bitrate: str | None = None
    out_time_us: int | None = None  # Output time in microseconds
    speed: str | None = None

    @property
    def out_time_seconds(self) -> float | None:
        """Get output time in seconds."""
        if self.out_time_us is not None:
            return self.out_time_us / 1_000_000
        return None

    def get_percent(self, duration_seconds: float | None) -> float:
        """Calculate progress percentage based on duration.

        Args:
            duration_seconds: Total duration of the input in seconds.

        Returns:
            Progress percentage (0.0 to 100.0), or 0.0 if unknown.
        """
        if duration_seconds is None or duration_seconds <= 0:
            return 0.0
        out_time = self.out_time_seconds
        if out_time is None:
            return 0.0
        return min(100.0, (out_time / duration_seconds) * 100)


PROGRESS_PATTERNS = {
    "frame": re.compile(r"frame=\s*(\d+)"),
    "fps": re.compile(r"fps=\s*([\d.]+)"),
    "size": re.compile(r"\bsize=\s*([^\s]+)"),
    "bitrate": re.compile(r"bitrate=\s*([^\s]+)"),
    "speed": re.compile(r"speed=\s*([^\s]+)"),
}

_STDERR_TIME = re.compile(r"time=" + _TIME_PATTERN)
_DURATION = re.compile(r"Duration:\s*" + _TIME_PATTERN)


def _timestamp_to_us(match: re.Match[str]) -> int:
    hours, minutes, seconds = (int(match.group(i)) for i in (1, 2, 3))
    fraction = match.group(4)
    # Fraction digits are centiseconds in practice, but scale by their count.
    fraction_us = int(fraction) * 10 ** (6 - len(fraction)) if len(fraction) <= 6 else 0
    return (hours * 3600 + minutes * 60 + seconds) * 1_000_000 + fraction_us


def _convert_progress_value(key: str, value: str) -> int | float | str | None:
    """Convert a progress value to the appropriate type.

    Args:
        key: The field name.
        value: The string value to convert.

    Returns:
        Converted value or None.
    """
    if key == "frame":
        try:
            return int(value)
        except ValueError:
            return None
    if key == "fps":
        try:
            return float(value)
        except ValueError:
            return None
    return value if value != "N/A" else None


def parse_stderr_progress(line: str) -> FFmpegProgress | None:
    """Parse an FFmpeg stderr statistics line.

    Args:
        line: A line from FFmpeg stderr.

    Returns:
        Parsed FFmpegProgress or None if not a progress line.
    """
    if "time=" not in line or ("frame=" not in line and "size=" not in line):
        return None

    result = FFmpegProgress()

    for key, pattern in PROGRESS_PATTERNS.items():
        match = pattern.search(line)
        if match:
            converted = _convert_progress_value(key, match.group(1))
            if converted is not None:
                setattr(result, key, converted)

    time_match = _STDERR_TIME.search(line)
    if time_match:
        result.out_time_us = _timestamp_to_us(time_match)

    return result


def parse_duration(line: str) -> float | None:
    """Extract the input duration in seconds from a ``Duration:`` line.

    Returns:
        Duration in seconds, or None if the line carries no duration.
    """
    match = _DURATION.search(line)
    if match is None:
        return None
    return _timestamp_to_us(match) / 1_000_000
