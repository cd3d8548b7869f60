"""mediaconv: compile video, audio and image edits into FFmpeg invocations."""

__version__ = "0.1.0"
