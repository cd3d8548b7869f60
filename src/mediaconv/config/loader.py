"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (MEDIACONV_*)
3. Config file (~/.mediaconv/config.toml)
4. Default values

Environment variables:
- MEDIACONV_CONFIG_PATH: Path to config file (overrides default location)
- MEDIACONV_FFMPEG_PATH: Path to ffmpeg executable
- MEDIACONV_LOG_LEVEL: debug, info, warning or error
- MEDIACONV_LOG_FILE: Log file path
- MEDIACONV_LOG_FORMAT: text or json
- MEDIACONV_PROTECT_INPUT: Refuse outputs that would overwrite the input
"""

from __future__ import annotations

import logging
import shutil
import tomllib
from pathlib import Path
from typing import Any

from mediaconv.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from mediaconv.config.env import EnvReader
from mediaconv.config.models import MediaConvConfig
from mediaconv.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".mediaconv"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_FFMPEG_NAME = "ffmpeg"


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the config file path, honoring MEDIACONV_CONFIG_PATH."""
    reader = env_reader or EnvReader()
    return reader.get_path("MEDIACONV_CONFIG_PATH") or DEFAULT_CONFIG_FILE


def load_config_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file.
        strict: If True, raise on unreadable or invalid files instead of
            falling back to an empty configuration.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.

    Raises:
        ConfigurationError: When strict=True and the file cannot be parsed.
    """
    if not path.exists():
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        logger.warning("Ignoring invalid config file %s: %s", path, e)
        return {}


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> MediaConvConfig:
    """Get mediaconv configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides MEDIACONV_CONFIG_PATH).
        ffmpeg_path: CLI override for the ffmpeg path.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise on config file parse failures.

    Returns:
        MediaConvConfig with merged configuration.

    Raises:
        ConfigurationError: If the merged values are invalid, or when
            strict=True and the config file cannot be parsed
            or holds values of the wrong type.
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)

    file_config = load_config_file(path, strict=strict)
    try:
        file_source = source_from_file(file_config)
    except ValueError as e:
        if strict:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e
        logger.warning("Ignoring invalid config file %s: %s", path, e)
        file_source = ConfigSource()

    cli_source = ConfigSource(ffmpeg_path=ffmpeg_path)

    # Build with precedence: file < env < cli
    builder = ConfigBuilder()
    builder.apply(file_source, source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")

    try:
        return builder.build()
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def resolve_ffmpeg_path(config: MediaConvConfig) -> Path | str:
    """Return the FFmpeg executable to run.

    Uses the configured path if set, otherwise the first ``ffmpeg`` on PATH,
    otherwise the bare name (which will fail to launch with a clear error).
    """
    if config.tools.ffmpeg is not None:
        return config.tools.ffmpeg
    found = shutil.which(DEFAULT_FFMPEG_NAME)
    if found:
        return Path(found)
    logger.warning("ffmpeg not found on PATH, using '%s'", DEFAULT_FFMPEG_NAME)
    return DEFAULT_FFMPEG_NAME
