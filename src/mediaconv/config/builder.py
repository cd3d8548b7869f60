"""Configuration builder with explicit layering.

ConfigBuilder composes ConfigSource values from the config file, the
environment and the command line, later sources overriding earlier ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from mediaconv.config.env import EnvReader
from mediaconv.config.models import (
    BehaviorConfig,
    LoggingConfig,
    MediaConvConfig,
    ToolPathsConfig,
)

logger = logging.getLogger(__name__)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values mean "not specified in this source" and do not override
    values from lower-precedence sources.
    """

    # Tool paths
    ffmpeg_path: Path | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None

    # Behavior config
    protect_input: bool | None = None


class ConfigBuilder:
    """Builds MediaConvConfig by layering ConfigSources with precedence.

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config), source_name="file")
        builder.apply(source_from_env(reader), source_name="env")
        builder.apply(cli_source, source_name="cli")
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply a configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label used in debug logging.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                logger.debug("Config %s set from %s", field_obj.name, source_name)
                self._values[field_obj.name] = value

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> MediaConvConfig:
        """Build the final configuration with defaults for unset values.

        Raises:
            ValueError: If a layered value fails validation.
        """
        tools = ToolPathsConfig(ffmpeg=self._get("ffmpeg_path", None))

        logging_config = LoggingConfig(
            level=self._get("logging_level", "info"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "text"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        behavior = BehaviorConfig(
            protect_input=self._get("protect_input", True),
        )

        return MediaConvConfig(tools=tools, logging=logging_config, behavior=behavior)


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def _value(section: dict[str, Any], section_name: str, key: str, kind: type) -> Any:
    value = section.get(key)
    if value is None:
        return None
    # TOML booleans must not pass as integers
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(
            f"{section_name}.{key} must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed TOML config file.

    Raises:
        ValueError: If a section is not a table or a value has the wrong type.
    """
    tools = _section(file_config, "tools")
    logging_conf = _section(file_config, "logging")
    behavior = _section(file_config, "behavior")

    ffmpeg = _value(tools, "tools", "ffmpeg", str)
    log_file = _value(logging_conf, "logging", "file", str)

    return ConfigSource(
        ffmpeg_path=Path(ffmpeg).expanduser() if ffmpeg else None,
        logging_level=_value(logging_conf, "logging", "level", str),
        logging_file=Path(log_file).expanduser() if log_file else None,
        logging_format=_value(logging_conf, "logging", "format", str),
        logging_include_stderr=_value(
            logging_conf, "logging", "include_stderr", bool
        ),
        logging_max_bytes=_value(logging_conf, "logging", "max_bytes", int),
        logging_backup_count=_value(logging_conf, "logging", "backup_count", int),
        protect_input=_value(behavior, "behavior", "protect_input", bool),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from MEDIACONV_* environment variables."""
    return ConfigSource(
        ffmpeg_path=reader.get_path("MEDIACONV_FFMPEG_PATH"),
        logging_level=reader.get_str("MEDIACONV_LOG_LEVEL"),
        logging_file=reader.get_path("MEDIACONV_LOG_FILE"),
        logging_format=reader.get_str("MEDIACONV_LOG_FORMAT"),
        protect_input=reader.get_bool("MEDIACONV_PROTECT_INPUT"),
    )
