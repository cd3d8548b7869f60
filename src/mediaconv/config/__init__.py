"""Configuration for mediaconv."""

from mediaconv.config.builder import ConfigBuilder, ConfigSource
from mediaconv.config.env import EnvReader
from mediaconv.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
    resolve_ffmpeg_path,
)
from mediaconv.config.logging_factory import build_logging_config
from mediaconv.config.models import (
    BehaviorConfig,
    LoggingConfig,
    MediaConvConfig,
    ToolPathsConfig,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "BehaviorConfig",
    "ConfigBuilder",
    "ConfigSource",
    "EnvReader",
    "LoggingConfig",
    "MediaConvConfig",
    "ToolPathsConfig",
    "build_logging_config",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "resolve_ffmpeg_path",
]
