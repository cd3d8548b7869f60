"""Tests for configuration loading and layering."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from mediaconv.config import (
    ConfigBuilder,
    ConfigSource,
    EnvReader,
    LoggingConfig,
    MediaConvConfig,
    ToolPathsConfig,
    build_logging_config,
    get_config,
    get_default_config_path,
    load_config_file,
    resolve_ffmpeg_path,
)
from mediaconv.config.builder import source_from_file
from mediaconv.config.loader import DEFAULT_CONFIG_FILE
from mediaconv.errors import ConfigurationError

CONFIG_TOML = """
[tools]
ffmpeg = "/opt/homebrew/bin/ffmpeg"

[logging]
level = "warning"
format = "json"
max_bytes = 2048
backup_count = 2

[behavior]
protect_input = false
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)
    return path


class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_missing_file(self, tmp_path):
        assert load_config_file(tmp_path / "absent.toml") == {}

    def test_parses_toml(self, config_file):
        data = load_config_file(config_file)
        assert data["tools"]["ffmpeg"] == "/opt/homebrew/bin/ffmpeg"
        assert data["behavior"]["protect_input"] is False

    def test_invalid_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "bad.toml"
        path.write_text("[tools\nffmpeg = ")
        with caplog.at_level(logging.WARNING):
            assert load_config_file(path) == {}
        assert "Ignoring invalid config file" in caplog.text

    def test_invalid_file_strict(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[tools\nffmpeg = ")
        with pytest.raises(ConfigurationError):
            load_config_file(path, strict=True)


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path()."""

    def test_default(self):
        assert get_default_config_path(EnvReader(env={})) == DEFAULT_CONFIG_FILE

    def test_env_override(self, tmp_path):
        reader = EnvReader(env={"MEDIACONV_CONFIG_PATH": str(tmp_path / "c.toml")})
        assert get_default_config_path(reader) == tmp_path / "c.toml"


class TestGetConfig:
    """Tests for get_config() precedence."""

    def test_defaults(self, tmp_path):
        config = get_config(tmp_path / "absent.toml", env_reader=EnvReader(env={}))

        assert config == MediaConvConfig()
        assert config.behavior.protect_input is True
        assert config.logging.level == "info"

    def test_file_values(self, config_file):
        config = get_config(config_file, env_reader=EnvReader(env={}))

        assert config.tools.ffmpeg == Path("/opt/homebrew/bin/ffmpeg")
        assert config.logging.level == "warning"
        assert config.logging.format == "json"
        assert config.logging.max_bytes == 2048
        assert config.logging.backup_count == 2
        assert config.behavior.protect_input is False

    def test_env_overrides_file(self, config_file):
        reader = EnvReader(
            env={
                "MEDIACONV_FFMPEG_PATH": "/usr/local/bin/ffmpeg",
                "MEDIACONV_LOG_LEVEL": "debug",
                "MEDIACONV_PROTECT_INPUT": "true",
            }
        )
        config = get_config(config_file, env_reader=reader)

        assert config.tools.ffmpeg == Path("/usr/local/bin/ffmpeg")
        assert config.logging.level == "debug"
        assert config.behavior.protect_input is True

    def test_cli_overrides_env(self, config_file):
        reader = EnvReader(env={"MEDIACONV_FFMPEG_PATH": "/usr/local/bin/ffmpeg"})
        config = get_config(config_file, ffmpeg_path=Path("/cli/ffmpeg"), env_reader=reader)
        assert config.tools.ffmpeg == Path("/cli/ffmpeg")

    def test_config_path_from_env(self, config_file):
        reader = EnvReader(env={"MEDIACONV_CONFIG_PATH": str(config_file)})
        assert get_config(env_reader=reader).logging.level == "warning"

    def test_invalid_values_raise(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "loud"\n')
        with pytest.raises(ConfigurationError, match="level must be one of"):
            get_config(path, env_reader=EnvReader(env={}))


class TestWrongTypedConfigFile:
    """Tests for config files whose values have the wrong type."""

    @pytest.mark.parametrize(
        "body",
        [
            "[logging]\nlevel = 5\n",
            "[tools]\nffmpeg = 5\n",
            'logging = "x"\n',
            "[logging]\nmax_bytes = true\n",
        ],
        ids=["int-level", "int-ffmpeg", "string-section", "bool-max-bytes"],
    )
    def test_falls_back_to_defaults(self, tmp_path, caplog, body):
        path = tmp_path / "config.toml"
        path.write_text(body)

        with caplog.at_level(logging.WARNING):
            config = get_config(path, env_reader=EnvReader(env={}))

        assert config == MediaConvConfig()
        assert "Ignoring invalid config file" in caplog.text

    @pytest.mark.parametrize(
        "body",
        [
            "[logging]\nlevel = 5\n",
            "[tools]\nffmpeg = 5\n",
            'logging = "x"\n',
        ],
    )
    def test_strict_raises(self, tmp_path, body):
        path = tmp_path / "config.toml"
        path.write_text(body)

        with pytest.raises(ConfigurationError, match="Invalid config file"):
            get_config(path, env_reader=EnvReader(env={}), strict=True)

    def test_env_still_applies(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[tools]\nffmpeg = 5\n")
        reader = EnvReader(env={"MEDIACONV_LOG_LEVEL": "debug"})

        config = get_config(path, env_reader=reader)

        assert config.tools.ffmpeg is None
        assert config.logging.level == "debug"

    def test_source_from_file_names_the_key(self):
        with pytest.raises(ValueError, match=r"logging\.level must be str, got int"):
            source_from_file({"logging": {"level": 5}})

    def test_logging_config_rejects_non_string_level(self):
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level=5)


class TestConfigBuilder:
    """Tests for ConfigBuilder layering."""

    def test_none_values_do_not_override(self):
        builder = ConfigBuilder()
        builder.apply(ConfigSource(logging_level="error", protect_input=False))
        builder.apply(ConfigSource(logging_level=None, protect_input=None))
        config = builder.build()

        assert config.logging.level == "error"
        assert config.behavior.protect_input is False


class TestResolveFfmpegPath:
    """Tests for resolve_ffmpeg_path()."""

    def test_configured_path_wins(self):
        config = MediaConvConfig(tools=ToolPathsConfig(ffmpeg=Path("/x/ffmpeg")))
        with patch("mediaconv.config.loader.shutil.which") as mock_which:
            assert resolve_ffmpeg_path(config) == Path("/x/ffmpeg")
        mock_which.assert_not_called()

    def test_path_lookup(self):
        with patch("mediaconv.config.loader.shutil.which", return_value="/usr/bin/ffmpeg"):
            assert resolve_ffmpeg_path(MediaConvConfig()) == Path("/usr/bin/ffmpeg")

    def test_bare_name_fallback(self):
        with patch("mediaconv.config.loader.shutil.which", return_value=None):
            assert resolve_ffmpeg_path(MediaConvConfig()) == "ffmpeg"


class TestLoggingConfig:
    """Tests for LoggingConfig validation and overrides."""

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="format must be one of"):
            LoggingConfig(format="xml")

    def test_invalid_max_bytes(self):
        with pytest.raises(ValueError):
            LoggingConfig(max_bytes=0)

    def test_build_logging_config_overrides(self, tmp_path):
        base = LoggingConfig(level="warning", backup_count=3)
        result = build_logging_config(base, level="debug", file=tmp_path / "x.log", format="json")

        assert result.level == "debug"
        assert result.file == tmp_path / "x.log"
        assert result.format == "json"
        assert result.backup_count == 3

    def test_build_logging_config_no_overrides(self):
        base = LoggingConfig(level="error")
        assert build_logging_config(base) is base
