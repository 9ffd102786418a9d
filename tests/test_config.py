"""Tests for configuration loading."""

from pathlib import Path

import pytest

from sysfetch.core.config import (
    Config,
    DisplayConfig,
    coerce_bool,
    get_default_config_path,
    load_config,
)
from sysfetch.core.errors import ConfigParseError, ConfigReadError


ALL_TRUE = """
[Display]
cpu_model = true
os = true
uptime = true
ram = true
battery = true
"""


class TestCoerceBool:
    """Test bool-or-string decoding."""

    def test_native_booleans(self):
        assert coerce_bool("os", True) is True
        assert coerce_bool("os", False) is False

    def test_boolean_strings(self):
        assert coerce_bool("os", "true") is True
        assert coerce_bool("os", "false") is False

    def test_invalid_string_names_value(self):
        with pytest.raises(ConfigParseError, match="maybe"):
            coerce_bool("cpu_model", "maybe")

    def test_string_parse_is_case_sensitive(self):
        with pytest.raises(ConfigParseError, match="True"):
            coerce_bool("os", "True")

    def test_other_types_rejected(self):
        with pytest.raises(ConfigParseError, match="int"):
            coerce_bool("ram", 1)


class TestConfigFromToml:
    """Test Config.from_toml."""

    def test_native_and_string_values(self, write_config):
        path = write_config(
            '[Display]\ncpu_model = "true"\nos = true\nuptime = "false"\n'
            'ram = false\nbattery = true\n'
        )
        config = Config.from_toml(str(path))

        assert config.display == DisplayConfig(
            cpu_model=True, os=True, uptime=False, ram=False, battery=True
        )
        assert config.source_path == str(path)

    def test_invalid_string_value(self, write_config):
        path = write_config(ALL_TRUE.replace('cpu_model = true', 'cpu_model = "maybe"'))
        with pytest.raises(ConfigParseError, match="maybe"):
            Config.from_toml(str(path))

    def test_missing_field_is_error(self, write_config):
        path = write_config(ALL_TRUE.replace("battery = true\n", ""))
        with pytest.raises(ConfigParseError, match="battery"):
            Config.from_toml(str(path))

    def test_missing_display_table(self, write_config):
        path = write_config("[Other]\nkey = 1\n")
        with pytest.raises(ConfigParseError, match="Display"):
            Config.from_toml(str(path))

    def test_invalid_toml(self, write_config):
        path = write_config("[Display\ncpu_model = ")
        with pytest.raises(ConfigParseError):
            Config.from_toml(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigReadError) as exc_info:
            Config.from_toml(str(tmp_path / "nope.toml"))
        assert "nope.toml" in str(exc_info.value)

    def test_extra_display_keys_ignored(self, write_config):
        path = write_config(ALL_TRUE + "theme = \"dark\"\n")
        assert Config.from_toml(str(path)).display == DisplayConfig()

    def test_logging_level(self, write_config):
        path = write_config(ALL_TRUE + '\n[Logging]\nlevel = "DEBUG"\n')
        assert Config.from_toml(str(path)).logging.level == "DEBUG"

    def test_logging_level_env_override(self, write_config, monkeypatch):
        monkeypatch.setenv("SYSFETCH_LOG_LEVEL", "INFO")
        path = write_config(ALL_TRUE + '\n[Logging]\nlevel = "DEBUG"\n')
        assert Config.from_toml(str(path)).logging.level == "INFO"

    def test_to_toml_roundtrip(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        Config(display=DisplayConfig(ram=False)).to_toml(str(path))

        loaded = Config.from_toml(str(path))
        assert loaded.display.ram is False
        assert loaded.display.cpu_model is True


    def test_to_toml_refuses_existing_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(ALL_TRUE)

        with pytest.raises(FileExistsError):
            Config(display=DisplayConfig(ram=False)).to_toml(str(path))
        assert Config.from_toml(str(path)).display.ram is True


class TestLoadConfig:
    """Test config path resolution."""

    def test_no_config_shows_everything(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_default_config_path() is None
        config = load_config()
        assert config.display == DisplayConfig()
        assert config.source_path is None

    def test_default_location_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / ".config.toml").write_text(ALL_TRUE.replace("os = true", "os = false"))

        config = load_config()
        assert config.display.os is False

    def test_original_src_location(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / ".config.toml").write_text(ALL_TRUE)

        assert get_default_config_path() == str(Path("src") / ".config.toml")

    def test_explicit_missing_path_fails(self, tmp_path):
        with pytest.raises(ConfigReadError):
            load_config(str(tmp_path / "missing.toml"))

    def test_env_path(self, write_config, monkeypatch):
        path = write_config(ALL_TRUE.replace("ram = true", "ram = false"))
        monkeypatch.setenv("SYSFETCH_CONFIG", str(path))

        assert load_config().display.ram is False
