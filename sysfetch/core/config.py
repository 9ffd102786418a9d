"""
Configuration management for sysfetch.

Loads the display toggles from a TOML file and applies environment
variable overrides.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # py311+
except ImportError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

from .errors import ConfigParseError, ConfigReadError


logger = logging.getLogger(__name__)

DISPLAY_TABLE = "Display"
LOGGING_TABLE = "Logging"


def coerce_bool(key: str, value: Any) -> bool:
    """
    Decode a toggle that may be a native boolean or a boolean-like string.

    Only the exact strings "true" and "false" are accepted.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise ConfigParseError(f"invalid boolean string for '{key}': {value}")
    raise ConfigParseError(
        f"invalid type for '{key}': expected a boolean or a boolean-like string, "
        f"got {type(value).__name__}"
    )


@dataclass(frozen=True)
class DisplayConfig:
    """Per-field display toggles from the [Display] table."""

    cpu_model: bool = True
    os: bool = True
    uptime: bool = True
    ram: bool = True
    battery: bool = True

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DisplayConfig":
        """Strictly decode the table; every toggle must be present."""
        values = {}
        for name in cls.field_names():
            if name not in data:
                raise ConfigParseError(f"missing field '{name}' in [{DISPLAY_TABLE}]")
            values[name] = coerce_bool(name, data[name])
        return cls(**values)

    def to_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source_path: Optional[str] = None

    @classmethod
    def from_toml(cls, path: str) -> "Config":
        """Load configuration from a TOML file."""
        config_path = Path(path)
        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(config_path, e) from e

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"{config_path}: {e}") from e

        config = cls._from_dict(data)
        config.source_path = str(config_path)
        return config

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        if DISPLAY_TABLE not in data:
            raise ConfigParseError(f"missing table [{DISPLAY_TABLE}]")
        display = data[DISPLAY_TABLE]
        if not isinstance(display, dict):
            raise ConfigParseError(f"[{DISPLAY_TABLE}] must be a table")

        config = cls(display=DisplayConfig.from_dict(display))

        if LOGGING_TABLE in data:
            section = data[LOGGING_TABLE]
            if not isinstance(section, dict):
                raise ConfigParseError(f"[{LOGGING_TABLE}] must be a table")
            level = section.get("level", config.logging.level)
            if not isinstance(level, str):
                raise ConfigParseError(f"invalid logging level: {level!r}")
            config.logging.level = level

        # Override with environment variables
        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides."""
        if os.getenv("SYSFETCH_LOG_LEVEL"):
            self.logging.level = os.getenv("SYSFETCH_LOG_LEVEL")

    def to_dict(self) -> dict:
        return {
            DISPLAY_TABLE: self.display.to_dict(),
            LOGGING_TABLE: {"level": self.logging.level},
        }

    def to_toml(self, path: str):
        """Save configuration to a new TOML file; existing files are never replaced."""
        config_path = Path(path)
        if config_path.exists():
            raise FileExistsError(f"Config file already exists: {config_path}")
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(self.to_dict(), f)


def get_default_config_path() -> Optional[str]:
    """Return the first existing config file location, or None."""
    candidates = [
        Path(".config.toml"),
        Path("src/.config.toml"),
        Path.home() / ".config" / "sysfetch" / "config.toml",
    ]

    for path in candidates:
        if path.exists():
            return str(path)

    return None


def load_config(path: Optional[str] = None) -> Config:
    """
    Resolve and load the configuration for a run.

    An explicit path (argument or SYSFETCH_CONFIG) must be readable. When
    no explicit path is given and no default location exists, every
    field is shown.
    """
    explicit = path or os.getenv("SYSFETCH_CONFIG")
    if explicit:
        logger.debug(f"Loading configuration from {explicit}")
        return Config.from_toml(explicit)

    default = get_default_config_path()
    if default is None:
        logger.debug("No configuration file found, showing all fields")
        config = Config()
        config._apply_env_overrides()
        return config

    logger.debug(f"Loading configuration from {default}")
    return Config.from_toml(default)
