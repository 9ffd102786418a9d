"""Core module containing data models, configuration and errors."""

from .models import (
    CPUInfo,
    SystemSnapshot,
    BatteryState,
    BatteryReading,
)
from .config import Config, DisplayConfig, load_config
from .errors import (
    SysfetchError,
    ConfigReadError,
    ConfigParseError,
    BatteryManagerError,
    BatteryEnumerationError,
)

__all__ = [
    "CPUInfo",
    "SystemSnapshot",
    "BatteryState",
    "BatteryReading",
    "Config",
    "DisplayConfig",
    "load_config",
    "SysfetchError",
    "ConfigReadError",
    "ConfigParseError",
    "BatteryManagerError",
    "BatteryEnumerationError",
]
