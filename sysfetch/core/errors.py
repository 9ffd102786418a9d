"""
Errors that abort a sysfetch run.

Missing hardware facts never raise; they degrade to a fallback value.
Only config and battery-manager failures end the run.
"""


class SysfetchError(Exception):
    """Base class for all terminal sysfetch errors."""


class ConfigError(SysfetchError):
    """Base class for configuration errors."""


class ConfigReadError(ConfigError):
    """The configuration file could not be read."""
    
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read config file {self.path}: {reason}")


class ConfigParseError(ConfigError):
    """The configuration file is not valid or misses a required field."""


class BatteryError(SysfetchError):
    """Base class for battery query errors."""


class BatteryManagerError(BatteryError):
    """No battery driver could be initialized on this platform."""


class BatteryEnumerationError(BatteryError):
    """A battery device failed to read during enumeration."""
