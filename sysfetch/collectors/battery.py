"""
Battery Facts Collector.

Enumerates batteries through a platform driver. On Linux batteries are
read from /sys/class/power_supply; elsewhere psutil.sensors_battery()
is used. Only the first battery found is ever reported.
"""

import logging
import platform
from pathlib import Path
from typing import Iterator, List, Optional

import psutil

from ..core.errors import BatteryEnumerationError, BatteryManagerError
from ..core.models import BatteryReading, BatteryState


logger = logging.getLogger(__name__)

POWER_SUPPLY_ROOT = Path("/sys/class/power_supply")


class BatteryDriver:
    """Base class for platform battery drivers."""

    name = "base"

    def batteries(self) -> Iterator[BatteryReading]:
        """Yield a reading per battery; raise BatteryEnumerationError on a bad device."""
        raise NotImplementedError("Subclasses must implement this method")


class SysfsBatteryDriver(BatteryDriver):
    """Reads batteries from the Linux power_supply class."""

    name = "sysfs"

    def __init__(self, root: Path = POWER_SUPPLY_ROOT):
        self.root = Path(root)
        if not self.root.is_dir():
            raise BatteryManagerError(f"{self.root} is not available")

    def batteries(self) -> Iterator[BatteryReading]:
        try:
            entries = sorted(self.root.iterdir())
        except OSError as e:
            raise BatteryEnumerationError(f"Could not list {self.root}: {e}") from e

        for entry in entries:
            if self._read_attr(entry, "type") != "Battery":
                continue
            # Peripherals (wireless mice, keyboards) are not system batteries
            if self._read_attr(entry, "scope") == "Device":
                logger.debug(f"Skipping peripheral battery {entry.name}")
                continue
            yield self._read_battery(entry)

    def _read_attr(self, device: Path, attr: str) -> Optional[str]:
        """Read a sysfs attribute; None when the attribute does not exist."""
        try:
            return (device / attr).read_text().strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise BatteryEnumerationError(f"Could not read {device.name}/{attr}: {e}") from e

    def _read_number(self, device: Path, attr: str) -> Optional[float]:
        value = self._read_attr(device, attr)
        if value is None or value == "":
            return None
        try:
            return float(value)
        except ValueError as e:
            raise BatteryEnumerationError(
                f"Invalid value for {device.name}/{attr}: {value}"
            ) from e

    def _read_battery(self, device: Path) -> BatteryReading:
        logger.debug(f"Reading battery {device.name}")
        state = BatteryState.from_driver(self._read_attr(device, "status"))

        # Energy (uWh, uW) and charge (uAh, uA) interfaces are equivalent
        now = full = rate = None
        for now_attr, full_attr, rate_attr in (
            ("energy_now", "energy_full", "power_now"),
            ("charge_now", "charge_full", "current_now"),
        ):
            now = self._read_number(device, now_attr)
            full = self._read_number(device, full_attr)
            if now is not None and full:
                rate = self._read_number(device, rate_attr)
                break
            now = full = None

        if now is not None and full:
            fraction = now / full
        else:
            capacity = self._read_number(device, "capacity")
            if capacity is None:
                raise BatteryEnumerationError(f"No state of charge for {device.name}")
            fraction = capacity / 100.0

        time_to_full = time_to_empty = None
        if rate and now is not None:
            rate = abs(rate)
            time_to_full = max(0.0, full - now) / rate * 3600.0
            time_to_empty = now / rate * 3600.0

        return BatteryReading(
            state_of_charge=max(0.0, min(1.0, fraction)),
            state=state,
            time_to_full_seconds=time_to_full,
            time_to_empty_seconds=time_to_empty,
            name=device.name,
        )


class PsutilBatteryDriver(BatteryDriver):
    """Reads the single battery psutil exposes."""

    name = "psutil"

    def __init__(self):
        if not hasattr(psutil, "sensors_battery"):
            raise BatteryManagerError("psutil has no battery support on this platform")

    def batteries(self) -> Iterator[BatteryReading]:
        try:
            battery = psutil.sensors_battery()
        except Exception as e:
            raise BatteryEnumerationError(f"psutil battery query failed: {e}") from e

        if battery is None:
            return

        if battery.power_plugged is None:
            state = BatteryState.UNKNOWN
        elif battery.power_plugged:
            state = BatteryState.FULL if battery.percent >= 100 else BatteryState.CHARGING
        else:
            state = BatteryState.EMPTY if battery.percent <= 0 else BatteryState.DISCHARGING

        secsleft = battery.secsleft
        if secsleft in (psutil.POWER_TIME_UNLIMITED, psutil.POWER_TIME_UNKNOWN) or secsleft < 0:
            secsleft = None

        yield BatteryReading(
            state_of_charge=max(0.0, min(1.0, battery.percent / 100.0)),
            state=state,
            time_to_empty_seconds=secsleft,
            name="battery",
        )


def default_drivers():
    """Driver classes to try on this platform, in order."""
    if platform.system() == "Linux":
        return [SysfsBatteryDriver, PsutilBatteryDriver]
    return [PsutilBatteryDriver]


class BatteryManager:
    """Handle over the first battery driver that initializes."""

    def __init__(self, drivers: Optional[List] = None):
        errors = []
        self.driver: Optional[BatteryDriver] = None
        for factory in drivers if drivers is not None else default_drivers():
            try:
                self.driver = factory()
                break
            except BatteryManagerError as e:
                errors.append(str(e))

        if self.driver is None:
            reason = "; ".join(errors) or "no drivers available"
            raise BatteryManagerError(f"Could not initialize battery manager: {reason}")
        logger.debug(f"Using {self.driver.name} battery driver")

    def batteries(self) -> Iterator[BatteryReading]:
        return self.driver.batteries()

    def first_battery(self) -> Optional[BatteryReading]:
        """The first battery that reads successfully; errors propagate."""
        for battery in self.batteries():
            return battery
        return None
