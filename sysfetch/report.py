"""
Report assembly and formatting.

The CPU line is printed on its own ahead of the rest; the remaining
enabled facts are batched in a fixed order (OS, Uptime, Ram, Battery)
and written once.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from .collectors.battery import BatteryManager
from .collectors.local_collector import LocalCollector
from .collectors.os_info import get_os_label
from .core.config import DisplayConfig
from .core.models import BatteryReading, BatteryState, CPUInfo, SystemSnapshot


logger = logging.getLogger(__name__)

NO_BATTERY = "Battery: Not detected"


def format_cpu(cpu: Optional[CPUInfo]) -> Optional[str]:
    """CPU line for the first enumerated CPU, or None if there is none."""
    if cpu is None:
        return None
    return f"CPU Model: {cpu.brand} @ {cpu.frequency_ghz:.2f} GHz"


def total_memory_gb(total_bytes: int) -> int:
    """Whole gigabytes, truncating at every 1024 step."""
    total_kb = total_bytes // 1024
    total_mb = total_kb // 1024
    return total_mb // 1024


def format_uptime(uptime_seconds: int) -> str:
    """Format uptime as e.g. '2d 3h 15m'; days and zero hours are omitted."""
    days = uptime_seconds // 86400
    hours = (uptime_seconds % 86400) // 3600
    minutes = (uptime_seconds % 3600) // 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0 or parts:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")
    return " ".join(parts)


def format_time_estimate(reading: BatteryReading) -> str:
    """Suffix such as ' (1h30m remaining)', empty without an estimate."""
    seconds = reading.time_estimate_seconds
    if seconds is None:
        return ""

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    if reading.state is BatteryState.CHARGING:
        return f" ({hours}h{minutes}m until full)"
    return f" ({hours}h{minutes}m remaining)"


def format_battery(reading: Optional[BatteryReading]) -> str:
    if reading is None:
        return NO_BATTERY
    return (
        f"Battery: {reading.percentage}% ({reading.state.value})"
        f"{format_time_estimate(reading)}"
    )


def get_battery_info(manager_factory: Callable[[], BatteryManager] = BatteryManager) -> str:
    """
    Battery line for the first detected battery.

    Raises:
        BatteryManagerError: No battery driver could be initialized.
        BatteryEnumerationError: A device failed to read.
    """
    manager = manager_factory()
    return format_battery(manager.first_battery())


class ReportGenerator:
    """
    Builds a report from the facts enabled in a DisplayConfig.

    Providers are injectable so the report can be built without
    touching the host.
    """

    def __init__(self,
                 display: Optional[DisplayConfig] = None,
                 collector: Optional[LocalCollector] = None,
                 os_label: Callable[[], str] = get_os_label,
                 battery_info: Callable[[], str] = get_battery_info):
        self.display = display or DisplayConfig()
        self.collector = collector or LocalCollector()
        self.os_label = os_label
        self.battery_info = battery_info
        self._snapshot: Optional[SystemSnapshot] = None

    @property
    def snapshot(self) -> SystemSnapshot:
        if self._snapshot is None:
            self._snapshot = self.collector.refresh()
        return self._snapshot

    def cpu_line(self) -> Optional[str]:
        if not self.display.cpu_model:
            return None
        line = format_cpu(self.snapshot.first_cpu)
        if line is None:
            logger.warning("No CPU enumerated, omitting CPU model")
        return line

    def report_lines(self) -> List[str]:
        lines = []

        if self.display.os:
            lines.append(f"OS: {self.os_label()}")

        if self.display.uptime:
            lines.append(f"Uptime: {format_uptime(self.snapshot.uptime_seconds)}")

        if self.display.ram:
            lines.append(f"Ram: {total_memory_gb(self.snapshot.total_memory_bytes)} Gb")

        if self.display.battery:
            lines.append(self.battery_info())

        return lines

    def print_report(self, out: TextIO = None):
        """Print the CPU line immediately, then the batched lines in one write."""
        out = out or sys.stdout

        cpu_line = self.cpu_line()
        if cpu_line is not None:
            print(cpu_line, file=out)

        lines = self.report_lines()
        if lines:
            print("\n".join(lines), file=out)
