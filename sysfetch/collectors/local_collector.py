"""
Local Hardware Facts Collector.

Collects CPU, memory and uptime facts from the local machine using psutil.
"""

import logging
import platform
import subprocess
import time
from typing import List, Optional

import psutil

from ..core.models import CPUInfo, SystemSnapshot


logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"

# x86 reports "model name"; ARM kernels use "Hardware" or "Model" instead
CPUINFO_MODEL_KEYS = ("model name", "Hardware", "Model")


def parse_cpuinfo_model(content: str) -> Optional[str]:
    """First CPU model value found in /proc/cpuinfo text, by key priority."""
    values = {}
    for line in content.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if sep and key in CPUINFO_MODEL_KEYS and key not in values and value.strip():
            values[key] = value.strip()

    for key in CPUINFO_MODEL_KEYS:
        if key in values:
            return values[key]
    return None


class LocalCollector:
    """
    Collects hardware facts from the local machine.

    Each refresh() call queries the host and returns a new SystemSnapshot;
    callers keep the one they use for a run.
    """

    def refresh(self) -> SystemSnapshot:
        """Query the host and return a point-in-time snapshot."""
        snapshot = SystemSnapshot(
            cpus=self.get_cpus(),
            total_memory_bytes=self.get_total_memory(),
            uptime_seconds=self.get_uptime(),
        )
        logger.debug(
            f"Snapshot: {len(snapshot.cpus)} CPUs, "
            f"{snapshot.total_memory_bytes} bytes RAM, "
            f"up {snapshot.uptime_seconds}s"
        )
        return snapshot

    def get_cpus(self) -> List[CPUInfo]:
        """Enumerate logical CPUs with brand string and frequency."""
        try:
            count = psutil.cpu_count(logical=True) or 0
        except Exception as e:
            logger.warning(f"Could not count CPUs: {e}")
            return []

        if count == 0:
            logger.warning("No CPUs enumerated")
            return []

        brand = self._get_cpu_model()
        frequencies = self._get_cpu_frequencies()

        cpus = []
        for index in range(count):
            if index < len(frequencies):
                freq = frequencies[index]
            else:
                freq = frequencies[0] if frequencies else 0
            cpus.append(CPUInfo(brand=brand, frequency_mhz=freq))
        return cpus

    def _get_cpu_frequencies(self) -> List[int]:
        """Current per-CPU frequency in MHz."""
        try:
            freqs = psutil.cpu_freq(percpu=True)
        except Exception as e:
            logger.debug(f"Could not read CPU frequency: {e}")
            return []
        if not freqs:
            return []
        return [int(f.current) for f in freqs]

    def _get_cpu_model(self) -> str:
        """Get CPU model name."""
        try:
            if platform.system() == "Darwin":
                result = subprocess.run(
                    ["sysctl", "-n", "machdep.cpu.brand_string"],
                    capture_output=True,
                    text=True,
                )
                return result.stdout.strip()
            elif platform.system() == "Linux":
                with open(CPUINFO_PATH, "r") as f:
                    model = parse_cpuinfo_model(f.read())
                if model:
                    return model
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Could not read CPU model: {e}")
        return platform.processor() or "Unknown CPU"

    def get_total_memory(self) -> int:
        """Total physical memory in bytes, 0 when unknown."""
        try:
            return int(psutil.virtual_memory().total)
        except Exception as e:
            logger.warning(f"Could not read memory total: {e}")
            return 0

    def get_uptime(self) -> int:
        """Seconds since boot, 0 when unknown."""
        try:
            return max(0, int(time.time() - psutil.boot_time()))
        except Exception as e:
            logger.warning(f"Could not read boot time: {e}")
            return 0
