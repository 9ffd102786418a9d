"""
Data models for host facts.

These dataclasses are point-in-time value snapshots, created once per
run and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class CPUInfo:
    """A single enumerated CPU."""
    
    brand: str = ""
    frequency_mhz: int = 0
    
    @property
    def frequency_ghz(self) -> float:
        """Frequency in gigahertz."""
        return self.frequency_mhz / 1000.0


@dataclass(frozen=True)
class SystemSnapshot:
    """Refreshed read of CPU list, memory total and uptime."""
    
    cpus: List[CPUInfo] = field(default_factory=list)
    total_memory_bytes: int = 0
    uptime_seconds: int = 0
    
    @property
    def first_cpu(self) -> Optional[CPUInfo]:
        """First enumerated CPU, or None when nothing was enumerated."""
        return self.cpus[0] if self.cpus else None


class BatteryState(Enum):
    """Charging state reported by a battery driver."""
    
    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    FULL = "Full"
    EMPTY = "Empty"
    UNKNOWN = "Unknown"
    
    @classmethod
    def from_driver(cls, value: Optional[str]) -> "BatteryState":
        """Map a raw driver status string; anything unrecognised is UNKNOWN."""
        for state in (cls.CHARGING, cls.DISCHARGING, cls.FULL, cls.EMPTY):
            if value == state.value:
                return state
        return cls.UNKNOWN


@dataclass(frozen=True)
class BatteryReading:
    """A single battery's charge, state and optional time estimates."""
    
    state_of_charge: float = 0.0  # fraction, 0.0 - 1.0
    state: BatteryState = BatteryState.UNKNOWN
    time_to_full_seconds: Optional[float] = None
    time_to_empty_seconds: Optional[float] = None
    name: str = ""
    
    @property
    def percentage(self) -> int:
        """Charge percentage, truncated and clamped to 0-100."""
        # Rounding first keeps whole percents (0.29 * 100 == 28.999...) intact
        return max(0, min(100, int(round(self.state_of_charge * 100.0, 6))))
    
    @property
    def time_estimate_seconds(self) -> Optional[float]:
        """The estimate that applies to the current state, if any."""
        if self.state is BatteryState.CHARGING:
            return self.time_to_full_seconds
        if self.state is BatteryState.DISCHARGING:
            return self.time_to_empty_seconds
        return None
