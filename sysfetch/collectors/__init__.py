"""Collectors module for gathering host facts."""

from .local_collector import LocalCollector
from .battery import BatteryManager
from .os_info import get_os_label

__all__ = [
    "LocalCollector",
    "BatteryManager",
    "get_os_label",
]
