"""Pytest configuration and shared fixtures for sysfetch tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write TOML text to a config file and return its path."""

    def _write(text: str, name: str = "config.toml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def power_supply(tmp_path):
    """
    Build a fake /sys/class/power_supply tree.

    Call the returned function with a device name and its attributes;
    it returns the root directory.
    """
    root = tmp_path / "power_supply"
    root.mkdir()

    def _add(name: str, **attrs) -> Path:
        device = root / name
        device.mkdir()
        for attr, value in attrs.items():
            (device / attr).write_text(f"{value}\n")
        return root

    _add.root = root
    return _add


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of the tests."""
    monkeypatch.delenv("SYSFETCH_CONFIG", raising=False)
    monkeypatch.delenv("SYSFETCH_LOG_LEVEL", raising=False)
