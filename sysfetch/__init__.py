"""
sysfetch - a small system fetch utility.

Prints CPU model, OS label, uptime, total RAM and battery status,
optionally gated by the per-field toggles of a TOML config file.
"""

__version__ = "1.0.0"
