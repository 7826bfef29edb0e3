"""Sensor readout and sysfs driver feature toggles for Lenovo Legion laptops on Linux."""

__version__ = "0.1.0"