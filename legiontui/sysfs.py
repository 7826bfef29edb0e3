"""Laptop driver switches exposed as integer sysfs attributes."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from legiontui.paths import IDEA_SYSTEM_DRIVER_PATH, LEGION_SYSTEM_DRIVER_PATH
from legiontui.rw import read_file, write_to_file

DEFAULT_DRIVER_MODES: Mapping[int, str] = MappingProxyType({0: "disabled", 1: "enabled"})


def next_mode(current_mode: int, number_of_modes: int) -> int:
    """Return the mode after ``current_mode`` (zero based), wrapping around."""
    return (1 + current_mode) % number_of_modes


@dataclasses.dataclass(frozen=True)
class DriverModuleFunction:
    """One driver attribute file and the names of the values it can hold."""

    file: str
    sysfs_location: Path
    driver_modes: Mapping[int, str] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def path(self) -> Path:
        return Path(self.sysfs_location) / self.file

    def read_value(self) -> int:
        """Return the attribute's current integer value."""
        return int(read_file(self.path))

    def write_value(self, value: str) -> None:
        """Write ``value`` verbatim into the attribute."""
        write_to_file(self.path, value)

    def status(self) -> str:
        """Return the name of the current mode, or an empty string if unknown."""
        return self.driver_modes.get(self.read_value(), "")

    def toggle(self) -> str:
        """Advance to the next mode and return the name of the new one."""
        current = self.read_value()
        count = len(self.driver_modes)
        if count > 2:
            new = next_mode(current - 1, count)
        else:
            new = next_mode(current, count)

        self.write_value(f"{new}\n")
        new_status = self.status()
        print(f"toggled {self.file}: {self.driver_modes.get(current, '')} -> {new_status}")
        return new_status

    def relocated(self, sysfs_location: str | os.PathLike[str]) -> DriverModuleFunction:
        """Return the same switch read from another directory."""
        return dataclasses.replace(self, sysfs_location=Path(sysfs_location))


CAMERA_POWER = DriverModuleFunction("camera_power", IDEA_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
CONSERVATION_MODE = DriverModuleFunction(
    "conservation_mode", IDEA_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES
)
FN_LOCK = DriverModuleFunction("fn_lock", IDEA_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
GSYNC = DriverModuleFunction("gsync", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
IGPU_MODE = DriverModuleFunction("igpumode", LEGION_SYSTEM_DRIVER_PATH)
LOCK_FAN_CONTROLLER = DriverModuleFunction(
    "lockfancontroller", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES
)
MAX_FAN_SPEED_TOGGLE = DriverModuleFunction(
    "fan_maxspeed", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES
)
OVERDRIVE = DriverModuleFunction("overdrive", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
POWER_MODE = DriverModuleFunction(
    "powermode",
    LEGION_SYSTEM_DRIVER_PATH,
    MappingProxyType({1: "quiet", 2: "balanced", 3: "performance"}),
)
RAPID_CHARGE = DriverModuleFunction("rapidcharge", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
TOUCHPAD = DriverModuleFunction("touchpad", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
USB_CHARGING = DriverModuleFunction("usb_charging", IDEA_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)
WIN_KEY = DriverModuleFunction("winkey", LEGION_SYSTEM_DRIVER_PATH, DEFAULT_DRIVER_MODES)