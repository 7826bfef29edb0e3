"""Locations of the sysfs directories the sensors and driver toggles use."""

from pathlib import Path

BATTERY_INFORMATION_PATH = Path("/sys/class/power_supply/BAT0")
CPU_INFORMATION_PATH = Path("/sys/class/hwmon/hwmon5")
FAN_INFORMATION_PATH = Path("/sys/class/hwmon/hwmon3")
DEVICE_INFORMATION_PATH = Path("/sys/devices/virtual/dmi/id")
IDEA_SYSTEM_DRIVER_PATH = Path("/sys/bus/platform/drivers/ideapad_acpi/VPC2004:00")
LEGION_SYSTEM_DRIVER_PATH = Path(
    "/sys/module/legion_laptop/drivers/platform:legion/PNP0C09:00"
)