"""Read-only system, CPU, GPU, battery and fan information."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
import sys
from pathlib import Path

from legiontui.paths import (
    BATTERY_INFORMATION_PATH,
    CPU_INFORMATION_PATH,
    DEVICE_INFORMATION_PATH,
    FAN_INFORMATION_PATH,
)
from legiontui.rw import read_file

HOSTNAME_PATH = Path("/etc/hostname")


def _run(command: list[str]) -> str:
    return subprocess.run(command, capture_output=True, text=True, check=True).stdout


def _run_or_empty(command: list[str]) -> str:
    try:
        return _run(command)
    except (OSError, subprocess.CalledProcessError) as error:
        print(f"command {command[0]} not found: {error}", file=sys.stderr)
        return ""


@dataclasses.dataclass(frozen=True)
class SystemInformation:
    """Host name and firmware identification of the machine."""

    name: str
    bios_version: str
    family: str
    vendor: str

    @classmethod
    def load(
        cls,
        hostname_path: str | os.PathLike[str] = HOSTNAME_PATH,
        device_path: str | os.PathLike[str] = DEVICE_INFORMATION_PATH,
    ) -> SystemInformation:
        """Read the information from the host name file and the DMI directory."""
        device = Path(device_path)
        return cls(
            name=read_file(hostname_path),
            bios_version=read_file(device / "bios_version"),
            family=read_file(device / "product_family"),
            vendor=read_file(device / "sys_vendor"),
        )


@dataclasses.dataclass(frozen=True)
class CpuSensor:
    """CPU model name and package temperature."""

    hwmon_path: Path = CPU_INFORMATION_PATH

    def name(self) -> str:
        """Return the model name of the first CPU as reported by lscpu."""
        output = _run_or_empty(["lscpu", "-e=ModelName", "-J"])
        data = json.loads(output)
        return str(data["cpus"][0]["modelname"])

    def temperature(self) -> str:
        """Return the whole degrees Celsius, taken from the millidegree reading."""
        return read_file(Path(self.hwmon_path) / "temp1_input")[0:2]


@dataclasses.dataclass(frozen=True)
class GpuSensor:
    """Discrete GPU name and temperature from nvidia-smi."""

    def name(self) -> str:
        """Return the GPU name, or an empty string if nvidia-smi is unavailable."""
        output = _run_or_empty(["nvidia-smi", "--query-gpu=name", "--format=csv,noheader"])
        return output.split("\n", 1)[0]

    def temperature(self) -> str:
        """Return the GPU temperature in degrees Celsius."""
        output = _run(["nvidia-smi", "--query-gpu=temperature.gpu", "--format=csv,noheader"])
        return output.split("\n", 1)[0]


@dataclasses.dataclass(frozen=True)
class BatterySensor:
    """Battery attributes from the power-supply class directory."""

    path: Path = BATTERY_INFORMATION_PATH

    def _read(self, attribute: str) -> str:
        return read_file(Path(self.path) / attribute)

    def name(self) -> str:
        return self._read("model_name")

    def capacity(self) -> str:
        return self._read("capacity")

    def voltage(self) -> str:
        """Return the voltage in volts with one decimal, from the microvolt reading."""
        raw = self._read("voltage_now")
        return f"{raw[0:2]}.{raw[2]}"

    def charging_status(self) -> str:
        return self._read("status")

    def cycle_count(self) -> str:
        return self._read("cycle_count")


@dataclasses.dataclass(frozen=True)
class FanSensor:
    """One fan's speed reading."""

    input_file: str
    hwmon_path: Path = FAN_INFORMATION_PATH

    def current_speed(self) -> str:
        """Return the fan speed in RPM."""
        return read_file(Path(self.hwmon_path) / self.input_file)


CPU = CpuSensor()
GPU = GpuSensor()
BATTERY = BatterySensor()
FAN1 = FanSensor("fan1_input")
FAN2 = FanSensor("fan2_input")