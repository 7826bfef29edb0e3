# legiontui

A small library for reading hardware information from Lenovo Legion
laptops on Linux and for toggling the features exposed by the
`legion_laptop` and `ideapad_acpi` kernel drivers through sysfs.

## Installation

```
pip install .
```

Reading most sensor files works as a regular user. Toggling driver
features writes to sysfs and usually needs root.

## Driver features

`legiontui.sysfs` holds the `DriverModuleFunction` class, a frozen
dataclass naming one attribute file (`file`), the directory it lives in
(`sysfs_location`) and the names of the integer values it can hold
(`driver_modes`). Predefined features:

| Name                   | File                | Directory                   |
|------------------------|---------------------|-----------------------------|
| `CAMERA_POWER`         | `camera_power`      | `IDEA_SYSTEM_DRIVER_PATH`   |
| `CONSERVATION_MODE`    | `conservation_mode` | `IDEA_SYSTEM_DRIVER_PATH`   |
| `FN_LOCK`              | `fn_lock`           | `IDEA_SYSTEM_DRIVER_PATH`   |
| `USB_CHARGING`         | `usb_charging`      | `IDEA_SYSTEM_DRIVER_PATH`   |
| `GSYNC`                | `gsync`             | `LEGION_SYSTEM_DRIVER_PATH` |
| `IGPU_MODE`            | `igpumode`          | `LEGION_SYSTEM_DRIVER_PATH` |
| `LOCK_FAN_CONTROLLER`  | `lockfancontroller` | `LEGION_SYSTEM_DRIVER_PATH` |
| `MAX_FAN_SPEED_TOGGLE` | `fan_maxspeed`      | `LEGION_SYSTEM_DRIVER_PATH` |
| `OVERDRIVE`            | `overdrive`         | `LEGION_SYSTEM_DRIVER_PATH` |
| `POWER_MODE`           | `powermode`         | `LEGION_SYSTEM_DRIVER_PATH` |
| `RAPID_CHARGE`         | `rapidcharge`       | `LEGION_SYSTEM_DRIVER_PATH` |
| `TOUCHPAD`             | `touchpad`          | `LEGION_SYSTEM_DRIVER_PATH` |
| `WIN_KEY`              | `winkey`            | `LEGION_SYSTEM_DRIVER_PATH` |

Most use `DEFAULT_DRIVER_MODES` (`0: "disabled"`, `1: "enabled"`).
`POWER_MODE` uses `1: "quiet"`, `2: "balanced"`, `3: "performance"`, and
`IGPU_MODE` has no mode names, so its `status()` is always empty.

```python
from legiontui.sysfs import CONSERVATION_MODE

print(CONSERVATION_MODE.read_value())  # raw integer, e.g. 0
print(CONSERVATION_MODE.status())      # e.g. "disabled"
CONSERVATION_MODE.toggle()             # prints and returns the new status
```

- `read_value()` parses the attribute as an integer (a `ValueError` if it
  is not one).
- `write_value(value)` writes the string verbatim.
- `status()` returns the name of the current value, or `""` if it has none.
- `toggle()` moves to the next mode, wrapping around, writes it followed by
  a newline, prints `toggled <file>: <old> -> <new>` and returns the new
  status. With more than two modes the values are taken as numbered from 1
  (so `POWER_MODE` cycles 1 → 2 → 3 → 1); otherwise from 0.
- `relocated(path)` returns a copy that reads and writes under another
  directory, which is handy for testing against a fake sysfs tree.
- `next_mode(current_mode, number_of_modes)` is the wrap-around step
  `(current_mode + 1) % number_of_modes`.

## Sensors and system information

`legiontui.information` provides:

- `SystemInformation.load(hostname_path, device_path)` – host name (first
  line of `/etc/hostname` by default) and the `bios_version`,
  `product_family` and `sys_vendor` files of the DMI directory, as the
  fields `name`, `bios_version`, `family` and `vendor`.
- `CpuSensor` (instance `CPU`) – `name()` runs `lscpu -e=ModelName -J` and
  returns the first CPU's model name; `temperature()` returns the first two
  characters of `temp1_input`, the whole degrees of the millidegree reading.
- `GpuSensor` (instance `GPU`) – `name()` and `temperature()` query
  `nvidia-smi`. `name()` returns `""` when the command cannot be run;
  `temperature()` raises in that case.
- `BatterySensor` (instance `BATTERY`) – `name()`, `capacity()`,
  `charging_status()` and `cycle_count()` return the raw attribute text;
  `voltage()` turns the microvolt reading into volts with one decimal
  (`"15400000"` → `"15.4"`).
- `FanSensor` (instances `FAN1`, `FAN2`) – `current_speed()` returns the
  fan's RPM reading.

Each sensor class takes the directory it reads from as a field, so it can
be pointed at another location.

## Paths

`legiontui.paths` holds the sysfs directories used by default:
`BATTERY_INFORMATION_PATH`, `CPU_INFORMATION_PATH`,
`FAN_INFORMATION_PATH`, `DEVICE_INFORMATION_PATH`,
`IDEA_SYSTEM_DRIVER_PATH` and `LEGION_SYSTEM_DRIVER_PATH`. The hwmon
numbers are fixed and may differ on your machine.

## File helpers

`legiontui.rw` holds the helpers everything else is built on, serialised
by one lock: `read_file(path)` returns the first line of a file without
its newline, `read_files(*paths)` returns a list of those for several
files in order, and `write_to_file(path, content)` replaces a file's
contents, creating it if needed.

## What it does not do

There is no terminal interface and no command to run: the package is a
library only, and something else has to display the readings or call the
toggles.

## Running the tests

```
pip install .[test]
pytest
```