import json
import subprocess
from unittest.mock import patch

import pytest

from legiontui.information import (
    BATTERY,
    FAN1,
    FAN2,
    BatterySensor,
    CpuSensor,
    FanSensor,
    GpuSensor,
    SystemInformation,
)
from legiontui.paths import BATTERY_INFORMATION_PATH, FAN_INFORMATION_PATH


def _completed(stdout):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


@pytest.fixture
def battery_dir(tmp_path):
    values = {
        "model_name": "L20M4PC1",
        "capacity": "87",
        "voltage_now": "16543000",
        "status": "Charging",
        "cycle_count": "42",
    }
    for name, value in values.items():
        (tmp_path / name).write_text(value + "\n", encoding="utf-8")
    return tmp_path


def test_battery_information(battery_dir):
    battery = BatterySensor(battery_dir)
    assert battery.name() == "L20M4PC1"
    assert battery.capacity() == "87"
    assert battery.voltage() == "16.5"
    assert battery.charging_status() == "Charging"
    assert battery.cycle_count() == "42"


def test_battery_voltage_too_short_raises(tmp_path):
    (tmp_path / "voltage_now").write_text("12\n", encoding="utf-8")
    with pytest.raises(IndexError):
        BatterySensor(tmp_path).voltage()


def test_default_battery_location():
    assert BatterySensor().path == BATTERY_INFORMATION_PATH
    assert BATTERY.path == BATTERY_INFORMATION_PATH


def test_cpu_temperature(tmp_path):
    (tmp_path / "temp1_input").write_text("45000\n", encoding="utf-8")
    assert CpuSensor(tmp_path).temperature() == "45"


def test_cpu_name_parses_lscpu_json():
    payload = json.dumps({"cpus": [{"modelname": "Example CPU 9000"}, {"modelname": "x"}]})
    with patch("legiontui.information.subprocess.run", return_value=_completed(payload)) as run:
        assert CpuSensor().name() == "Example CPU 9000"
    assert run.call_args.args[0] == ["lscpu", "-e=ModelName", "-J"]


def test_cpu_name_without_lscpu_raises():
    with patch("legiontui.information.subprocess.run", side_effect=FileNotFoundError("lscpu")):
        with pytest.raises(json.JSONDecodeError):
            CpuSensor().name()


def test_gpu_information():
    outputs = [_completed("Example GPU 4060\n"), _completed("52\n")]
    with patch("legiontui.information.subprocess.run", side_effect=outputs):
        gpu = GpuSensor()
        assert gpu.name() == "Example GPU 4060"
        assert gpu.temperature() == "52"


def test_gpu_name_without_nvidia_smi_is_empty(capsys):
    with patch("legiontui.information.subprocess.run", side_effect=FileNotFoundError("x")):
        assert GpuSensor().name() == ""
    assert "nvidia-smi" in capsys.readouterr().err


def test_gpu_temperature_failure_raises():
    error = subprocess.CalledProcessError(9, ["nvidia-smi"])
    with patch("legiontui.information.subprocess.run", side_effect=error):
        with pytest.raises(subprocess.CalledProcessError):
            GpuSensor().temperature()


def test_system_information(tmp_path):
    hostname = tmp_path / "hostname"
    hostname.write_text("legion\n", encoding="utf-8")
    device = tmp_path / "dmi"
    device.mkdir()
    (device / "bios_version").write_text("BIOS-1.0\n", encoding="utf-8")
    (device / "product_family").write_text("Legion 5\n", encoding="utf-8")
    (device / "sys_vendor").write_text("LENOVO\n", encoding="utf-8")

    info = SystemInformation.load(hostname, device)
    assert info == SystemInformation("legion", "BIOS-1.0", "Legion 5", "LENOVO")


def test_system_information_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SystemInformation.load(tmp_path / "hostname", tmp_path)


def test_fan_speeds(tmp_path):
    (tmp_path / "fan1_input").write_text("2400\n", encoding="utf-8")
    (tmp_path / "fan2_input").write_text("0\n", encoding="utf-8")
    assert FanSensor("fan1_input", tmp_path).current_speed() == "2400"
    assert FanSensor("fan2_input", tmp_path).current_speed() == "0"


def test_default_fans():
    assert FanSensor("fan1_input").hwmon_path == FAN_INFORMATION_PATH
    assert FAN1.input_file == "fan1_input"
    assert FAN2.input_file == "fan2_input"
    assert FAN1.hwmon_path == FAN_INFORMATION_PATH