import math

import pytest

from hwprobe.battery import Battery, all_batteries


def _make_battery(base, battery_id, **files):
    directory = base / f"BAT{battery_id}"
    directory.mkdir()
    for name, content in files.items():
        (directory / name).write_text(content + "\n")
    return directory


@pytest.fixture
def base(tmp_path):
    _make_battery(
        tmp_path,
        0,
        manufacturer="ACME",
        model_name="Cell 42",
        serial_number="TEST-SERIAL",
        technology="Li-ion",
        energy_full="50000",
        energy_now="25000",
        status="Charging",
    )
    return tmp_path


def test_text_attributes(base):
    battery = Battery(0, base)
    assert battery.vendor() == "ACME"
    assert battery.model() == "Cell 42"
    assert battery.serial_number() == "TEST-SERIAL"
    assert battery.technology() == "Li-ion"


def test_energy_and_capacity(base):
    battery = Battery(0, base)
    assert battery.energy_full() == 50000
    assert battery.energy_now() == 25000
    assert battery.capacity() == pytest.approx(0.5)


def test_charging_state(base):
    battery = Battery(0, base)
    assert battery.charging() is True
    assert battery.discharging() is False
    (base / "BAT0" / "status").write_text("Discharging\n")
    assert battery.charging() is False
    assert battery.discharging() is True


def test_vendor_is_cached(base):
    battery = Battery(0, base)
    assert battery.vendor() == "ACME"
    (base / "BAT0" / "manufacturer").write_text("Other\n")
    assert battery.vendor() == "ACME"
    assert Battery(0, base).vendor() == "Other"


def test_negative_id_is_unknown(base):
    battery = Battery(-1, base)
    assert battery.vendor() == "<unknown>"
    assert battery.energy_full() == 0
    assert battery.charging() is False


def test_missing_files(tmp_path):
    _make_battery(tmp_path, 0)
    battery = Battery(0, tmp_path)
    assert battery.model() == "<unknown>"
    assert battery.energy_now() == 0
    assert math.isnan(battery.capacity())


def test_invalid_energy_reads_zero(tmp_path):
    _make_battery(tmp_path, 0, energy_full="n/a", energy_now="100")
    battery = Battery(0, tmp_path)
    assert battery.energy_full() == 0
    assert math.isinf(battery.capacity())


def test_all_batteries_stops_at_gap(tmp_path):
    _make_battery(tmp_path, 0)
    _make_battery(tmp_path, 1)
    _make_battery(tmp_path, 3)
    batteries = all_batteries(tmp_path)
    assert [battery.id for battery in batteries] == [0, 1]


def test_all_batteries_none(tmp_path):
    assert all_batteries(tmp_path) == []