"""Battery information read from the power-supply class in sysfs."""

from __future__ import annotations

import math
import os

from hwprobe.sysfs import exists, read_int

DEFAULT_BASE_PATH = "/sys/class/power_supply/"
UNKNOWN = "<unknown>"


class Battery:
    """One battery, ``BAT<id>`` below the power-supply directory.

    Text values and the full energy are read lazily and kept once known.
    """

    def __init__(self, battery_id: int, base_path: str | os.PathLike = DEFAULT_BASE_PATH) -> None:
        self.id = battery_id
        self.base_path = os.fspath(base_path)
        self._vendor = ""
        self._model = ""
        self._serial_number = ""
        self._technology = ""
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r}, base_path={self.base_path!r})"

    def _attribute_path(self, name: str) -> str:
        return os.path.join(self.base_path, f"BAT{self.id}", name)

    def _read_line(self, name: str) -> str | None:
        if self.id < 0:
            return None
        try:
            with open(self._attribute_path(name), encoding="utf-8", errors="replace") as handle:
                return handle.readline().rstrip("\n")
        except OSError:
            return None

    def _read_text(self, name: str) -> str:
        value = self._read_line(name)
        return UNKNOWN if value is None else value

    def _read_number(self, name: str) -> int:
        if self.id < 0:
            return 0
        return max(read_int(self._attribute_path(name)), 0)

    def vendor(self) -> str:
        if not self._vendor:
            self._vendor = self._read_text("manufacturer")
        return self._vendor

    def model(self) -> str:
        if not self._model:
            self._model = self._read_text("model_name")
        return self._model

    def serial_number(self) -> str:
        if not self._serial_number:
            self._serial_number = self._read_text("serial_number")
        return self._serial_number

    def technology(self) -> str:
        if not self._technology:
            self._technology = self._read_text("technology")
        return self._technology

    def energy_full(self) -> int:
        if self._energy_full == 0:
            self._energy_full = self._read_number("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        return self._read_number("energy_now")

    def charging(self) -> bool:
        return self._read_line("status") == "Charging"

    def discharging(self) -> bool:
        return not self.charging()

    def capacity(self) -> float:
        """Fraction of full energy currently held; nan or inf when full energy is unknown."""
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full


def all_batteries(base_path: str | os.PathLike = DEFAULT_BASE_PATH) -> list[Battery]:
    """Return the batteries ``BAT0``, ``BAT1``, ... up to the first missing one."""
    batteries = []
    battery_id = 0
    while exists(os.path.join(base_path, f"BAT{battery_id}")):
        batteries.append(Battery(battery_id, base_path))
        battery_id += 1
    return batteries