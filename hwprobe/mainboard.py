"""Mainboard identification from the DMI tables exported in sysfs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

DEFAULT_DMI_ROOTS = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class MainBoard:
    """Vendor, name, version and serial number of the mainboard."""

    vendor: str = UNKNOWN
    name: str = UNKNOWN
    version: str = UNKNOWN
    serial_number: str = UNKNOWN


def get_dmi_by_name(name: str, roots: Iterable[str | os.PathLike] = DEFAULT_DMI_ROOTS) -> str:
    """Return the first non-empty ``<root>/id/<name>`` line, or ``<unknown>``."""
    for root in roots:
        try:
            with open(os.path.join(root, "id", name), encoding="utf-8", errors="replace") as handle:
                value = handle.readline().rstrip("\n")
        except OSError:
            continue
        if value:
            return value
    return UNKNOWN


def read_mainboard(roots: Iterable[str | os.PathLike] = DEFAULT_DMI_ROOTS) -> MainBoard:
    """Read the mainboard description from the DMI roots."""
    roots = tuple(roots)
    return MainBoard(
        vendor=get_dmi_by_name("board_vendor", roots),
        name=get_dmi_by_name("board_name", roots),
        version=get_dmi_by_name("board_version", roots),
        serial_number=get_dmi_by_name("board_serial", roots),
    )