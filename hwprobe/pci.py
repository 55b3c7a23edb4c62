"""Lookup of PCI vendor and device names from a pci.ids database."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from typing import Iterable

DEFAULT_PCI_IDS_PATHS = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/pci.ids",
)


def _strip_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


def _split_entry(line: str) -> list[str]:
    return line.strip().split("  ")


@dataclass
class PCIDevice:
    """A PCI device with its subsystem names keyed by subsystem id."""

    device_id: str = ""
    device_name: str = ""
    subsystems: dict[str, str] = field(default_factory=dict)


_INVALID_DEVICE = PCIDevice()


@dataclass
class PCIVendor:
    """A PCI vendor and its devices keyed by device id."""

    vendor_id: str = ""
    vendor_name: str = ""
    devices: dict[str, PCIDevice] = field(default_factory=dict)

    def device(self, device_id: str) -> PCIDevice:
        """Return the device with this id (``0x`` prefix allowed), or an empty device."""
        return self.devices.get(_strip_hex_prefix(device_id), _INVALID_DEVICE)

    def __getitem__(self, device_id: str) -> PCIDevice:
        return self.device(device_id)


_INVALID_VENDOR = PCIVendor()


class PCIMapper:
    """Vendor and device names parsed from the text of a pci.ids file."""

    def __init__(self, text: str = "") -> None:
        self._vendors: dict[str, PCIVendor] = {}
        current_vendor: PCIVendor | None = None
        current_device: PCIDevice | None = None
        for line in text.splitlines():
            if not line or line.startswith("#"):
                continue
            parts = _split_entry(line)
            if len(parts) != 2:
                continue
            key, name = parts
            if line.startswith("\t\t"):
                if current_device is not None:
                    current_device.subsystems.setdefault(key, name)
            elif line.startswith("\t"):
                if current_vendor is not None:
                    current_device = current_vendor.devices.setdefault(key, PCIDevice(key, name))
            else:
                current_vendor = self._vendors.setdefault(key, PCIVendor(key, name))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor with this id (``0x`` prefix allowed), or an empty vendor."""
        return self._vendors.get(_strip_hex_prefix(vendor_id), _INVALID_VENDOR)

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)

    def __len__(self) -> int:
        return len(self._vendors)


@functools.lru_cache(maxsize=None)
def _load_cached(paths: tuple[str, ...]) -> PCIMapper:
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                return PCIMapper(handle.read())
        except OSError:
            continue
    return PCIMapper()


def load_mapper(paths: Iterable[str | os.PathLike] = DEFAULT_PCI_IDS_PATHS) -> PCIMapper:
    """Load the first readable pci.ids file among ``paths``; empty mapper if none is."""
    return _load_cached(tuple(os.fspath(path) for path in paths))