"""Graphics adapter information from the DRM class in sysfs and a pci.ids database."""

from __future__ import annotations

import os
from dataclasses import dataclass

from hwprobe.pci import PCIMapper, load_mapper
from hwprobe.sysfs import exists, read_int

DEFAULT_DRM_ROOT = "/sys/class/drm"
UNKNOWN = "<unknown>"

# Card numbers may have gaps; probing stops at the first missing card past this one.
_LAST_PROBED_GAP = 2


@dataclass
class GPU:
    """One graphics adapter."""

    id: int = -1
    vendor: str = UNKNOWN
    name: str = UNKNOWN
    driver_version: str = UNKNOWN
    memory_bytes: int = -1
    frequency_mhz: int = -1
    num_cores: int = -1
    vendor_id: str = UNKNOWN
    device_id: str = UNKNOWN


def read_drm(path: str | os.PathLike) -> str:
    """Return the first line of a DRM attribute file, or an empty string."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readline().rstrip("\n")
    except OSError:
        return ""


def get_frequencies(drm_path: str | os.PathLike) -> tuple[int, int, int]:
    """Return the (minimum, current, maximum) GPU frequency in MHz; -1 where unknown."""
    min_mhz, cur_mhz, max_mhz = (
        read_int(os.path.join(drm_path, f"gt_{kind}_freq_mhz")) for kind in ("min", "cur", "max")
    )
    return min_mhz, cur_mhz, max_mhz


def all_gpus(drm_root: str | os.PathLike = DEFAULT_DRM_ROOT, mapper: PCIMapper | None = None) -> list[GPU]:
    """Describe every ``card<N>`` below the DRM root that reports vendor and device ids."""
    if mapper is None:
        mapper = load_mapper()
    gpus = []
    card_id = 0
    while True:
        path = os.path.join(drm_root, f"card{card_id}")
        if not exists(path):
            if card_id > _LAST_PROBED_GAP:
                break
            card_id += 1
            continue
        vendor_id = read_drm(os.path.join(path, "device", "vendor"))
        device_id = read_drm(os.path.join(path, "device", "device"))
        if vendor_id and device_id:
            vendor = mapper[vendor_id]
            gpus.append(
                GPU(
                    id=card_id,
                    vendor=vendor.vendor_name,
                    name=vendor[device_id].device_name,
                    frequency_mhz=get_frequencies(path)[2],
                    vendor_id=vendor_id,
                    device_id=device_id,
                )
            )
        card_id += 1
    return gpus