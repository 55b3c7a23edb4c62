"""Disk information from the block class in sysfs and the mount table."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from hwprobe.sysfs import directory_entries, exists, read_int

DEFAULT_BLOCK_ROOT = "/sys/class/block/"
DEFAULT_MOUNTS_PATH = "/proc/mounts"
UNKNOWN = "<unknown>"
BLOCK_SIZE = 512

_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")


@dataclass
class Disk:
    """One whole disk."""

    id: int = -1
    vendor: str = UNKNOWN
    model: str = UNKNOWN
    serial_number: str = UNKNOWN
    size_bytes: int = -1
    free_size_bytes: int = -1
    volumes: list[str] = field(default_factory=list)


def is_partition(path: str) -> bool:
    """True if the block device path names a partition rather than a whole disk."""
    return _PARTITION.search(path) is not None


def _read_stripped(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            value = handle.readline().strip()
    except OSError:
        return None
    return value or None


def disk_vendor(path: str) -> str:
    """Vendor of the disk; NVMe namespaces are looked up under their controller."""
    path = os.fspath(path)
    vendor_path = path
    position = path.find("nvme")
    if position != -1:
        controller = path[position:position + 5]
        prefix = path[:position - 6] if position >= 6 else path
        vendor_path = prefix + "nvme/" + controller
    value = _read_stripped(vendor_path + "/device/vendor")
    return UNKNOWN if value is None else value


def disk_model(path: str) -> str:
    """Model of the disk, or ``<unknown>``."""
    value = _read_stripped(os.fspath(path) + "/device/model")
    return UNKNOWN if value is None else value


def disk_serial_number(path: str) -> str:
    """Serial number of the disk, or ``<unknown>``."""
    value = _read_stripped(os.fspath(path) + "/device/serial")
    return UNKNOWN if value is None else value


def disk_size_bytes(path: str) -> int:
    """Size of the disk in bytes from its sector count, or -1."""
    sectors = read_int(os.fspath(path) + "/size")
    if sectors == -1:
        return -1
    return sectors * BLOCK_SIZE


def disk_free_size_bytes(path: str) -> int:
    """Bytes available to unprivileged users on the filesystem at ``path``, or -1."""
    try:
        stats = os.statvfs(path)
    except (OSError, AttributeError):
        return -1
    return stats.f_bsize * stats.f_bavail


def mount_point(device: str, mounts_path: str | os.PathLike = DEFAULT_MOUNTS_PATH) -> str:
    """Where ``device`` is mounted according to the mount table; ``/`` if not found."""
    try:
        with open(mounts_path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                fields = line.split()
                if len(fields) >= 2 and fields[0] == device:
                    return fields[1]
    except OSError:
        pass
    return "/"


def all_disks(
    block_root: str | os.PathLike = DEFAULT_BLOCK_ROOT,
    mounts_path: str | os.PathLike = DEFAULT_MOUNTS_PATH,
) -> list[Disk]:
    """Describe every whole disk that reports a vendor, model or serial number."""
    disks = []
    for entry in directory_entries(block_root):
        path = os.path.join(block_root, entry)
        if not exists(path) or is_partition(path):
            continue
        vendor = disk_vendor(path)
        model = disk_model(path)
        serial = disk_serial_number(path)
        if vendor == UNKNOWN and model == UNKNOWN and serial == UNKNOWN:
            continue
        mounted_at = mount_point("/dev/" + entry, mounts_path)
        disks.append(
            Disk(
                id=len(disks),
                vendor=vendor,
                model=model,
                serial_number=serial,
                size_bytes=disk_size_bytes(path),
                free_size_bytes=disk_free_size_bytes(mounted_at),
                volumes=[mounted_at],
            )
        )
    return disks