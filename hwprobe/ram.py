"""Main-memory sizes from /proc/meminfo, with sysconf as a fallback."""

from __future__ import annotations

import dataclasses
import os
import re
from dataclasses import dataclass

DEFAULT_MEMINFO_PATH = "/proc/meminfo"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class MemInfo:
    """Total, free and available memory in bytes; -1 where unknown."""

    total: int = -1
    free: int = -1
    available: int = -1

    @property
    def complete(self) -> bool:
        return -1 not in (self.total, self.free, self.available)


@dataclass(frozen=True)
class Module:
    """One memory module."""

    id: int = 0
    vendor: str = UNKNOWN
    name: str = UNKNOWN
    serial_number: str = UNKNOWN
    model: str = UNKNOWN
    total_bytes: int = -1
    frequency_hz: int = -1


def _kib_value(line: str, current: int) -> int:
    parts = line.split(":")
    if len(parts) != 2:
        return current
    value = parts[1].strip()
    space = value.find(" ")
    if space == -1:
        return current
    match = _LEADING_INT.match(value[:space])
    if match is None:
        raise ValueError(f"no number in meminfo line {line!r}")
    return int(match.group(1)) * 1024


def parse_meminfo(text: str) -> MemInfo:
    """Parse /proc/meminfo text; values are in bytes, -1 where absent.

    Raises ValueError when a value holds no number.
    """
    info = MemInfo()
    for line in text.splitlines():
        if info.complete:
            break
        if line.startswith("MemTotal"):
            info.total = _kib_value(line, info.total)
        elif line.startswith("MemFree"):
            info.free = _kib_value(line, info.free)
        elif line.startswith("MemAvailable"):
            info.available = _kib_value(line, info.available)
    return info


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (AttributeError, ValueError, OSError):
        return -1


def _with_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGESIZE")
    result = dataclasses.replace(info)
    if pages > 0 and page_size > 0:
        result.total = pages * page_size
    if available_pages > 0 and page_size > 0:
        result.available = available_pages * page_size
    return result


def read_meminfo(path: str | os.PathLike = DEFAULT_MEMINFO_PATH) -> MemInfo:
    """Read memory sizes from ``path``, asking sysconf when total or available is missing."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            info = parse_meminfo(handle.read())
    except OSError:
        return _with_sysconf(MemInfo())
    if info.total == -1 or info.available == -1:
        info = _with_sysconf(info)
    return info


class Memory:
    """System memory: one module holding the total, with live free and available sizes."""

    def __init__(self, meminfo_path: str | os.PathLike = DEFAULT_MEMINFO_PATH) -> None:
        self.meminfo_path = os.fspath(meminfo_path)
        total = read_meminfo(self.meminfo_path).total
        self.modules = [Module(id=0, total_bytes=total)]
        self.total_bytes = total

    def __repr__(self) -> str:
        return f"Memory(meminfo_path={self.meminfo_path!r}, total_bytes={self.total_bytes!r})"

    def free_bytes(self) -> int:
        """Free memory in bytes, read now."""
        return read_meminfo(self.meminfo_path).free

    def available_bytes(self) -> int:
        """Available memory in bytes, read now."""
        return read_meminfo(self.meminfo_path).available