"""Helpers for reading kernel-exported files such as sysfs entries and /proc/stat."""

from __future__ import annotations

import itertools
import os
import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Jiffies:
    """Accumulated CPU time counters: all jiffies and the working (user, nice, system) part."""

    total: int = 0
    working: int = 0


def exists(path: str | os.PathLike) -> bool:
    """Return True if ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def directory_entries(path: str | os.PathLike) -> list[str]:
    """Return the names inside a directory, or an empty list if it cannot be read."""
    try:
        return [name for name in os.listdir(path) if name not in (".", "..")]
    except OSError:
        return []


def read_int(path: str | os.PathLike) -> int:
    """Read the leading integer of a file's first line; -1 if missing or not a number."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


def parse_jiffies(line: str) -> Jiffies:
    """Parse one ``cpu`` line of /proc/stat into a :class:`Jiffies`.

    Raises ValueError if the line does not hold ten numeric counters.
    """
    tokens = line.split()
    if len(tokens) < 11:
        raise ValueError(f"expected 10 counters in stat line, got {max(len(tokens) - 1, 0)}")
    counters = [int(token) for token in tokens[1:11]]
    return Jiffies(total=sum(counters), working=sum(counters[:3]))


def get_jiffies(index: int, stat_path: str | os.PathLike = "/proc/stat") -> Jiffies:
    """Return the counters from line ``index`` of the stat file (0 is the aggregate line)."""
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as handle:
            line = next(itertools.islice(handle, index, None), "")
    except OSError:
        return Jiffies()
    return parse_jiffies(line)