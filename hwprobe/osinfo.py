"""Operating-system name, version, kernel, word size and byte order."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass

DEFAULT_OS_RELEASE_PATH = "/etc/os-release"
LOADER_64BIT_PATH = "/lib64/ld-linux-x86-64.so.2"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MARKETING_NAMES = {
    26: "Tahoe",
    15: "Sequoia",
    14: "Sonoma",
    13: "Ventura",
    12: "Monterey",
    11: "Big Sur",
}

_MARKETING_NAMES_10 = {
    15: "Catalina",
    14: "Mojave",
    13: "High Sierra",
    12: "Sierra",
    11: "El Capitan",
    10: "Yosemite",
    9: "Mavericks",
    8: "Mountain Lion",
    7: "Lion",
    6: "Snow Leopard",
    5: "Leopard",
    4: "Tiger",
    3: "Panther",
    2: "Jaguar",
    1: "Puma",
    0: "Cheetah",
}


@dataclass(frozen=True)
class OSInfo:
    """Description of the running operating system."""

    name: str = UNKNOWN
    version: str = UNKNOWN
    kernel: str = UNKNOWN
    is_32bit: bool = False
    is_64bit: bool = True
    is_big_endian: bool = False
    is_little_endian: bool = True


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return None if match is None else int(match.group(1))


def marketing_name(version: str) -> str:
    """Return the macOS marketing name for a version such as ``14.2.1``, or ``""``."""
    major_text, dot, rest = version.partition(".")
    if not dot:
        return ""
    major = _leading_int(major_text)
    if major is None:
        return ""
    if major == 10:
        minor = _leading_int(rest.split(".", 1)[0])
        return "" if minor is None else _MARKETING_NAMES_10.get(minor, "")
    return _MARKETING_NAMES.get(major, "")


def _unquote(line: str) -> str:
    # The value follows the first '=' and loses its first and last character (the quotes).
    return line.partition("=")[2][1:-1]


def parse_os_release(text: str) -> tuple[str, str]:
    """Return ``(name, version)`` from os-release text; later entries win."""
    name = version = UNKNOWN
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME"):
            name = _unquote(line)
        if line.startswith("VERSION="):
            version = _unquote(line)
    return name, version


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return UNKNOWN


def read_os(os_release_path: str | os.PathLike = DEFAULT_OS_RELEASE_PATH) -> OSInfo:
    """Describe the running system, reading its name and version from ``os_release_path``."""
    try:
        with open(os_release_path, encoding="utf-8", errors="replace") as handle:
            name, version = parse_os_release(handle.read())
    except OSError:
        name, version = "Linux", UNKNOWN
    is_64bit = os.path.exists(LOADER_64BIT_PATH)
    little = sys.byteorder == "little"
    return OSInfo(
        name=name,
        version=version,
        kernel=_kernel_release(),
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=not little,
        is_little_endian=little,
    )