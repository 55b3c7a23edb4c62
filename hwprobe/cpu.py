"""Processor information from /proc/cpuinfo, cpufreq in sysfs and /proc/stat."""

from __future__ import annotations

import itertools
import os
import re
import time
from dataclasses import dataclass, field

from hwprobe.sysfs import Jiffies, get_jiffies, read_int

DEFAULT_CPU_ROOT = "/sys/devices/system/cpu"
DEFAULT_CPUINFO_PATH = "/proc/cpuinfo"
DEFAULT_STAT_PATH = "/proc/stat"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``; ValueError if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


def _khz_to_mhz(value: int) -> int:
    # Truncate toward zero, as integer division of the kernel's kHz values does.
    return value // 1000 if value >= 0 else -((-value) // 1000)


def _cpufreq_path(cpu_root: str | os.PathLike, core_id: int, name: str) -> str:
    return os.path.join(cpu_root, f"cpu{core_id}", "cpufreq", name)


def _frequency_mhz(core_id: int, cpu_root: str | os.PathLike, name: str) -> int:
    value = read_int(_cpufreq_path(cpu_root, core_id, name))
    if value > -1:
        return _khz_to_mhz(value)
    return -1


def max_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike = DEFAULT_CPU_ROOT) -> int:
    """Maximum scaling frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, cpu_root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike = DEFAULT_CPU_ROOT) -> int:
    """Base frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, cpu_root, "base_frequency")


def min_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike = DEFAULT_CPU_ROOT) -> int:
    """Minimum scaling frequency of a core in MHz, or -1."""
    return _frequency_mhz(core_id, cpu_root, "scaling_min_freq")


@dataclass
class CPU:
    """One processor socket.

    Utilisation is measured as the change in /proc/stat counters since the
    previous call on the same object; the first call measures since boot.
    """

    id: int = -1
    vendor: str = UNKNOWN
    model_name: str = UNKNOWN
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    flags: list[str] = field(default_factory=list)
    cpu_root: str = field(default=DEFAULT_CPU_ROOT, repr=False, compare=False)
    stat_path: str = field(default=DEFAULT_STAT_PATH, repr=False, compare=False)
    warmup_seconds: float = field(default=1.0, repr=False, compare=False)
    _jiffies_initialised: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: list[Jiffies] = field(default_factory=list, init=False, repr=False, compare=False)

    def _init_jiffies(self) -> None:
        if not self._jiffies_initialised:
            time.sleep(self.warmup_seconds)
            self._jiffies_initialised = True

    def current_clock_speed_mhz(self) -> list[int]:
        """Current frequency in MHz of every core, up to the first core without one."""
        speeds = []
        for core_id in itertools.count():
            value = read_int(_cpufreq_path(self.cpu_root, core_id, "scaling_cur_freq"))
            if value == -1:
                break
            speeds.append(_khz_to_mhz(value))
        return speeds

    def current_utilisation(self) -> float:
        """Fraction of time spent working since the last call, or -1.0."""
        self._init_jiffies()
        current = get_jiffies(0, self.stat_path)
        total = current.total - self._last_total.total
        work = current.working - self._last_total.working
        self._last_total = current
        if total == 0:
            return -1.0
        utilisation = work / total
        if utilisation < 0 or utilisation > 1:
            return -1.0
        return utilisation

    def thread_utilisation(self, thread_index: int) -> float:
        """Fraction of time thread ``thread_index`` spent working since the last call, or -1.0."""
        self._init_jiffies()
        if not self._last_threads:
            self._last_threads = [Jiffies()] * max(self.num_logical_cores, 0)
        if not 0 <= thread_index < len(self._last_threads):
            raise IndexError(f"thread index {thread_index} out of range")
        current = get_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads[thread_index]
        total = current.total - last.total
        work = current.working - last.working
        self._last_threads[thread_index] = current
        if total == 0:
            return -1.0
        utilisation = work / total
        if utilisation < 0 or utilisation > 100:
            return -1.0
        return utilisation

    def threads_utilisation(self) -> list[float]:
        """Utilisation of every logical core."""
        return [self.thread_utilisation(index) for index in range(max(self.num_logical_cores, 0))]


def parse_cpuinfo(text: str, cpu_root: str | os.PathLike = DEFAULT_CPU_ROOT) -> list[CPU]:
    """Build one :class:`CPU` per physical package from /proc/cpuinfo text.

    Raises ValueError when a numeric field holds no number.
    """
    cpus = []
    physical_id = -1
    cpu_root = os.fspath(cpu_root)
    for block in text.split("\n\n"):
        cpu = CPU(cpu_root=cpu_root)
        add = False
        for line in block.split("\n"):
            parts = line.split(":")
            if len(parts) < 2:
                continue
            name = parts[0].strip()
            value = parts[1].strip()
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _leading_int(value.split(" ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _leading_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _leading_int(value)
            elif name == "flags":
                cpu.flags = value.split()
            elif name == "physical id":
                package_id = _leading_int(value)
                if package_id == physical_id:
                    continue
                cpu.id = package_id
                add = True
        if add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, cpu_root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, cpu_root)
            physical_id += 1
            cpus.append(cpu)
    return cpus


def all_cpus(
    cpuinfo_path: str | os.PathLike = DEFAULT_CPUINFO_PATH,
    cpu_root: str | os.PathLike = DEFAULT_CPU_ROOT,
) -> list[CPU]:
    """Read the processors described by the cpuinfo file; empty if it cannot be read."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return []
    return parse_cpuinfo(text, cpu_root)