"""Human-readable hardware report and the command that prints it."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Sequence

from hwprobe.battery import Battery, all_batteries
from hwprobe.cpu import CPU, all_cpus
from hwprobe.disk import Disk, all_disks
from hwprobe.gpu import GPU, all_gpus
from hwprobe.mainboard import MainBoard, read_mainboard
from hwprobe.network import Network, all_networks
from hwprobe.osinfo import OSInfo, read_os
from hwprobe.ram import Memory

_MIB = 1024 * 1024

_INTRO = (
    "hwprobe gathers hardware and system information in a platform independent way.\n\n"
    "Hardware Report:\n\n"
)


def _value(value: object) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _line(label: str, value: object) -> str:
    return f"{label:<20} {_value(value)}\n"


def _bytes_to_mib(value: int) -> int:
    return value // _MIB if value >= 0 else value


def format_cpus(cpus: Iterable[CPU]) -> str:
    """CPU section: one block per socket followed by per-thread speed and load."""
    parts = ["----------------------------------- CPU ------------------------------------\n"]
    for cpu in cpus:
        parts.append(f"Socket {cpu.id}:\n")
        parts.append(_line("vendor:", cpu.vendor))
        parts.append(_line("model:", cpu.model_name))
        parts.append(_line("physical cores:", cpu.num_physical_cores))
        parts.append(_line("logical cores:", cpu.num_logical_cores))
        parts.append(_line("max frequency:", cpu.max_clock_speed_mhz))
        parts.append(_line("regular frequency:", cpu.regular_clock_speed_mhz))
        parts.append(
            _line(
                "cache size:",
                f"L1: {cpu.l1_cache_size_bytes}, L2: {cpu.l2_cache_size_bytes}, L3: {cpu.l3_cache_size_bytes}",
            )
        )
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speed_mhz()
        for thread_id, (speed, load) in enumerate(zip(speeds, utilisation)):
            parts.append(_line(" ", f"Thread {thread_id}: {speed} MHz ({_value(load * 100)}%)"))
    return "".join(parts)


def format_os(os_info: OSInfo) -> str:
    """Operating-system section."""
    return "".join(
        [
            "----------------------------------- OS ------------------------------------\n",
            _line("Operating System:", os_info.name),
            _line("version:", os_info.version),
            _line("kernel:", os_info.kernel),
            _line("architecture:", "32 bit" if os_info.is_32bit else "64 bit"),
            _line("endianess:", "little endian" if os_info.is_little_endian else "big endian"),
        ]
    )


def format_gpus(gpus: Iterable[GPU]) -> str:
    """GPU section."""
    parts = ["----------------------------------- GPU -----------------------------------\n"]
    for gpu in gpus:
        parts.append(f"GPU {gpu.id}:\n")
        parts.append(_line("vendor:", gpu.vendor))
        parts.append(_line("model:", gpu.name))
        parts.append(_line("driverVersion:", gpu.driver_version))
        parts.append(_line("memory [MiB]:", _bytes_to_mib(gpu.memory_bytes)))
        parts.append(_line("frequency:", gpu.frequency_mhz))
        parts.append(_line("cores:", gpu.num_cores))
        parts.append(_line("vendor_id:", gpu.vendor_id))
        parts.append(_line("device_id:", gpu.device_id))
    return "".join(parts)


def format_memory(memory: Memory) -> str:
    """RAM section: sizes followed by the memory modules."""
    parts = [
        "----------------------------------- RAM -----------------------------------\n",
        _line("size [MiB]:", _bytes_to_mib(memory.total_bytes)),
        _line("free [MiB]:", _bytes_to_mib(memory.free_bytes())),
        _line("available [MiB]:", _bytes_to_mib(memory.available_bytes())),
    ]
    for module in memory.modules:
        frequency = -1 if module.frequency_hz == -1 else module.frequency_hz / 1e6
        parts.append(f"RAM {module.id}:\n")
        parts.append(_line("vendor:", module.vendor))
        parts.append(_line("model:", module.model))
        parts.append(_line("name:", module.name))
        parts.append(_line("serial-number:", module.serial_number))
        parts.append(_line("Frequency [MHz]:", frequency))
    return "".join(parts)


def format_mainboard(board: MainBoard) -> str:
    """Mainboard section."""
    return "".join(
        [
            "------------------------------- Main Board --------------------------------\n",
            _line("vendor:", board.vendor),
            _line("name:", board.name),
            _line("version:", board.version),
            _line("serial-number:", board.serial_number),
        ]
    )


def format_batteries(batteries: Sequence[Battery]) -> str:
    """Battery section, or a note that none were found."""
    parts = ["------------------------------- Batteries ---------------------------------\n"]
    if not batteries:
        parts.append("No Batteries installed or detected\n")
    for number, battery in enumerate(batteries):
        parts.append(f"Battery {number}:\n")
        parts.append(_line("vendor:", battery.vendor()))
        parts.append(_line("model:", battery.model()))
        parts.append(_line("serial-number:", battery.serial_number()))
        parts.append(_line("charging:", "yes" if battery.charging() else "no"))
        parts.append(_line("capacity:", battery.capacity()))
    return "".join(parts)


def format_disks(disks: Sequence[Disk]) -> str:
    """Disk section, or a note that none were found."""
    parts = ["--------------------------------- Disks -----------------------------------\n"]
    if not disks:
        parts.append("No Disks installed or detected\n")
    for number, disk in enumerate(disks):
        parts.append(f"Disk {number}:\n")
        parts.append(_line("vendor:", disk.vendor))
        parts.append(_line("model:", disk.model))
        parts.append(_line("serial-number:", disk.serial_number))
        parts.append(_line("size:", disk.size_bytes))
        parts.append(_line("free:", disk.free_size_bytes))
        parts.append(_line("volumes:", ", ".join(disk.volumes)))
    return "".join(parts)


def format_networks(networks: Sequence[Network]) -> str:
    """Network section listing interfaces with an address, or a note that none were found."""
    parts = ["--------------------------------- Networks -----------------------------------\n"]
    if not networks:
        parts.append("No Networks installed or detected\n")
    shown = (network for network in networks if network.ip4 or network.ip6)
    for number, network in enumerate(shown):
        parts.append(f"Network {number}:\n")
        parts.append(_line("description:", network.description))
        parts.append(_line("interface index:", network.interface_index))
        parts.append(_line("mac:", network.mac))
        parts.append(_line("ipv4:", network.ip4))
        parts.append(_line("ipv6:", network.ip6))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a report of the hardware and operating system of this machine."""
    parser = argparse.ArgumentParser(
        prog="hwprobe", description="Print a report of the hardware and operating system."
    )
    parser.parse_args(argv)
    out = sys.stdout
    out.write(_INTRO)
    out.write(format_cpus(all_cpus()))
    out.write(format_os(read_os()))
    out.write(format_gpus(all_gpus()))
    out.write(format_memory(Memory()))
    out.write(format_mainboard(read_mainboard()))
    out.write(format_batteries(all_batteries()))
    out.write(format_disks(all_disks()))
    out.write(format_networks(all_networks()))
    out.flush()
    return 0