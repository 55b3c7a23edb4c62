# hwprobe

`hwprobe` gathers hardware and system information on Linux by reading
`/sys` and `/proc`. It uses only the standard library and starts no other
programs.

It reports:

- CPUs (`hwprobe.cpu`): vendor, model, core counts, clock speeds, L3 cache
  size, flags, current per-core frequency and per-thread load
- Operating system (`hwprobe.osinfo`): name, version, kernel release, word
  size, byte order
- GPUs (`hwprobe.gpu`): vendor and model names resolved through a `pci.ids`
  database, PCI vendor and device ids, maximum frequency
- Memory (`hwprobe.ram`): total, free and available bytes
- Mainboard (`hwprobe.mainboard`): vendor, name, version, serial number
- Batteries (`hwprobe.battery`): vendor, model, serial number, technology,
  charge state and capacity
- Disks (`hwprobe.disk`): vendor, model, serial number, size, free space,
  mount point
- Network interfaces (`hwprobe.network`): index, MAC address, IPv4 address
  and link-local IPv6 address

Text values that cannot be read are given as `<unknown>`; numbers that
cannot be read are usually `-1`.

## Installation

```
pip install .
```

## Command line

```
hwprobe
```

This prints a hardware report with one section per component: CPU, OS, GPU,
RAM, main board, batteries, disks and networks.

## Library use

```python
from hwprobe.cpu import all_cpus
from hwprobe.ram import Memory
from hwprobe.disk import all_disks
from hwprobe.battery import all_batteries
from hwprobe.osinfo import read_os

for cpu in all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.num_logical_cores)
    print(cpu.threads_utilisation())

memory = Memory()
print(memory.total_bytes, memory.free_bytes(), memory.available_bytes())

for disk in all_disks():
    print(disk.model, disk.size_bytes, disk.volumes)

for battery in all_batteries():
    print(battery.vendor(), battery.capacity(), battery.charging())

print(read_os().name)
```

A `CPU` object measures utilisation as the change in `/proc/stat` counters
since its previous call. Its first utilisation reading waits
`warmup_seconds` (one second by default) before reading.

`Battery.capacity()` returns the fraction `energy_now / energy_full`; when
the full energy is unknown it is `nan` (nothing stored) or `inf`.

Most readers take the directory or file they read from as an argument, so
they can be pointed at a copy of `/sys` or `/proc`. Parsing functions such
as `hwprobe.ram.parse_meminfo`, `hwprobe.cpu.parse_cpuinfo`,
`hwprobe.osinfo.parse_os_release`, `hwprobe.network.parse_if_inet6` and
`hwprobe.sysfs.parse_jiffies` accept text directly.

GPU names come from a `pci.ids` file. `hwprobe.pci.load_mapper` loads the
first readable file among the paths it is given (by default the usual
system locations), and `hwprobe.pci.PCIMapper` can be built from the text of
any such file. `hwprobe.osinfo.marketing_name` maps a macOS version string
such as `14.2` to its marketing name.

## What it does not do

- It works from Linux's `/sys` and `/proc` only. On other systems most
  values come back as `<unknown>`, `-1` or empty lists.
- GPU driver version, memory size and core count are not read; they stay
  `<unknown>` or `-1`.
- Memory is reported as a single module holding the total size; individual
  DIMMs, their vendors and frequencies are not read.
- L1 and L2 cache sizes and CPU temperature are not read.

## Running the tests

```
pip install .[test]
pytest
```