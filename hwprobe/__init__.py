"""Hardware and system information for Linux, read from sysfs and procfs."""

__version__ = "1.0.0"
__all__ = [
    "battery",
    "cpu",
    "disk",
    "gpu",
    "mainboard",
    "network",
    "osinfo",
    "pci",
    "ram",
    "report",
    "sysfs",
]