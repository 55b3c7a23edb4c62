"""Network interface information: index, MAC and IPv4/IPv6 addresses."""

from __future__ import annotations

import ipaddress
import os
import socket
import struct
from dataclasses import dataclass

DEFAULT_NET_ROOT = "/sys/class/net"
DEFAULT_IF_INET6_PATH = "/proc/net/if_inet6"
UNKNOWN = "<unknown>"

_SIOCGIFADDR = 0x8915


@dataclass(frozen=True)
class Network:
    """One network interface."""

    interface_index: str
    description: str
    mac: str
    ip4: str
    ip6: str


def get_interface_index(name: str) -> str:
    """Return the interface index as text, or ``<unknown>``."""
    try:
        index = socket.if_nametoindex(name)
    except (OSError, ValueError):
        return UNKNOWN
    return str(index) if index > 0 else UNKNOWN


def get_mac(name: str, net_root: str | os.PathLike = DEFAULT_NET_ROOT) -> str:
    """Return the hardware address of the interface, or ``<unknown>``."""
    try:
        with open(os.path.join(net_root, name, "address"), encoding="utf-8", errors="replace") as handle:
            mac = handle.readline().rstrip("\n")
    except OSError:
        return UNKNOWN
    return mac or UNKNOWN


def get_ip4(name: str) -> str:
    """Return the IPv4 address assigned to the interface, or ``<unknown>``."""
    try:
        import fcntl
    except ImportError:
        return UNKNOWN
    request = struct.pack("256s", name.encode("utf-8")[:15])
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            reply = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, request)
    except OSError:
        return UNKNOWN
    return socket.inet_ntoa(reply[20:24])


def parse_if_inet6(text: str, name: str) -> str:
    """Return the first link-local (``fe80``) address of ``name`` in if_inet6 text."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != name:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0])).compressed
        except ValueError:
            continue
        if address.startswith("fe80"):
            return address
    return UNKNOWN


def get_ip6(name: str, if_inet6_path: str | os.PathLike = DEFAULT_IF_INET6_PATH) -> str:
    """Return the link-local IPv6 address of the interface, or ``<unknown>``."""
    try:
        with open(if_inet6_path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return UNKNOWN
    return parse_if_inet6(text, name)


def all_networks(net_root: str | os.PathLike = DEFAULT_NET_ROOT) -> list[Network]:
    """Describe every network interface known to the system."""
    try:
        interfaces = socket.if_nameindex()
    except OSError:
        return []
    return [
        Network(
            interface_index=get_interface_index(name),
            description=name,
            mac=get_mac(name, net_root),
            ip4=get_ip4(name),
            ip6=get_ip6(name),
        )
        for _, name in interfaces
    ]