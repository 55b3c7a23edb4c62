import socket

from hwprobe.network import (
    all_networks,
    get_interface_index,
    get_ip4,
    get_ip6,
    get_mac,
    parse_if_inet6,
)

IF_INET6 = (
    "20010db8000000000000000000000001 02 40 00 80     eth0\n"
    "fe800000000000000000000000000001 02 40 20 80     eth0\n"
    "00000000000000000000000000000001 01 80 10 80       lo\n"
)

MISSING_IFACE = "hwprobe_none0"


def test_parse_if_inet6_link_local():
    assert parse_if_inet6(IF_INET6, "eth0") == "fe80::1"


def test_parse_if_inet6_ignores_non_link_local():
    assert parse_if_inet6(IF_INET6, "lo") == "<unknown>"
    assert parse_if_inet6(IF_INET6, "wlan0") == "<unknown>"


def test_get_ip6_from_file(tmp_path):
    path = tmp_path / "if_inet6"
    path.write_text(IF_INET6)
    assert get_ip6("eth0", path) == parse_if_inet6(IF_INET6, "eth0")
    assert get_ip6("eth0", tmp_path / "missing") == "<unknown>"


def test_get_mac(tmp_path):
    iface = tmp_path / "eth0"
    iface.mkdir()
    (iface / "address").write_text("02:00:00:00:00:01\n")
    assert get_mac("eth0", tmp_path) == "02:00:00:00:00:01"


def test_get_mac_missing_or_empty(tmp_path):
    iface = tmp_path / "eth1"
    iface.mkdir()
    (iface / "address").write_text("\n")
    assert get_mac("eth1", tmp_path) == "<unknown>"
    assert get_mac("eth9", tmp_path) == "<unknown>"


def test_unknown_interface():
    assert get_interface_index(MISSING_IFACE) == "<unknown>"
    assert get_ip4(MISSING_IFACE) == "<unknown>"


def test_all_networks_matches_system_interfaces(tmp_path):
    networks = all_networks(tmp_path)
    try:
        expected = [name for _, name in socket.if_nameindex()]
    except OSError:
        expected = []
    assert [network.description for network in networks] == expected
    assert all(network.mac == "<unknown>" for network in networks)