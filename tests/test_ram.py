import pytest

from hwprobe.ram import MemInfo, Memory, parse_meminfo, read_meminfo

SAMPLE = "MemTotal:       16 kB\nMemFree:         8 kB\nMemAvailable:   12 kB\nBuffers:  4 kB\n"


def test_parse_meminfo_reads_three_values():
    info = parse_meminfo(SAMPLE)
    assert info.total == 16 * 1024
    assert info.free == 8 * 1024
    assert info.available == 12 * 1024


def test_parse_meminfo_scales_linearly():
    one = parse_meminfo("MemTotal: 1 kB\n")
    three = parse_meminfo("MemTotal: 3 kB\n")
    assert three.total == 3 * one.total


def test_parse_meminfo_stops_once_complete():
    extra = SAMPLE + "MemTotal: 99 kB\n"
    assert parse_meminfo(extra) == parse_meminfo(SAMPLE)


def test_parse_meminfo_missing_unit_is_ignored():
    assert parse_meminfo("MemTotal: 16\n").total == -1


def test_parse_meminfo_empty_text():
    assert parse_meminfo("") == MemInfo()


def test_parse_meminfo_invalid_number():
    with pytest.raises(ValueError):
        parse_meminfo("MemTotal: lots kB\n")


def test_read_meminfo_matches_parse(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    assert read_meminfo(path) == parse_meminfo(SAMPLE)


def test_memory_uses_file(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    memory = Memory(path)
    expected = parse_meminfo(SAMPLE)
    assert memory.total_bytes == expected.total
    assert memory.free_bytes() == expected.free
    assert memory.available_bytes() == expected.available


def test_memory_single_unknown_module(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    memory = Memory(path)
    assert len(memory.modules) == 1
    module = memory.modules[0]
    assert module.id == 0
    assert module.vendor == "<unknown>"
    assert module.frequency_hz == -1
    assert module.total_bytes == memory.total_bytes


def test_memory_free_reflects_changes(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    memory = Memory(path)
    before = memory.free_bytes()
    path.write_text(SAMPLE.replace("MemFree:         8 kB", "MemFree:         4 kB"))
    assert memory.free_bytes() * 2 == before