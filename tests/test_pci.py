from hwprobe.pci import PCIDevice, PCIMapper, PCIVendor, load_mapper

SAMPLE = (
    "# comment line\n"
    "\torphan  Device Without Vendor\n"
    "8086  Intel Corporation\n"
    "\t1234  Example Device\n"
    "\t\t8086 0001  Example Subsystem\n"
    "\tbroken line without separator\n"
    "\n"
    "10de  NVIDIA Corporation\n"
    "\tabcd  Sample GPU\n"
)


def test_vendor_lookup_with_and_without_prefix():
    mapper = PCIMapper(SAMPLE)
    assert mapper["0x8086"].vendor_name == "Intel Corporation"
    assert mapper.vendor_from_id("10de").vendor_name == "NVIDIA Corporation"


def test_device_lookup():
    mapper = PCIMapper(SAMPLE)
    vendor = mapper["10de"]
    assert vendor["0xabcd"].device_name == "Sample GPU"
    assert vendor.device("abcd").device_id == "abcd"


def test_subsystems():
    mapper = PCIMapper(SAMPLE)
    device = mapper["8086"]["1234"]
    assert device.subsystems == {"8086 0001": "Example Subsystem"}


def test_malformed_lines_skipped():
    mapper = PCIMapper(SAMPLE)
    assert len(mapper) == 2
    assert set(mapper["8086"].devices) == {"1234"}


def test_unknown_vendor_and_device():
    mapper = PCIMapper(SAMPLE)
    assert mapper["ffff"] == PCIVendor()
    assert mapper["8086"]["ffff"] == PCIDevice()
    assert mapper["ffff"]["1234"].device_name == ""


def test_first_entry_wins():
    mapper = PCIMapper("abcd  First\nabcd  Second\n\t0001  Dev\n")
    vendor = mapper["abcd"]
    assert vendor.vendor_name == "First"
    assert vendor["0001"].device_name == "Dev"


def test_load_mapper_reads_first_existing(tmp_path):
    ids = tmp_path / "pci.ids"
    ids.write_text(SAMPLE)
    mapper = load_mapper([tmp_path / "missing.ids", ids])
    assert mapper["8086"].vendor_name == "Intel Corporation"


def test_load_mapper_no_files(tmp_path):
    mapper = load_mapper([tmp_path / "a.ids", tmp_path / "b.ids"])
    assert len(mapper) == 0
    assert mapper["8086"].vendor_name == ""