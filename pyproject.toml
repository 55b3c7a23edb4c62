[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwprobe"
version = "1.0.0"
description = "Read hardware and system information (CPU, memory, disks, GPUs, batteries, network, mainboard, OS) from sysfs and procfs"
requires-python = ">=3.10"
dependencies = []
keywords = ["hardware", "sysfs", "procfs", "cpu", "memory", "disk", "gpu", "battery", "system-information"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hwprobe = "hwprobe.report:main"

[tool.hatch.build.targets.wheel]
packages = ["hwprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
