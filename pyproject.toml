[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protonkit"
version = "0.1.0"
description = "Value types, text-parameter and variant-list codecs, packet layouts and IPv4 socket helpers for a UDP game protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "udp", "serialization", "variant", "fnv", "packets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
