[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numbase"
version = "0.1.0"
description = "Number base conversions: binary, octal, hexadecimal, fractional binary, IPv4 and any base from 2 to 36"
requires-python = ">=3.10"
dependencies = []
keywords = ["base conversion", "binary", "octal", "hexadecimal", "ipv4", "radix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numbase = "numbase.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numbase"]

[tool.pytest.ini_options]
addopts = "-ra"
