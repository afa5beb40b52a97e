[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dtail"
version = "0.1.0"
description = "Building blocks for log tailing and grepping: terminal colouring, logging, client options and filtered file reading"
requires-python = ">=3.10"
keywords = ["logging", "tail", "grep", "log-files", "terminal-colors", "zstd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Topic :: Utilities",
]
dependencies = [
    "zstandard",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dtail-colortable = "dtail.colortable:main"

[tool.hatch.build.targets.wheel]
packages = ["dtail"]

[tool.pytest.ini_options]
addopts = "-ra"
