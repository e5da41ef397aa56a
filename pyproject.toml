[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eslib"
version = "0.1.0"
description = "Minimal C-library routines in Python: formatting, strings, character classes, a simulated heap, division, time, byte order and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "snprintf", "sscanf", "ctype", "allocator", "division", "strftime", "inet_pton"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eslib"]

[tool.pytest.ini_options]
addopts = "-ra"
