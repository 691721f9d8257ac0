[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barestdio"
version = "0.1.0"
description = "C-style stdio routines for freestanding code: ctype tables, string and memory routines, printf/scanf formatting and 64-bit arithmetic helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "scanf", "sprintf", "sscanf", "ctype", "string", "formatting", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
packages = ["barestdio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
