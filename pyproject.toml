[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashlink"
version = "0.1.0"
description = "Mapping, set and LRU cache containers that keep their entries in a user controllable order"
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "linked-hash-map", "ordered", "lru", "cache"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashlink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
