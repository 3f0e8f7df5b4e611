[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rosestore"
version = "0.1.0"
description = "Storage files, skip list index and in-memory hash, set, list and sorted set structures for a Redis-like key-value store."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "database", "storage", "skiplist", "sorted-set", "redis"]
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rosestore"]

[tool.pytest.ini_options]
addopts = "-ra"
