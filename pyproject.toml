[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cachesim"
version = "0.1.0"
description = "Interactive simulator of a set-associative CPU cache with FIFO replacement backed by a small DRAM"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "simulator", "memory", "dram", "set-associative", "education"]
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
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cachesim = "cachesim.app:main"

[tool.setuptools.packages.find]
include = ["cachesim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
