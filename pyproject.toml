[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicsim"
version = "0.1.0"
description = "Interactive command-line simulator for small digital logic circuits"
requires-python = ">=3.10"
keywords = ["logic", "digital", "circuit", "simulator", "gates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicsim = "logicsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logicsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
