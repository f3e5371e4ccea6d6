[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmsprop"
version = "0.1.0"
description = "Detect thermal propagation in a battery pack from recorded sensor data"
requires-python = ">=3.10"
dependencies = []
keywords = ["battery", "bms", "thermal runaway", "propagation", "sensors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmsprop = "bmsprop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmsprop"]

[tool.pytest.ini_options]
addopts = "-ra"
