[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatherquest"
version = "0.1.0"
description = "A small resource gathering game: walk around a field, chop trees and mine rocks."
requires-python = ">=3.10"
keywords = ["game", "gathering", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gatherquest = "gatherquest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gatherquest"]

[tool.pytest.ini_options]
addopts = "-ra"
