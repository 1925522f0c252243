[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonwalk"
version = "0.1.0"
description = "A small tile-based dungeon walker: load a text map and walk a character from tile to tile."
requires-python = ">=3.10"
keywords = ["game", "dungeon", "tilemap", "pygame", "2d"]
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
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonwalk = "dungeonwalk.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
