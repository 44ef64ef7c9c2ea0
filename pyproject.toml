[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2019"
version = "0.1.0"
description = "Solutions to the 2019 Advent of Code puzzles, runnable day by day from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "aoc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2019 = "aoc2019.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2019"]

[tool.pytest.ini_options]
addopts = "-ra"
