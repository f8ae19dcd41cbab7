[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2023"
version = "0.11.0"
description = "Puzzle solutions for days 19 to 25 of a December coding calendar, with a runner, timer and benchmark table updater."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "benchmarks", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
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
advent2023 = "advent2023.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2023"]

[tool.pytest.ini_options]
addopts = "-ra"
