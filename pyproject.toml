[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dialpuzzles"
version = "0.1.0"
description = "Solvers for a set of daily puzzles: safe dials, repeated IDs, paper rolls, fresh ingredients and column arithmetic."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver"]
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
dialpuzzles-day1 = "dialpuzzles.day1:main"
dialpuzzles-day2 = "dialpuzzles.day2:main"
dialpuzzles-day4 = "dialpuzzles.day4:main"
dialpuzzles-day5 = "dialpuzzles.day5:main"
dialpuzzles-day6 = "dialpuzzles.day6:main"

[tool.hatch.build.targets.wheel]
packages = ["dialpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
