[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bootkick"
version = "0.1.0"
description = "Game model for a conveyor-belt logic puzzle: products, sensors, an SR flip-flop, pins, scoring and a kicking mascot"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "logic gates", "flip-flop", "conveyor", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["bootkick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
