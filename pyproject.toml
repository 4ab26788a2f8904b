[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greedysnake"
version = "1.0.0"
description = "A terminal snake game with difficulty levels, timed bonus food and an animated intro"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "console", "arcade"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
greedysnake = "greedysnake.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["greedysnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
