[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "townguard"
version = "0.1.0"
description = "A terminal base-building game: gather gold and elixir, build walls, and defend your town hall from waves of enemies."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "strategy", "tower-defense", "base-building"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
townguard = "townguard.game:main"

[tool.hatch.build.targets.wheel]
packages = ["townguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
