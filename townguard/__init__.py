"""Terminal base-building game: gather resources, build, and defend the town hall."""

__version__ = "0.1.0"