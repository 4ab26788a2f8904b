"""A terminal snake game with difficulty levels, timed bonus food and an animated intro."""

__version__ = "1.0.0"