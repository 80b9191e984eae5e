"""Grid snake game pieces: field with walls, snake, food, settings and display helpers."""

__version__ = "0.1.0"