"""A small tile-based dungeon walker: text tile maps, timed character movement and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]