"""Scene file parsing, map validation and player movement for a grid-based raycasting game."""

__version__ = "0.1.0"