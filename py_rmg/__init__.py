"""Random map generator for tile-based strategy games."""

__version__ = "0.1.0"
