"""Small programming puzzles with working solutions, and an image collage builder."""

__version__ = "0.1.0"