"""Small processing objects for timing, lists, signals, sample buffers, matrices and markdown helpers."""

__version__ = "0.1.0"