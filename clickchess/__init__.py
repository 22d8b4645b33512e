"""A point-and-click chess board for two players, with its rules usable without a window."""

__version__ = "0.1.0"