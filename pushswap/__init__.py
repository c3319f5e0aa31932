"""Two-stack integer sorting with a fixed set of moves, plus small text, buffer and I/O helpers."""

__version__ = "0.1.0"