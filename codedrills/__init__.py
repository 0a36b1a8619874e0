"""Programming drills: Euler solutions, number puzzles, basics, and small JSON APIs and clients."""

__version__ = "0.1.0"