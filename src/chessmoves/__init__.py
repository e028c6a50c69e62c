"""chessmoves — pseudo-legal move generation for a single chess piece."""

__version__ = "0.1.0"
