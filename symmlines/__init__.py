"""Find the lines of symmetry of a finite set of 2D points."""

__version__ = "0.1.0"
__all__ = ["alg", "cli", "model", "util"]