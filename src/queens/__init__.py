"""Step-by-step N-Queens backtracking explorer."""

__version__ = "0.1.0"
