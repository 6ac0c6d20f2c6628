"""Optimal N-puzzle solver using A* with the Manhattan heuristic."""

__version__ = "0.1.0"
