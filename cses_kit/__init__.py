"""Algorithms for classic contest problems: DP, graphs, mazes and strings, with a small command line."""

__version__ = "0.1.0"
__all__ = ["cli", "dp", "graphs", "mazes", "strings"]