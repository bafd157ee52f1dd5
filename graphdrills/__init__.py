"""Search drills on grids, graphs and binary trees, with two small console exercises."""

__version__ = "0.1.0"

__all__ = ["graphs", "grids", "inventory", "puzzles", "students", "trees"]