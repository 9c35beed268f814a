"""Classic algorithm exercises on trees, graphs, backtracking, numbers and a two-stack queue."""

__version__ = "0.1.0"

__all__ = ["backtracking", "graphs", "numeric", "structures", "trees"]