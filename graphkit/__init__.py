"""Graph traversals, shortest paths, spanning trees, tree diameters, grid searches and Fibonacci numbers."""

__version__ = "0.1.0"
__all__ = ["grids", "sequences", "shortest_paths", "spanning_trees", "traversal", "trees"]