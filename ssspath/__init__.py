"""Dijkstra single-source shortest paths over a graph, with a traceable min-heap and a query-driven command line."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "minheap"]