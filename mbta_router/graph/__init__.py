"""Graph-related utilities for representing the transit network.

This subpackage builds an in-memory graph from route/stop listings,
finds shortest stop-to-stop paths on it and reduces those paths to
the sequence of lines a rider takes.
"""

from .bfs import shortest_path
from .build_graph import Adjacency, StopRoutesIndex, build_graph
from .coalesce import coalesce_to_lines

__all__ = [
    "Adjacency",
    "StopRoutesIndex",
    "build_graph",
    "shortest_path",
    "coalesce_to_lines",
]
