"""Graph-related utilities for representing the rail network.

This subpackage contains the immutable graph model, the edge-list
parser and the query engine with its breadth-first traversal skeleton.
"""

from .engine import QueryEngine
from .model import GraphModel
from .parse import parse_edges, parse_graph

__all__ = ["GraphModel", "QueryEngine", "parse_edges", "parse_graph"]
