"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextFileGraphRepository: Loads the graph from a text edge list
"""

from .text_repository import TextFileGraphRepository

__all__ = ["TextFileGraphRepository"]
