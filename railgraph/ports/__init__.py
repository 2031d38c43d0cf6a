"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the query engine and the adapters
that feed it, which keeps the engine testable against any graph.
"""

from .graph import GraphRepositoryPort, RouteGraphPort

__all__ = [
    "RouteGraphPort",
    "GraphRepositoryPort",
]
