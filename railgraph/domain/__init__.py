"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    FileUnreadableError,
    MalformedEdgeError,
    NoSuchRouteError,
    RailGraphError,
)
from .models import Edge, PartialRoute, Query, QueryKind, QueryResult, Station

__all__ = [
    # Models
    "Station",
    "Edge",
    "PartialRoute",
    "QueryKind",
    "Query",
    "QueryResult",
    # Errors
    "RailGraphError",
    "MalformedEdgeError",
    "NoSuchRouteError",
    "FileUnreadableError",
    "ConfigurationError",
]
