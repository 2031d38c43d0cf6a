"""Typed domain errors for the rail graph.

All errors inherit from RailGraphError and can optionally wrap a root
cause exception for debugging.

Missing routes are normally reported as ``None`` by the query engine.
NoSuchRouteError is only raised where a dead end has to abort a whole
traversal (see QueryEngine.circular_route).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass
class RailGraphError(Exception):
    """Base error for the rail graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class MalformedEdgeError(RailGraphError):
    """An edge could not be turned into an adjacency entry.

    Raised while building a GraphModel when an endpoint is missing or
    the distance is not a non-negative integer.

    Attributes:
        origin: Origin token as received
        destination: Destination token as received
        distance: Distance token as received
    """

    origin: Optional[Hashable] = None
    destination: Optional[Hashable] = None
    distance: Any = None


@dataclass
class NoSuchRouteError(RailGraphError):
    """A traversal hit a station it could not leave.

    Attributes:
        start: Station the query started from
        station: Station without outgoing edges
    """

    start: Optional[Hashable] = None
    station: Optional[Hashable] = None


@dataclass
class FileUnreadableError(RailGraphError):
    """The edge list file could not be read.

    Attributes:
        file_path: Path of the file that failed
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RailGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
