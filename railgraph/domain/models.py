"""Immutable domain models for the rail graph.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts the query engine works
with: edges, partial routes and queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Hashable, Optional

# Stations are opaque tokens: single letters in the reference input,
# but any hashable value works.
Station = Hashable


class QueryKind(Enum):
    """The five query operations the engine answers."""

    ROUTE_DISTANCE = auto()
    CIRCULAR_ROUTE = auto()
    EXACT_STOPS = auto()
    SHORTEST_ROUTE = auto()
    ROUTES_LESS_THAN = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection between two stations.

    Attributes:
        origin: Station the edge leaves from
        destination: Station the edge arrives at
        distance: Non-negative integer distance
    """

    origin: Station
    destination: Station
    distance: int


@dataclass(frozen=True, slots=True)
class PartialRoute:
    """One concrete walk through the graph, built during a traversal.

    Attributes:
        stops: Visited stations, first is the query start
        distance: Distance accumulated along the walk
    """

    stops: tuple[Station, ...]
    distance: int = 0

    def __post_init__(self) -> None:
        if not self.stops:
            raise ValueError("A route needs at least one stop")

    @property
    def current_station(self) -> Station:
        """Return the station the walk currently ends at."""
        return self.stops[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed so far."""
        return len(self.stops) - 1

    def extend(self, destination: Station, distance: int) -> PartialRoute:
        """Return a new route with one more hop appended."""
        return PartialRoute(
            stops=self.stops + (destination,),
            distance=self.distance + distance,
        )


@dataclass(frozen=True, slots=True)
class Query:
    """A named query to evaluate against a graph.

    ``limit`` is the hop count for circular routes, the stop count for
    exact-stop counts and the exclusive distance ceiling for bounded
    counts. Route distances and shortest routes ignore it.

    Attributes:
        name: Human-readable label
        kind: Which engine operation to run
        stations: Station arguments (full route, or start and destination)
        limit: Optional integer argument
    """

    name: str
    kind: QueryKind
    stations: tuple[Station, ...]
    limit: Optional[int] = None


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Outcome of a single query.

    Attributes:
        query: The query that was evaluated
        value: Distance or count, None when there is no such route
    """

    query: Query
    value: Optional[int] = field(default=None)

    @property
    def found(self) -> bool:
        """Check if the query produced a value."""
        return self.value is not None
