"""In-memory graph model.

This module defines the immutable adjacency structure every query runs
against: a mapping from station to (destination -> distance).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from ..domain.errors import MalformedEdgeError
from ..domain.models import Edge, Station

logger = logging.getLogger(__name__)

EdgeLike = Tuple[Any, Any, Any]


def _parse_distance(edge: EdgeLike) -> int:
    origin, destination, raw = edge
    if isinstance(raw, bool):
        raise MalformedEdgeError(
            f"Distance must be an integer, got {raw!r}",
            origin=origin,
            destination=destination,
            distance=raw,
        )
    if isinstance(raw, int):
        distance = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        distance = int(raw.strip())
    else:
        raise MalformedEdgeError(
            f"Distance is not a non-negative integer: {raw!r}",
            origin=origin,
            destination=destination,
            distance=raw,
        )
    if distance < 0:
        raise MalformedEdgeError(
            f"Distance must not be negative, got {distance}",
            origin=origin,
            destination=destination,
            distance=raw,
        )
    return distance


def _unpack(edge: Edge | EdgeLike) -> EdgeLike:
    if isinstance(edge, Edge):
        return edge.origin, edge.destination, edge.distance
    try:
        origin, destination, distance = edge
    except (TypeError, ValueError) as e:
        raise MalformedEdgeError(
            f"Expected an (origin, destination, distance) triple, got {edge!r}",
            cause=e,
        )
    return origin, destination, distance


class GraphModel:
    """Directed, weighted graph built once from a sequence of edges.

    Only stations with at least one outgoing edge are keys of the
    adjacency mapping. The structure is never mutated after construction
    and can be shared freely between queries.

    Example:
        graph = GraphModel.from_edges([("A", "B", 5), ("B", "C", 4)])
        graph.lookup("A", "B")        # 5
        graph.outgoing_edges("C")     # ()
    """

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: Mapping[Station, Mapping[Station, int]]) -> None:
        frozen = {
            origin: MappingProxyType(dict(destinations))
            for origin, destinations in adjacency.items()
            if destinations
        }
        self._adjacency: Mapping[Station, Mapping[Station, int]] = MappingProxyType(
            frozen
        )
        self._edge_count = sum(len(d) for d in frozen.values())

    @classmethod
    def from_edges(cls, edges: Iterable[Edge | EdgeLike]) -> GraphModel:
        """Build a graph from (origin, destination, distance) triples.

        A repeated (origin, destination) pair overwrites the earlier
        distance. Self-loops are allowed.

        Args:
            edges: Edge values or plain triples. Distances may be ints or
                strings of decimal digits.

        Returns:
            The immutable graph.

        Raises:
            MalformedEdgeError: If an endpoint is missing or a distance is
                not a non-negative integer.
        """
        adjacency: Dict[Station, Dict[Station, int]] = {}
        for edge in edges:
            origin, destination, raw_distance = _unpack(edge)
            if origin is None or origin == "" or destination is None or destination == "":
                raise MalformedEdgeError(
                    "Edge is missing an origin or destination",
                    origin=origin,
                    destination=destination,
                    distance=raw_distance,
                )
            distance = _parse_distance((origin, destination, raw_distance))
            adjacency.setdefault(origin, {})[destination] = distance

        graph = cls(adjacency)
        logger.debug(
            "Graph built",
            extra={"stations": len(graph), "edges": graph.edge_count},
        )
        return graph

    def lookup(self, origin: Station, destination: Station) -> Optional[int]:
        """Return the distance of the direct edge, or None if absent."""
        destinations = self._adjacency.get(origin)
        if destinations is None:
            return None
        return destinations.get(destination)

    def outgoing_edges(self, station: Station) -> Sequence[Tuple[Station, int]]:
        """Return every (destination, distance) pair leaving ``station``."""
        destinations = self._adjacency.get(station)
        if destinations is None:
            return ()
        return tuple(destinations.items())

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges of the graph."""
        for origin, destinations in self._adjacency.items():
            for destination, distance in destinations.items():
                yield Edge(origin=origin, destination=destination, distance=distance)

    @property
    def stations(self) -> Tuple[Station, ...]:
        """Stations with at least one outgoing edge."""
        return tuple(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, station: object) -> bool:
        return station in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"GraphModel(stations={len(self)}, edges={self.edge_count})"
