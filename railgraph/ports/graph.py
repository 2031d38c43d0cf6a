"""Graph ports - Abstractions for graph loading and lookups.

These protocols define the contracts between the query engine and the
structures it reads from, so the engine never depends on how a graph
was built or where its edges came from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Station
    from ..graph.model import GraphModel


class RouteGraphPort(Protocol):
    """Port for read-only graph lookups.

    Implementation: graph/model.py (GraphModel)

    These two operations are all the query engine needs. Every traversal
    strategy grows its frontier through ``outgoing_edges``.
    """

    def lookup(self, origin: Station, destination: Station) -> Optional[int]:
        """Return the single-hop distance between two stations.

        Args:
            origin: Station the edge leaves from.
            destination: Station the edge arrives at.

        Returns:
            The edge distance, or None if there is no such edge.
        """
        ...

    def outgoing_edges(self, station: Station) -> Sequence[Tuple[Station, int]]:
        """List every edge leaving a station.

        Args:
            station: The station to expand.

        Returns:
            (destination, distance) pairs, empty for a dead end.
        """
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for reading and caching the graph
    from wherever its edge list is stored.
    """

    def load(self) -> GraphModel:
        """Load the graph.

        Returns:
            The immutable graph model.
        """
        ...
