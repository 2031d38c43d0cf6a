"""Breadth-first traversal primitives shared by every query strategy.

Each strategy runs the same round loop: take the current frontier,
decide per item whether to expand it, and collect the expansions into
the next frontier. Strategies differ only in what they put in the
frontier, how items expand, and what the visitor accepts or prunes.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

from ..domain.models import PartialRoute, Station
from ..ports.graph import RouteGraphPort

T = TypeVar("T")

Expander = Callable[[T], Iterable[T]]
Visitor = Callable[[T], bool]


def start_route(station: Station) -> PartialRoute:
    """Return the zero-hop route sitting at ``station``."""
    return PartialRoute(stops=(station,))


def expand(graph: RouteGraphPort, route: PartialRoute) -> List[PartialRoute]:
    """Extend a route by one hop along every outgoing edge.

    A dead end yields an empty list; the route then simply drops out of
    the frontier.
    """
    return [
        route.extend(destination, distance)
        for destination, distance in graph.outgoing_edges(route.current_station)
    ]


def breadth_first_rounds(
    frontier: Iterable[T],
    expander: Expander[T],
    visit: Optional[Visitor[T]] = None,
) -> Iterator[List[T]]:
    """Yield successive frontiers, one per round.

    Items for which ``visit`` returns False are dropped without being
    expanded. With no visitor every item is expanded. The generator
    stops after yielding the first empty frontier, so callers either
    bound the number of rounds with ``itertools.islice`` or exhaust it.

    Args:
        frontier: Items to expand in the first round.
        expander: Produces the next-round items for one item.
        visit: Optional filter, called exactly once per item per round.

    Yields:
        The frontier produced by each round.
    """
    current = list(frontier)
    while current:
        following: List[T] = []
        for item in current:
            if visit is None or visit(item):
                following.extend(expander(item))
        current = following
        yield current
