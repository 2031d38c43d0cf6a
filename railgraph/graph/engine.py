"""Query engine over a GraphModel.

Five query operations are exposed, all pure and side-effect free:

- ``route_distance``: distance along a literal route
- ``circular_route``: count of walks returning to the start within N hops
- ``exact_stops``: count of walks with an exact number of stops
- ``shortest_route``: shortest distance between two stations
- ``routes_less_than``: count of walks shorter than a distance ceiling

The last four run on the breadth-first skeleton in ``traversal``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import partial
from itertools import islice
from typing import List, Optional, Sequence

from ..domain.errors import NoSuchRouteError
from ..domain.models import PartialRoute, Query, QueryKind, QueryResult, Station
from ..ports.graph import RouteGraphPort
from .traversal import breadth_first_rounds, expand, start_route


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass
class QueryEngine:
    """Answers route queries against a read-only graph.

    The engine keeps no state between calls, so the same query against
    the same graph always gives the same answer.

    Usage:
        engine = QueryEngine(parse_graph("AB5, BC4"))
        engine.route_distance(["A", "B", "C"])   # 9
        engine.shortest_route("A", "C")          # 9

    Attributes:
        graph: Graph to query, usually a GraphModel
    """

    graph: RouteGraphPort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route_distance(self, stops: Sequence[Station]) -> Optional[int]:
        """Sum the edge distances along a literal route.

        Args:
            stops: Stations to visit in order, at least one.

        Returns:
            Total distance, 0 for a single station, or None as soon as
            two consecutive stations are not directly connected.
        """
        if not stops:
            raise ValueError("A route needs at least one stop")

        distance = 0
        for origin, destination in zip(stops, stops[1:]):
            hop = self.graph.lookup(origin, destination)
            if hop is None:
                return None
            distance += hop
        return distance

    def circular_route(self, start: Station, hops: int) -> Optional[int]:
        """Count arrivals back at ``start`` over ``hops`` rounds of fan-out.

        Only bare stations are tracked. Any station in the fan-out that
        has no outgoing edges fails the whole query.

        Returns:
            The number of times a round produced ``start``, or None if a
            dead end was reached.
        """
        _require_non_negative("hops", hops)

        def strict_destinations(station: Station) -> List[Station]:
            edges = self.graph.outgoing_edges(station)
            if not edges:
                raise NoSuchRouteError(
                    f"Station {station!r} has no outgoing edges",
                    start=start,
                    station=station,
                )
            return [destination for destination, _ in edges]

        count = 0
        try:
            for frontier in islice(
                breadth_first_rounds([start], strict_destinations), hops
            ):
                count += sum(1 for station in frontier if station == start)
        except NoSuchRouteError as e:
            self._logger.debug(
                "Circular route aborted",
                extra={"start": start, "dead_end": e.station},
            )
            return None
        return count

    def exact_stops(self, start: Station, destination: Station, stops: int) -> int:
        """Count walks from ``start`` to ``destination`` with exactly ``stops`` stops.

        A walk with n stops passes through n intermediate stations, so it
        takes n + 1 hops. Walks that run into a dead end are dropped.
        """
        _require_non_negative("stops", stops)

        frontier: List[PartialRoute] = expand(self.graph, start_route(start))
        for frontier in islice(
            breadth_first_rounds(frontier, partial(expand, self.graph)), stops
        ):
            pass
        return sum(1 for route in frontier if route.current_station == destination)

    def shortest_route(self, start: Station, destination: Station) -> Optional[int]:
        """Find the shortest distance from ``start`` to ``destination``.

        The search always takes at least one hop, so asking for the same
        station twice gives the shortest cycle through it. Routes no
        shorter than the best complete one found so far are pruned, and
        complete routes are not expanded further.

        Relies on strictly positive distances to terminate.
        """
        best = math.inf

        def visit(route: PartialRoute) -> bool:
            nonlocal best
            if route.distance >= best:
                return False
            if route.current_station == destination:
                best = route.distance
                return False
            return True

        initial = expand(self.graph, start_route(start))
        for _ in breadth_first_rounds(initial, partial(expand, self.graph), visit):
            pass

        if math.isinf(best):
            return None
        return int(best)

    def routes_less_than(
        self, start: Station, destination: Station, ceiling: int
    ) -> int:
        """Count walks from ``start`` to ``destination`` shorter than ``ceiling``.

        Reaching the destination does not end a walk: it keeps going and
        may come back again while still under the ceiling.
        """
        count = 0

        def visit(route: PartialRoute) -> bool:
            nonlocal count
            if route.distance >= ceiling:
                return False
            if route.current_station == destination:
                count += 1
            return True

        initial = expand(self.graph, start_route(start))
        for _ in breadth_first_rounds(initial, partial(expand, self.graph), visit):
            pass
        return count

    def run(self, query: Query) -> QueryResult:
        """Evaluate a query by dispatching on its kind.

        Raises:
            ValueError: If the query arguments do not fit its kind.
        """
        value = self._dispatch(query)
        self._logger.debug(
            "Query evaluated",
            extra={"query": query.name, "kind": query.kind.name, "value": value},
        )
        return QueryResult(query=query, value=value)

    def _dispatch(self, query: Query) -> Optional[int]:
        kind = query.kind
        stations = query.stations

        if kind is QueryKind.ROUTE_DISTANCE:
            return self.route_distance(stations)

        if kind is QueryKind.CIRCULAR_ROUTE:
            if len(stations) != 1 or query.limit is None:
                raise ValueError(f"{query.name}: needs one station and a hop count")
            return self.circular_route(stations[0], query.limit)

        if len(stations) != 2:
            raise ValueError(f"{query.name}: needs a start and a destination")
        start, destination = stations

        if kind is QueryKind.SHORTEST_ROUTE:
            return self.shortest_route(start, destination)

        if query.limit is None:
            raise ValueError(f"{query.name}: needs a limit")
        if kind is QueryKind.EXACT_STOPS:
            return self.exact_stops(start, destination, query.limit)
        if kind is QueryKind.ROUTES_LESS_THAN:
            return self.routes_less_than(start, destination, query.limit)

        raise ValueError(f"Unknown query kind: {kind!r}")
