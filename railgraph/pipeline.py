"""The fixed query battery run against a loaded graph.

The pipeline is organized in three stages:

1. Graph loading (from the edge-list file to a GraphModel).
2. Query evaluation (each battery entry through the QueryEngine).
3. Formatting (one ``Output #n: ...`` line per query).

Queries are independent: a query with no answer only affects its own
output line.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .adapters.graph import TextFileGraphRepository
from .domain.models import Query, QueryKind, QueryResult
from .graph.engine import QueryEngine
from .io.output import format_line

BATTERY: tuple[Query, ...] = (
    Query("A-B-C distance", QueryKind.ROUTE_DISTANCE, ("A", "B", "C")),
    Query("A-D distance", QueryKind.ROUTE_DISTANCE, ("A", "D")),
    Query("A-D-C distance", QueryKind.ROUTE_DISTANCE, ("A", "D", "C")),
    Query("A-E-B-C-D distance", QueryKind.ROUTE_DISTANCE, ("A", "E", "B", "C", "D")),
    Query("A-E-D distance", QueryKind.ROUTE_DISTANCE, ("A", "E", "D")),
    Query("C circular routes", QueryKind.CIRCULAR_ROUTE, ("C",), limit=3),
    Query("A to B with 4 stops", QueryKind.EXACT_STOPS, ("A", "B"), limit=4),
    Query("A to C shortest", QueryKind.SHORTEST_ROUTE, ("A", "C")),
    Query("B to B shortest", QueryKind.SHORTEST_ROUTE, ("B", "B")),
    Query("C to C under 30", QueryKind.ROUTES_LESS_THAN, ("C", "C"), limit=30),
)


def run_battery(
    engine: QueryEngine, queries: Sequence[Query] = BATTERY
) -> List[QueryResult]:
    """Evaluate every query in order."""
    return [engine.run(query) for query in queries]


def render_battery(
    engine: QueryEngine, queries: Sequence[Query] = BATTERY
) -> List[str]:
    """Evaluate the queries and format one output line for each."""
    return [
        format_line(index, result.value)
        for index, result in enumerate(run_battery(engine, queries), start=1)
    ]


def solve_input_file(
    path: Union[str, Path],
    queries: Sequence[Query] = BATTERY,
    *,
    repository: Optional[TextFileGraphRepository] = None,
) -> List[str]:
    """Load a graph from ``path`` and render the query battery against it.

    This helper is designed to be reused from other front-ends
    (CLI, tests, etc.).

    Raises:
        FileUnreadableError: If the file cannot be read.
        MalformedEdgeError: If the edge list is invalid.
    """
    repository = repository or TextFileGraphRepository(path=Path(path))
    engine = QueryEngine(repository.load())
    return render_battery(engine, queries)
