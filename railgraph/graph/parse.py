"""Edge-list parsing from free-form text.

Edges are written as ``<origin><destination><distance>``, for example
``AB5``. The input is scanned for the edge pattern rather than split on
delimiters, so spaces, commas and newlines between edges are ignored.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern, Union

from ..config import DEFAULT_EDGE_PATTERN
from ..domain.errors import ConfigurationError, MalformedEdgeError
from ..domain.models import Edge
from .model import GraphModel

logger = logging.getLogger(__name__)

_DEFAULT_REGEX = re.compile(DEFAULT_EDGE_PATTERN)


def _compile(pattern: Union[str, Pattern[str], None]) -> Pattern[str]:
    if pattern is None:
        return _DEFAULT_REGEX
    try:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as e:
        raise ConfigurationError(
            f"Invalid edge pattern {pattern!r}",
            cause=e,
            setting_name="edge_pattern",
            expected_type="regular expression",
        )
    if regex.groups != 3:
        raise ConfigurationError(
            f"Edge pattern needs exactly 3 groups, got {regex.groups}",
            setting_name="edge_pattern",
            expected_type="regex with origin, destination and distance groups",
        )
    return regex


def parse_edges(
    text: str, pattern: Union[str, Pattern[str], None] = None
) -> List[Edge]:
    """Extract every edge from the input text.

    Args:
        text: Raw edge-list text.
        pattern: Optional regex with three groups (origin, destination,
            distance). Defaults to one letter, one letter, digits.

    Returns:
        Edges in the order they appear in the text.

    Raises:
        ConfigurationError: If the pattern is invalid.
        MalformedEdgeError: If a matched distance is not a digit run
            (only possible with a custom pattern).
    """
    regex = _compile(pattern)
    edges: List[Edge] = []
    for match in regex.finditer(text):
        origin, destination, distance = match.group(1, 2, 3)
        if not origin or not destination or not distance or not distance.isdecimal():
            raise MalformedEdgeError(
                f"Malformed edge {match.group(0)!r}",
                origin=origin,
                destination=destination,
                distance=distance,
            )
        edges.append(Edge(origin=origin, destination=destination, distance=int(distance)))
    logger.debug("Parsed edge list", extra={"edges": len(edges)})
    return edges


def parse_graph(
    text: str, pattern: Union[str, Pattern[str], None] = None
) -> GraphModel:
    """Parse the input text and build the graph in one step."""
    return GraphModel.from_edges(parse_edges(text, pattern))
