"""Text-file Graph Repository adapter.

This adapter turns an edge-list file into a GraphModel and adds:
- Configuration injection (path, encoding and edge pattern from config)
- Caching of the built graph
- Typed errors for unreadable files and bad configuration
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import ConfigurationError
from ...graph.model import GraphModel
from ...graph.parse import parse_graph
from ...io.input_text import read_input_text


@dataclass
class TextFileGraphRepository:
    """Graph repository that loads from a text edge list.

    This adapter implements GraphRepositoryPort.

    Attributes:
        path: Edge-list file; falls back to ``config.input_path``
        config: Graph configuration (path, encoding, edge pattern)
    """

    path: Optional[Path] = None
    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[GraphModel] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def source_path(self) -> Path:
        """Resolve the edge-list path.

        Raises:
            ConfigurationError: If neither a path nor a configured
                input path is available.
        """
        path = self.path if self.path is not None else self.config.input_path
        if path is None:
            raise ConfigurationError(
                "No input file given and RAILGRAPH_GRAPH_INPUT_PATH is not set",
                setting_name="input_path",
                expected_type="path",
            )
        return Path(path)

    def load(self) -> GraphModel:
        """Load the graph from the edge-list file.

        Returns:
            The immutable graph model.

        Raises:
            FileUnreadableError: If the file cannot be read.
            MalformedEdgeError: If an edge cannot be built.
            ConfigurationError: If no path or an invalid pattern is set.
        """
        if self._graph is not None:
            return self._graph

        path = self.source_path
        self._logger.debug("Loading graph", extra={"input_path": str(path)})

        text = read_input_text(path, encoding=self.config.encoding)
        graph = parse_graph(text, self.config.edge_pattern)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"stations": len(graph), "edges": graph.edge_count},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
