"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from railgraph.config import reset_config
from railgraph.graph import GraphModel, QueryEngine, parse_graph

REFERENCE_INPUT = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch):
    """Load configuration from a clean environment in every test."""
    for name in (
        "RAILGRAPH_GRAPH_INPUT_PATH",
        "RAILGRAPH_GRAPH_ENCODING",
        "RAILGRAPH_GRAPH_EDGE_PATTERN",
        "RAILGRAPH_LOG_LEVEL",
        "RAILGRAPH_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def reference_graph() -> GraphModel:
    """Return the graph from the reference input."""
    return parse_graph(REFERENCE_INPUT)


@pytest.fixture
def reference_engine(reference_graph: GraphModel) -> QueryEngine:
    return QueryEngine(reference_graph)


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Write the reference input to a temporary file."""
    path = tmp_path / "input.txt"
    path.write_text(REFERENCE_INPUT + "\n", encoding="utf-8")
    return path
