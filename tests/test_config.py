from pathlib import Path

import pytest
from pydantic import ValidationError

from railgraph.config import DEFAULT_EDGE_PATTERN, AppConfig, get_config, reset_config
from railgraph.domain.errors import FileUnreadableError, RailGraphError


def test_defaults():
    config = get_config()

    assert isinstance(config, AppConfig)
    assert config.graph.input_path is None
    assert config.graph.encoding == "utf-8"
    assert config.graph.edge_pattern == DEFAULT_EDGE_PATTERN
    assert config.observability.level == "WARNING"


def test_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RAILGRAPH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RAILGRAPH_GRAPH_INPUT_PATH", "/tmp/edges.txt")
    reset_config()

    config = get_config()

    assert config.observability.level == "DEBUG"
    assert config.graph.input_path == Path("/tmp/edges.txt")


def test_error_message_includes_cause():
    error = FileUnreadableError("Unable to read", cause=OSError("denied"))

    assert str(error) == "Unable to read: denied"
    assert isinstance(error, RailGraphError)
    assert str(RailGraphError("plain")) == "plain"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RAILGRAPH_LOG_LEVEL", "LOUD")
    reset_config()

    with pytest.raises(ValidationError):
        get_config()
