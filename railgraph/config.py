"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the settings the
graph loader and the command-line runner need:
- where the edge list lives and how it is decoded
- the pattern used to scan edges out of free-form text
- logging level and format

Configuration can be overridden via environment variables:
- RAILGRAPH_GRAPH_INPUT_PATH=/path/to/input.txt
- RAILGRAPH_GRAPH_EDGE_PATTERN='([A-Z]+)-([A-Z]+)-(\\d+)'
- RAILGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EDGE_PATTERN = r"([a-zA-Z])([a-zA-Z])(\d+)"


class GraphConfig(BaseSettings):
    """Graph input configuration.

    Environment variables prefixed with RAILGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_GRAPH_")

    input_path: Optional[Path] = None
    encoding: str = "utf-8"
    edge_pattern: str = DEFAULT_EDGE_PATTERN


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_LOG_")

    # stdout is reserved for query output, logs go to stderr
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.edge_pattern)
        print(config.observability.level)

    Environment variables prefixed with RAILGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
