"""Shared pytest fixtures for weather-server test suite."""

from __future__ import annotations

import pytest

from weather_server.config import ServerConfig, default_config
from weather_server.tools import ToolServer


@pytest.fixture
def config() -> ServerConfig:
    return default_config()


@pytest.fixture
def tool_server(config: ServerConfig) -> ToolServer:
    """A fresh ToolServer over the default weather table."""
    return ToolServer(config)
