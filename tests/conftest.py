"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from urlpath_mcp.codec import PathContext, reset_default_context
from urlpath_mcp.config import reset_config
from urlpath_mcp.metrics import reset_metrics_collector


@pytest.fixture(autouse=True)
def reset_singletons_fixture() -> Iterator[None]:
    """Reset config, default context and metrics between tests for isolation."""
    reset_config()
    reset_default_context()
    reset_metrics_collector()
    yield
    reset_config()
    reset_default_context()
    reset_metrics_collector()


@pytest.fixture
def posix() -> PathContext:
    """Context without Windows drive-letter handling."""
    return PathContext.posix()


@pytest.fixture
def windows() -> PathContext:
    """Context with Windows drive-letter handling."""
    return PathContext.windows()


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all URLPATH_MCP_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("URLPATH_MCP_")]
    for key in keys_to_remove:
        del os.environ[key]
