"""Shared fixtures: a client pointed at the default Apollo base URL."""

from __future__ import annotations

import pytest

from apollo_mcp.config import DEFAULT_BASE_URL, ApolloConfig
from apollo_mcp.core.client import ApolloClient
from apollo_mcp.tools import ApolloTools

API_KEY = "test-api-key"
BASE_URL = DEFAULT_BASE_URL


@pytest.fixture
def config() -> ApolloConfig:
    return ApolloConfig(api_key=API_KEY)


@pytest.fixture
def client(config: ApolloConfig) -> ApolloClient:
    return ApolloClient(config)


@pytest.fixture
def tools(client: ApolloClient) -> ApolloTools:
    return ApolloTools(client)


@pytest.fixture
def apollo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment with an API key set and no base URL override."""
    monkeypatch.setenv("APOLLO_API_KEY", API_KEY)
    monkeypatch.delenv("APOLLO_BASE_URL", raising=False)
