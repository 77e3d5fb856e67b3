"""Shared fixtures for agentroute tests."""

from unittest.mock import AsyncMock

import pytest

from agentroute.resolution import ALL_PRIMARY_AGENTS, AgentResolver


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AGENTROUTE_* overrides from the developer's shell out of the tests."""
    for name in ("AGENTROUTE_PRIMARY_AGENT", "AGENTROUTE_EXCLUDE_AGENTS", "AGENTROUTE_PORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def list_agents() -> AsyncMock:
    """Catalog lister returning every primary agent."""
    return AsyncMock(return_value=list(ALL_PRIMARY_AGENTS))


@pytest.fixture
def load_config() -> AsyncMock:
    """Project config loader returning no config."""
    return AsyncMock(return_value=None)


@pytest.fixture
def resolver(load_config: AsyncMock, list_agents: AsyncMock) -> AgentResolver:
    return AgentResolver(load_config, list_agents)
