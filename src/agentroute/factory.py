"""Wire an AgentResolver from files on disk."""

from __future__ import annotations

from pathlib import Path

from agentroute.config import CONFIG_FILENAME, load_project_config
from agentroute.registry import AgentRegistry
from agentroute.resolution import AgentResolver
from agentroute.resolution.catalog import ListAgentsFn, LoadProjectConfigFn
from agentroute.resolution.models import ProjectConfig


def registry_lister(project_root: Path | None = None) -> ListAgentsFn:
    """Catalog lister backed by the bundled registry plus project agents.

    The registry is re-read on every call so edits to ``.ai-rules/agents``
    are picked up without a restart.
    """

    async def list_agents() -> list[str]:
        return AgentRegistry.load_merged(project_root).primary_agent_ids()

    return list_agents


def config_loader(project_root: Path | None = None) -> LoadProjectConfigFn:
    root = project_root if project_root is not None else Path.cwd()

    async def load() -> ProjectConfig | None:
        return load_project_config(root / CONFIG_FILENAME)

    return load


def create_resolver(
    project_root: Path | None = None, *, remember_last_good: bool = False
) -> AgentResolver:
    root = project_root if project_root is not None else Path.cwd()
    return AgentResolver(
        config_loader(root),
        registry_lister(root),
        remember_last_good=remember_last_good,
    )
