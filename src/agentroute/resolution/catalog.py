"""Catalog accessor: the list of agents a resolution may pick from."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from agentroute.resolution.agents import ALL_PRIMARY_AGENTS
from agentroute.resolution.models import ProjectConfig

logger = logging.getLogger(__name__)

ListAgentsFn = Callable[[], Awaitable[list[str]]]
LoadProjectConfigFn = Callable[[], Awaitable[ProjectConfig | None]]


class CatalogAccessor:
    """Fetches the available agents and applies project exclusions.

    Listing failures and empty listings never propagate: the static
    ``ALL_PRIMARY_AGENTS`` list is used instead. With ``remember_last_good``
    the most recent successful listing is preferred over the static list
    until :meth:`invalidate` is called.
    """

    def __init__(
        self,
        list_agents: ListAgentsFn,
        load_project_config: LoadProjectConfigFn,
        *,
        remember_last_good: bool = False,
    ) -> None:
        self._list_agents = list_agents
        self._load_project_config = load_project_config
        self._remember_last_good = remember_last_good
        self._last_good: list[str] | None = None

    async def list_available(self) -> list[str]:
        agents = await self._safe_list_agents()
        return await self._filter_excluded(agents)

    def invalidate(self) -> None:
        self._last_good = None

    async def _safe_list_agents(self) -> list[str]:
        try:
            agents = list(await self._list_agents())
        except Exception as e:
            logger.warning(f"Failed to list primary agents: {e}. Using fallback list.")
            return self._fallback()

        if not agents:
            logger.debug("No primary agents found in registry, using default fallback list")
            return self._fallback()

        if self._remember_last_good:
            self._last_good = list(agents)
        return agents

    def _fallback(self) -> list[str]:
        if self._remember_last_good and self._last_good:
            return list(self._last_good)
        return list(ALL_PRIMARY_AGENTS)

    async def _filter_excluded(self, agents: list[str]) -> list[str]:
        try:
            config = await self._load_project_config()
        except Exception as e:
            logger.warning(f"Failed to get exclude_agents from config: {e}")
            return agents

        if config is None or not config.exclude_agents:
            return agents

        excluded = {name.strip().lower() for name in config.exclude_agents}
        filtered = [a for a in agents if a.lower() not in excluded]
        if len(filtered) < len(agents):
            logger.debug(f"Excluded agents from resolution: {', '.join(config.exclude_agents)}")
        return filtered
