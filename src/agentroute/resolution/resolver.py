"""AgentResolver: the single entry point for primary-agent resolution."""

from __future__ import annotations

import logging

from agentroute.resolution.catalog import CatalogAccessor, ListAgentsFn, LoadProjectConfigFn
from agentroute.resolution.models import Phase, ResolutionContext, ResolutionResult
from agentroute.resolution.strategies import (
    ActAgentStrategy,
    EvalAgentStrategy,
    PlanAgentStrategy,
    ResolutionStrategy,
    StrategyContext,
)

logger = logging.getLogger(__name__)


class AgentResolver:
    """Dispatches a resolution to the strategy for its phase.

    - PLAN: solution-architect or technical-planner
    - ACT:  explicit > recommended > config > intent > context > default
    - EVAL: always code-reviewer

    Holds no per-call state; one instance can serve concurrent calls.
    """

    def __init__(
        self,
        load_project_config: LoadProjectConfigFn,
        list_agents: ListAgentsFn,
        *,
        remember_last_good: bool = False,
    ) -> None:
        self.catalog = CatalogAccessor(
            list_agents,
            load_project_config,
            remember_last_good=remember_last_good,
        )
        self._strategies: dict[Phase, ResolutionStrategy] = {
            Phase.PLAN: PlanAgentStrategy(),
            Phase.ACT: ActAgentStrategy(load_project_config),
            Phase.EVAL: EvalAgentStrategy(),
        }

    async def resolve(
        self,
        phase: Phase,
        prompt: str,
        context: ResolutionContext | None = None,
        recommended_agent: str | None = None,
    ) -> ResolutionResult:
        """Resolve which primary agent handles ``prompt`` in ``phase``.

        Args:
            phase: Current workflow phase.
            prompt: User request text (the phase keyword already stripped).
            context: Optional file path / project type hints.
            recommended_agent: ACT agent recommended by a prior PLAN phase.
        """
        available = await self.catalog.list_available()
        ctx = StrategyContext(
            prompt=prompt or "",
            available_agents=tuple(available),
            context=context,
            recommended_agent=recommended_agent,
        )

        result = await self._strategies[phase].resolve(ctx)
        logger.debug(
            f"[{phase.name}] Resolved agent: {result.agent_name} "
            f"(source: {result.source}, confidence: {result.confidence})"
        )
        return result
