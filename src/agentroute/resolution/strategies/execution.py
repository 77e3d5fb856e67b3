"""ACT phase: pick the implementation agent from every available signal.

Resolution order (first hit wins):
    1. explicit request in the prompt ("backend-developer로 작업해")
    2. agent recommended by the PLAN phase
    3. project config ``primary_agent``
    4. meta-discussion about agents -> skip step 5
    5. intent categories, in INTENT_CATEGORY_CHECKS order
    6. file path / project type context (confidence >= 0.8 only)
    7. default agent
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from agentroute.patterns import CONTEXT_RULES, INTENT_CATEGORY_CHECKS, CategoryCheck
from agentroute.registry.loader import normalize_agent_name
from agentroute.resolution.agents import (
    ACT_PRIMARY_AGENTS,
    DEFAULT_ACT_AGENT,
    INFRASTRUCTURE_AGENT,
)
from agentroute.resolution.catalog import LoadProjectConfigFn
from agentroute.resolution.explicit import is_meta_discussion, parse_explicit_request
from agentroute.resolution.models import ResolutionContext, ResolutionResult, ResolutionSource
from agentroute.resolution.strategies.base import ResolutionStrategy, StrategyContext, make_result

logger = logging.getLogger(__name__)

CONTEXT_CONFIDENCE_FLOOR = 0.8
PROJECT_TYPE_CONFIDENCE = 0.85


def infer_from_category(
    prompt: str,
    available_agents: Collection[str],
    check: CategoryCheck,
) -> ResolutionResult | None:
    if check.agent not in available_agents:
        return None

    for rule in check.rules:
        if rule.pattern.test(prompt):
            return make_result(
                check.agent,
                ResolutionSource.INTENT,
                rule.confidence,
                f"{check.category} pattern detected: {rule.description}",
            )
    return None


def infer_from_context(
    context: ResolutionContext,
    available_agents: Collection[str],
) -> ResolutionResult | None:
    """Infer an agent from the file path, then from the project type.

    A file path match below CONTEXT_CONFIDENCE_FLOOR is discarded rather
    than returned at low confidence.
    """
    if context.file_path:
        path = context.file_path.replace("\\", "/")
        for rule in CONTEXT_RULES:
            if rule.agent in available_agents and rule.pattern.test(path):
                if rule.confidence >= CONTEXT_CONFIDENCE_FLOOR:
                    return make_result(
                        rule.agent,
                        ResolutionSource.CONTEXT,
                        rule.confidence,
                        f"Inferred from file path: {context.file_path}",
                    )
                logger.debug(
                    f"Context match {rule.agent} ({rule.confidence}) below "
                    f"{CONTEXT_CONFIDENCE_FLOOR}, ignoring file path"
                )
                break

    if context.project_type == "infrastructure" and INFRASTRUCTURE_AGENT in available_agents:
        return make_result(
            INFRASTRUCTURE_AGENT,
            ResolutionSource.CONTEXT,
            PROJECT_TYPE_CONFIDENCE,
            f"Inferred from project type: {context.project_type}",
        )

    return None


def default_fallback(available_agents: Collection[str]) -> ResolutionResult:
    if DEFAULT_ACT_AGENT in available_agents:
        return make_result(
            DEFAULT_ACT_AGENT,
            ResolutionSource.DEFAULT,
            1.0,
            f"ACT mode default: {DEFAULT_ACT_AGENT} (no specific intent detected)",
        )

    if available_agents:
        first = next(iter(available_agents))
        return make_result(
            first,
            ResolutionSource.DEFAULT,
            0.8,
            f"ACT mode fallback: {first} (default agent excluded)",
        )

    return make_result(
        DEFAULT_ACT_AGENT,
        ResolutionSource.DEFAULT,
        0.5,
        f"ACT mode fallback: {DEFAULT_ACT_AGENT} (no agents available)",
    )


class ActAgentStrategy(ResolutionStrategy):
    def __init__(self, load_project_config: LoadProjectConfigFn) -> None:
        self._load_project_config = load_project_config

    async def resolve(self, ctx: StrategyContext) -> ResolutionResult:
        available = ctx.available_agents

        explicit = parse_explicit_request(ctx.prompt, available, ACT_PRIMARY_AGENTS)
        if explicit:
            logger.debug(f"Explicit ACT agent request: {explicit}")
            return make_result(
                explicit,
                ResolutionSource.EXPLICIT,
                1.0,
                f"Explicit request for {explicit} in prompt",
            )

        recommended = (ctx.recommended_agent or "").strip().lower()
        if recommended and recommended in available:
            logger.debug(f"Using recommended agent from PLAN: {recommended}")
            return make_result(
                recommended,
                ResolutionSource.CONFIG,
                1.0,
                f"Using recommended agent from PLAN mode: {recommended}",
            )

        from_config = await self._from_project_config(available)
        if from_config:
            logger.debug(f"Agent from project config: {from_config.agent_name}")
            return from_config

        if is_meta_discussion(ctx.prompt):
            logger.debug("Meta-agent discussion detected, skipping intent patterns")
        else:
            for check in INTENT_CATEGORY_CHECKS:
                result = infer_from_category(ctx.prompt, available, check)
                if result:
                    logger.debug(f"Intent pattern match: {result.agent_name} ({result.reason})")
                    return result

        if ctx.context is not None:
            from_context = infer_from_context(ctx.context, available)
            if from_context:
                logger.debug(f"Context-based agent: {from_context.agent_name}")
                return from_context

        return default_fallback(available)

    async def _from_project_config(self, available: Collection[str]) -> ResolutionResult | None:
        try:
            config = await self._load_project_config()
        except Exception as e:
            logger.warning(f"Failed to load project config: {e}")
            return None

        if config is None or not config.primary_agent:
            return None

        agent_name = normalize_agent_name(config.primary_agent)
        if agent_name in available:
            return make_result(
                agent_name,
                ResolutionSource.CONFIG,
                1.0,
                f"Configured in project: {agent_name}",
            )

        logger.warning(
            f"Configured agent '{config.primary_agent}' not found in registry. "
            f"Available: {', '.join(available)}"
        )
        return None
