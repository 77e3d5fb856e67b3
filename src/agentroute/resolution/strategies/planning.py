"""PLAN phase: choose between the solution architect and the technical planner.

Priority:
    1. explicit request for a PLAN agent
    2. architecture vocabulary only  -> solution-architect (0.9)
    3. planning vocabulary only      -> technical-planner (0.9)
    4. both                          -> solution-architect (0.85, architecture wins)
    5. neither                       -> solution-architect, then technical-planner
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from agentroute.patterns import rx
from agentroute.resolution.agents import (
    ARCHITECTURE_AGENT,
    DEFAULT_ACT_AGENT,
    PLAN_PRIMARY_AGENTS,
    PLANNING_AGENT,
)
from agentroute.resolution.explicit import parse_explicit_request
from agentroute.resolution.models import ResolutionResult, ResolutionSource
from agentroute.resolution.strategies.base import ResolutionStrategy, StrategyContext, make_result

logger = logging.getLogger(__name__)

ARCHITECTURE_PATTERN = rx(
    r"아키텍처|architecture|시스템\s*설계|system\s*design|구조|structure|API\s*설계"
    r"|마이크로서비스|microservice|기술\s*선택|technology"
)

PLANNING_PATTERN = rx(
    r"계획|plan|단계|step|태스크|task|TDD|구현\s*순서|implementation\s*order|리팩토링|refactor"
)


def choose_plan_agent(prompt: str, available_agents: Collection[str]) -> ResolutionResult:
    has_architecture = ARCHITECTURE_PATTERN.test(prompt)
    has_planning = PLANNING_PATTERN.test(prompt)

    if has_architecture and not has_planning and ARCHITECTURE_AGENT in available_agents:
        return make_result(
            ARCHITECTURE_AGENT,
            ResolutionSource.INTENT,
            0.9,
            "Architecture-focused task detected in PLAN mode",
        )

    if has_planning and not has_architecture and PLANNING_AGENT in available_agents:
        return make_result(
            PLANNING_AGENT,
            ResolutionSource.INTENT,
            0.9,
            "Planning/implementation-focused task detected in PLAN mode",
        )

    if has_architecture and has_planning and ARCHITECTURE_AGENT in available_agents:
        return make_result(
            ARCHITECTURE_AGENT,
            ResolutionSource.INTENT,
            0.85,
            "Both architecture and planning detected; architecture takes precedence",
        )

    if ARCHITECTURE_AGENT in available_agents:
        default_agent = ARCHITECTURE_AGENT
    elif PLANNING_AGENT in available_agents:
        default_agent = PLANNING_AGENT
    else:
        default_agent = DEFAULT_ACT_AGENT

    return make_result(
        default_agent,
        ResolutionSource.DEFAULT,
        1.0,
        f"PLAN mode default: {default_agent} for high-level design",
    )


class PlanAgentStrategy(ResolutionStrategy):
    async def resolve(self, ctx: StrategyContext) -> ResolutionResult:
        explicit = parse_explicit_request(ctx.prompt, ctx.available_agents, PLAN_PRIMARY_AGENTS)
        if explicit:
            logger.debug(f"Explicit PLAN agent request: {explicit}")
            return make_result(
                explicit,
                ResolutionSource.EXPLICIT,
                1.0,
                f"Explicit request for {explicit} in prompt",
            )

        result = choose_plan_agent(ctx.prompt, ctx.available_agents)
        logger.debug(f"PLAN agent resolved: {result.agent_name} ({result.reason})")
        return result
