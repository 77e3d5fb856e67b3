"""EVAL phase: every evaluation goes to the code reviewer."""

from __future__ import annotations

from agentroute.resolution.agents import EVAL_PRIMARY_AGENT
from agentroute.resolution.models import ResolutionResult, ResolutionSource
from agentroute.resolution.strategies.base import ResolutionStrategy, StrategyContext, make_result


class EvalAgentStrategy(ResolutionStrategy):
    """Ignores prompt, config, context and recommendations alike."""

    async def resolve(self, ctx: StrategyContext) -> ResolutionResult:
        return make_result(
            EVAL_PRIMARY_AGENT,
            ResolutionSource.DEFAULT,
            1.0,
            f"EVAL mode always uses {EVAL_PRIMARY_AGENT}",
        )
