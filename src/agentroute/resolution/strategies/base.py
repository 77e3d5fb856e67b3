"""Contract shared by the per-phase resolution strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from agentroute.resolution.models import ResolutionContext, ResolutionResult, ResolutionSource


@dataclass(frozen=True)
class StrategyContext:
    prompt: str
    available_agents: tuple[str, ...]
    context: ResolutionContext | None = None
    recommended_agent: str | None = None


class ResolutionStrategy(ABC):
    """Resolves the primary agent for one phase."""

    @abstractmethod
    async def resolve(self, ctx: StrategyContext) -> ResolutionResult: ...


def make_result(
    agent_name: str,
    source: ResolutionSource,
    confidence: float,
    reason: str,
) -> ResolutionResult:
    return ResolutionResult(
        agent_name=agent_name,
        source=source,
        confidence=confidence,
        reason=reason,
    )
