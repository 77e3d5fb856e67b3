"""Per-phase agent resolution strategies."""

from agentroute.resolution.strategies.base import (
    ResolutionStrategy,
    StrategyContext,
    make_result,
)
from agentroute.resolution.strategies.evaluation import EvalAgentStrategy
from agentroute.resolution.strategies.execution import ActAgentStrategy
from agentroute.resolution.strategies.planning import PlanAgentStrategy

__all__ = [
    "ActAgentStrategy",
    "EvalAgentStrategy",
    "PlanAgentStrategy",
    "ResolutionStrategy",
    "StrategyContext",
    "make_result",
]
