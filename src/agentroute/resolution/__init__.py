"""Primary-agent resolution: phase strategies behind a single resolver."""

from agentroute.resolution.agents import (
    ACT_PRIMARY_AGENTS,
    ALL_PRIMARY_AGENTS,
    DEFAULT_ACT_AGENT,
    EVAL_PRIMARY_AGENT,
    PLAN_PRIMARY_AGENTS,
)
from agentroute.resolution.catalog import CatalogAccessor
from agentroute.resolution.explicit import is_meta_discussion, parse_explicit_request
from agentroute.resolution.models import (
    Phase,
    ProjectConfig,
    ResolutionContext,
    ResolutionResult,
    ResolutionSource,
)
from agentroute.resolution.resolver import AgentResolver

__all__ = [
    "ACT_PRIMARY_AGENTS",
    "ALL_PRIMARY_AGENTS",
    "DEFAULT_ACT_AGENT",
    "EVAL_PRIMARY_AGENT",
    "PLAN_PRIMARY_AGENTS",
    "AgentResolver",
    "CatalogAccessor",
    "Phase",
    "ProjectConfig",
    "ResolutionContext",
    "ResolutionResult",
    "ResolutionSource",
    "is_meta_discussion",
    "parse_explicit_request",
]
