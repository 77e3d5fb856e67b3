"""Agent ids the resolver knows about, per phase."""

from __future__ import annotations

PLAN_PRIMARY_AGENTS: tuple[str, ...] = (
    "solution-architect",
    "technical-planner",
)

ACT_PRIMARY_AGENTS: tuple[str, ...] = (
    "tooling-engineer",
    "data-engineer",
    "mobile-developer",
    "frontend-developer",
    "backend-developer",
    "devops-engineer",
    "agent-architect",
    "platform-engineer",
    "ai-ml-engineer",
)

EVAL_PRIMARY_AGENT = "code-reviewer"

# Kept separate from ACT_PRIMARY_AGENTS[0]: list order is pattern priority,
# not "the default".
DEFAULT_ACT_AGENT = "frontend-developer"

ARCHITECTURE_AGENT = "solution-architect"
PLANNING_AGENT = "technical-planner"
INFRASTRUCTURE_AGENT = "devops-engineer"

ALL_PRIMARY_AGENTS: tuple[str, ...] = (
    *PLAN_PRIMARY_AGENTS,
    *ACT_PRIMARY_AGENTS,
    EVAL_PRIMARY_AGENT,
)
