"""Agent registry: bundled catalog plus project-defined agents."""

from agentroute.registry.loader import (
    AgentRegistry,
    discover_user_agents,
    normalize_agent_name,
    parse_agent_file,
)
from agentroute.registry.models import AgentEntry

__all__ = [
    "AgentEntry",
    "AgentRegistry",
    "discover_user_agents",
    "normalize_agent_name",
    "parse_agent_file",
]
