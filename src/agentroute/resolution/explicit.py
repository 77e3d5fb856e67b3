"""Explicit-request parsing and meta-discussion detection."""

from __future__ import annotations

from collections.abc import Collection

from agentroute.patterns import EXPLICIT_PATTERNS, META_DISCUSSION_PATTERNS


def parse_explicit_request(
    prompt: str,
    available_agents: Collection[str],
    allowed_agents: Collection[str],
) -> str | None:
    """Return the agent id the prompt asks for by name, or None.

    A candidate counts only if it is both in the available catalog and in
    the phase's allowed set; otherwise scanning continues.
    """
    for pattern in EXPLICIT_PATTERNS:
        for candidate in pattern.extract(prompt):
            agent_name = candidate.lower()
            if agent_name in available_agents and agent_name in allowed_agents:
                return agent_name
    return None


def is_meta_discussion(prompt: str) -> bool:
    """True when the prompt talks about agents/resolution rather than asking for work."""
    return any(pattern.test(prompt) for pattern in META_DISCUSSION_PATTERNS)
