"""AgentRegistry: load and query the agent catalog."""

from __future__ import annotations

import json
import logging
import re
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from agentroute.registry.models import AgentEntry

logger = logging.getLogger(__name__)

USER_AGENTS_DIR = Path(".ai-rules") / "agents"

_INVALID_CHARS = re.compile(r"[^a-z0-9\s/-]")
_SEPARATORS = re.compile(r"[\s/-]+")


def normalize_agent_name(name: str) -> str:
    """Normalize a display name or loosely written id to kebab-case.

    "Backend Developer" -> "backend-developer", "AI/ML Engineer" -> "ai-ml-engineer".
    """
    normalized = _INVALID_CHARS.sub("", name.strip().lower())
    return _SEPARATORS.sub("-", normalized).strip("-")


def _infer_phases(description: str) -> list[str]:
    lowered = description.lower()
    phases: list[str] = []
    if any(kw in lowered for kw in ("architecture", "planning", "plan ")):
        phases.append("plan")
    if any(kw in lowered for kw in ("review", "evaluat", "audit")):
        phases.append("eval")
    if not phases:
        phases = ["act"]
    return phases


def parse_agent_file(json_path: Path) -> AgentEntry | None:
    """Parse a user agent definition (.json).

    Accepts either ``name`` as an id or a display name; the id is always the
    normalized form. Returns None if the file cannot be read or is invalid.
    """
    try:
        data = json.loads(json_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"Skipping agent file {json_path}: {e}")
        return None

    if not isinstance(data, dict):
        return None

    raw_name = data.get("id") or data.get("name") or json_path.stem
    if not isinstance(raw_name, str):
        return None
    name = normalize_agent_name(raw_name)
    if not name:
        return None

    description = data.get("description", "")
    display_name = data.get("display_name") or data.get("displayName") or data.get("name")
    try:
        return AgentEntry(
            name=name,
            display_name=display_name if isinstance(display_name, str) else name,
            description=description if isinstance(description, str) else "",
            phases=data.get("phases") or _infer_phases(str(description)),
            primary=data.get("primary", True),
            keywords=data.get("keywords", []),
        )
    except ValidationError as e:
        logger.debug(f"Skipping agent file {json_path}: {e}")
        return None


def discover_user_agents(project_root: Path) -> list[AgentEntry]:
    """Scan .ai-rules/agents/ for user-defined agents."""
    agents_dir = project_root / USER_AGENTS_DIR
    if not agents_dir.is_dir():
        return []

    entries: list[AgentEntry] = []
    for json_file in sorted(agents_dir.glob("*.json")):
        entry = parse_agent_file(json_file)
        if entry:
            entries.append(entry)
    return entries


class AgentRegistry:
    """Agent catalog loaded from agent-registry.json."""

    def __init__(self, agents: list[AgentEntry]) -> None:
        self._agents = agents
        self._by_name: dict[str, AgentEntry] = {a.name: a for a in agents}

    @classmethod
    def load(cls) -> AgentRegistry:
        """Load from bundled package data."""
        pkg = resources.files("agentroute.registry")
        data = json.loads(pkg.joinpath("agent-registry.json").read_text(encoding="utf-8"))
        return cls._from_dict(data)

    @classmethod
    def load_merged(cls, project_root: Path | None = None) -> AgentRegistry:
        """Load the bundled registry merged with the project's own agents.

        A user agent with the same name replaces the bundled entry in place;
        new user agents are appended.
        """
        bundled = cls.load()
        if project_root is None:
            return bundled

        user_agents = discover_user_agents(project_root)
        if not user_agents:
            return bundled

        merged = list(bundled._agents)
        positions = {a.name: i for i, a in enumerate(merged)}
        for user_agent in user_agents:
            if user_agent.name in positions:
                merged[positions[user_agent.name]] = user_agent
            else:
                positions[user_agent.name] = len(merged)
                merged.append(user_agent)

        logger.debug(f"Merged {len(user_agents)} user agent(s) from {project_root}")
        return cls(merged)

    @classmethod
    def from_json(cls, path: Path) -> AgentRegistry:
        """Load from explicit file path (for testing)."""
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> AgentRegistry:
        return cls([AgentEntry.model_validate(a) for a in data["agents"]])

    def get(self, name: str) -> AgentEntry | None:
        return self._by_name.get(normalize_agent_name(name))

    def all_agents(self) -> list[AgentEntry]:
        return list(self._agents)

    def primary_agent_ids(self) -> list[str]:
        return [a.name for a in self._agents if a.primary]

    def filter_by_phase(self, phase: str) -> list[AgentEntry]:
        return [a for a in self._agents if phase in a.phases]

    def display_info(self, name: str) -> dict[str, str | list[str]] | None:
        """Display name, description and keywords for an agent id, for UI surfaces."""
        entry = self.get(name)
        if entry is None:
            return None
        return {
            "name": entry.name,
            "display_name": entry.display_name,
            "description": entry.description,
            "keywords": list(entry.keywords),
        }
