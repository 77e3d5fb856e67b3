"""Pydantic models and enums for agent resolution."""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Phase(StrEnum):
    PLAN = "plan"
    ACT = "act"
    EVAL = "eval"

    @classmethod
    def parse(cls, value: str) -> Phase:
        """Parse a phase name case-insensitively ("ACT", "execution", "plan"...)."""
        key = value.strip().lower()
        phase = _PHASE_ALIASES.get(key)
        if phase is None:
            raise ValueError(
                f"Unknown phase '{value}' (expected one of: {', '.join(p.value for p in cls)})"
            )
        return phase


_PHASE_ALIASES: dict[str, Phase] = {
    "plan": Phase.PLAN,
    "planning": Phase.PLAN,
    "act": Phase.ACT,
    "execution": Phase.ACT,
    "execute": Phase.ACT,
    "eval": Phase.EVAL,
    "evaluation": Phase.EVAL,
    "evaluate": Phase.EVAL,
}


class ResolutionSource(StrEnum):
    EXPLICIT = "explicit"
    CONFIG = "config"
    CONTEXT = "context"
    INTENT = "intent"
    DEFAULT = "default"


class ResolutionContext(BaseModel):
    """Side-channel hints that don't come from the prompt text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: str | None = Field(
        default=None, validation_alias=AliasChoices("file_path", "filePath")
    )
    project_type: str | None = Field(
        default=None, validation_alias=AliasChoices("project_type", "projectType")
    )


class ProjectConfig(BaseModel):
    """Agent-related project settings (the ``ai`` section of the project config file)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    primary_agent: str | None = Field(
        default=None, validation_alias=AliasChoices("primary_agent", "primaryAgent")
    )
    exclude_agents: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("exclude_agents", "excludeAgents"),
    )

    @field_validator("primary_agent")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class ResolutionResult(BaseModel):
    """Outcome of a single resolution: who, from which source, and why."""

    model_config = ConfigDict(frozen=True)

    agent_name: str
    source: ResolutionSource
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str
