"""Pydantic models for the agent registry."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AgentEntry(BaseModel):
    """Metadata for a single agent."""

    name: str  # kebab-case id, e.g. "backend-developer"
    display_name: str
    description: str = ""
    phases: list[str] = Field(default_factory=list)  # subset of "plan" | "act" | "eval"
    primary: bool = True
    keywords: list[str] = Field(default_factory=list)
