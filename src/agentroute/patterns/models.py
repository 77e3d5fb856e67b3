"""Rule types shared by every pattern table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextPattern(Protocol):
    """Anything that can answer whether it occurs in a piece of text."""

    def test(self, text: str) -> bool: ...


@dataclass(frozen=True)
class RegexPattern:
    """Case-insensitive regular expression searched anywhere in the text.

    Expressions in the tables avoid unbounded gaps (``.*``) and nested
    unbounded repetition so a search stays linear in the input length.
    """

    regex: re.Pattern[str]

    def test(self, text: str) -> bool:
        return self.regex.search(text) is not None

    @property
    def source(self) -> str:
        return self.regex.pattern


def rx(expression: str, flags: int = re.IGNORECASE) -> RegexPattern:
    """Compile ``expression`` into a :class:`RegexPattern`."""
    return RegexPattern(re.compile(expression, flags))


@dataclass(frozen=True)
class PatternRule:
    """One intent rule: a pattern and the confidence it carries when it matches."""

    pattern: TextPattern
    confidence: float
    description: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")


@dataclass(frozen=True)
class CategoryCheck:
    """Maps an ordered rule list to the agent that owns the category."""

    agent: str
    rules: tuple[PatternRule, ...]
    category: str


@dataclass(frozen=True)
class ContextRule:
    """File path rule used for context-based inference."""

    pattern: TextPattern
    agent: str
    confidence: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")


@dataclass(frozen=True)
class ExplicitPattern:
    """Surface form that names an agent directly; group 1 captures the agent id."""

    regex: re.Pattern[str]
    description: str

    def extract(self, text: str) -> list[str]:
        """Return every captured agent id, in order of appearance."""
        return [m.group(1) for m in self.regex.finditer(text) if m.group(1)]
