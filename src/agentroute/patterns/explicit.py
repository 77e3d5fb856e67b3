"""Surface forms for a user naming an agent directly.

Examples:
    "backend-developer로 작업해"   -> backend-developer
    "use frontend-developer agent" -> frontend-developer
    "as data-engineer"             -> data-engineer
    "agent-architect agent로"      -> agent-architect

Agent ids are kebab-case. The capture is fenced by look-arounds and each
segment is length-bounded, so a long run like ``a-a-a-...`` is scanned once
rather than re-tried from every hyphen.
"""

from __future__ import annotations

import re

from agentroute.patterns.models import ExplicitPattern

AGENT_ID = r"(?<![A-Za-z0-9_-])([A-Za-z0-9]{1,40}(?:-[A-Za-z0-9]{1,40}){1,5})"
_ID_END = r"(?![A-Za-z0-9_-])"

EXPLICIT_PATTERNS: tuple[ExplicitPattern, ...] = (
    ExplicitPattern(
        re.compile(AGENT_ID + r"(?:로|으로)\s*(?:작업|개발|해)", re.IGNORECASE),
        "Korean: <agent>로 작업해",
    ),
    ExplicitPattern(
        re.compile(r"(?<![a-z])(?:use|using)\s+" + AGENT_ID + _ID_END, re.IGNORECASE),
        "use <agent> [agent]",
    ),
    ExplicitPattern(
        re.compile(r"(?<![a-z])as\s+" + AGENT_ID + _ID_END, re.IGNORECASE),
        "as <agent>",
    ),
    ExplicitPattern(
        re.compile(AGENT_ID + r"\s+agent(?:로|으로)", re.IGNORECASE),
        "<agent> agent로",
    ),
)
