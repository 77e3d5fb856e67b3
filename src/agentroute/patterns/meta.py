"""Rules for prompts that discuss agents instead of requesting work from one.

    "Mobile Developer가 매칭되었어"              -> discussing an agent name
    "Frontend Developer Agent가 사용되고 있어"   -> discussing an agent name
    "Primary Agent 선택 로직 점검"               -> discussing the resolver itself

"primary agent resolver 코드 수정" is implementation work and is not matched:
the primary-agent rule needs selection/system vocabulary right after it.
"""

from __future__ import annotations

from agentroute.patterns.models import TextPattern, rx

META_DISCUSSION_PATTERNS: tuple[TextPattern, ...] = (
    # Agent label followed by a Korean subject/object/topic particle
    rx(
        r"(?:mobile|frontend|backend|data|platform|devops|ai-?ml).?(?:developer|engineer)"
        r"\s*(?:가|이|를|은|는|로|에|의|와|과)"
    ),
    rx(
        r"(?:agent|에이전트)\s*(?:매칭|호출|선택|resolution|matching|selection|추천|recommendation)"
    ),
    rx(r"primary\s*agent\s*(?:선택|매칭|시스템|system)"),
    rx(r"(?:agent|에이전트)\s*(?:활성화|activation|호출|invocation|파이프라인|pipeline)"),
    rx(r"(?:agent|에이전트).{0,20}(?:버그|bug|문제|issue|오류|error|잘못|wrong)"),
)
