"""Ordered category checks for ACT-phase intent matching.

Order is priority; the first category with any matching rule wins:

1. agent-architect   MCP, AI agents, workflows (first, so agent-name mentions land here)
2. tooling-engineer  build tools, linters, bundlers
3. platform-engineer IaC, Kubernetes, cloud infrastructure
4. data-engineer     databases, schemas, migrations
5. ai-ml-engineer    ML frameworks, LLMs, embeddings
6. backend-developer APIs, servers, authentication
7. mobile-developer  React Native, Flutter, iOS/Android (last, its rules are greedy)
"""

from __future__ import annotations

from agentroute.patterns.agent import AGENT_INTENT_RULES
from agentroute.patterns.ai_ml import AI_ML_INTENT_RULES
from agentroute.patterns.backend import BACKEND_INTENT_RULES
from agentroute.patterns.data import DATA_INTENT_RULES
from agentroute.patterns.mobile import MOBILE_INTENT_RULES
from agentroute.patterns.models import CategoryCheck
from agentroute.patterns.platform import PLATFORM_INTENT_RULES
from agentroute.patterns.tooling import TOOLING_INTENT_RULES

INTENT_CATEGORY_CHECKS: tuple[CategoryCheck, ...] = (
    CategoryCheck("agent-architect", AGENT_INTENT_RULES, "Agent"),
    CategoryCheck("tooling-engineer", TOOLING_INTENT_RULES, "Tooling"),
    CategoryCheck("platform-engineer", PLATFORM_INTENT_RULES, "Platform"),
    CategoryCheck("data-engineer", DATA_INTENT_RULES, "Data"),
    CategoryCheck("ai-ml-engineer", AI_ML_INTENT_RULES, "AI/ML"),
    CategoryCheck("backend-developer", BACKEND_INTENT_RULES, "Backend"),
    CategoryCheck("mobile-developer", MOBILE_INTENT_RULES, "Mobile"),
)
