"""Pattern tables used for intent, context, explicit-request and meta-discussion matching."""

from agentroute.patterns.agent import AGENT_INTENT_RULES
from agentroute.patterns.ai_ml import AI_ML_INTENT_RULES
from agentroute.patterns.backend import BACKEND_INTENT_RULES
from agentroute.patterns.checks import INTENT_CATEGORY_CHECKS
from agentroute.patterns.context import CONTEXT_RULES
from agentroute.patterns.data import DATA_INTENT_RULES
from agentroute.patterns.explicit import EXPLICIT_PATTERNS
from agentroute.patterns.meta import META_DISCUSSION_PATTERNS
from agentroute.patterns.mobile import MOBILE_INTENT_RULES
from agentroute.patterns.models import (
    CategoryCheck,
    ContextRule,
    ExplicitPattern,
    PatternRule,
    RegexPattern,
    TextPattern,
    rx,
)
from agentroute.patterns.platform import PLATFORM_INTENT_RULES
from agentroute.patterns.tooling import TOOLING_INTENT_RULES

__all__ = [
    "AGENT_INTENT_RULES",
    "AI_ML_INTENT_RULES",
    "BACKEND_INTENT_RULES",
    "CONTEXT_RULES",
    "DATA_INTENT_RULES",
    "EXPLICIT_PATTERNS",
    "INTENT_CATEGORY_CHECKS",
    "META_DISCUSSION_PATTERNS",
    "MOBILE_INTENT_RULES",
    "PLATFORM_INTENT_RULES",
    "TOOLING_INTENT_RULES",
    "CategoryCheck",
    "ContextRule",
    "ExplicitPattern",
    "PatternRule",
    "RegexPattern",
    "TextPattern",
    "rx",
]
