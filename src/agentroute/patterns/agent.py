"""Agent-architect intent rules: AI agents, MCP servers, workflow automation.

Checked first among the categories so that prompts mentioning agent names
("Mobile Developer agent") are claimed here before the greedier mobile or
backend rules see them.

Confidence levels:
    0.95  MCP and agent-framework vocabulary
    0.90  agent creation, agent JSON definitions, workflow/LLM orchestration
    0.85  generic automation, tool calling, multi-agent
"""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

AGENT_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"MCP\s*(?:서버|server|tool|도구)"), 0.95, "MCP Server"),
    PatternRule(rx(r"model\s*context\s*protocol"), 0.95, "Model Context Protocol"),
    PatternRule(rx(r"에이전트\s*(?:설계|개발|구현|아키텍처)"), 0.95, "Korean: Agent Development"),
    PatternRule(rx(r"agent\s*(?:design|develop|architect|framework)"), 0.95, "Agent Development"),
    PatternRule(rx(r"claude\s*(?:code|에이전트|agent|sdk)"), 0.95, "Claude Agent"),
    PatternRule(rx(r"agent.?를?\s*만[들드]"), 0.9, "Korean: Creating Agent (with English)"),
    PatternRule(rx(r"에이전트\s*만[들드]"), 0.9, "Korean: Creating Agent (native)"),
    PatternRule(
        rx(r"\.json\s*(?:에이전트|agent)|agent.{0,80}\.json"), 0.9, "Agent JSON Definition"
    ),
    PatternRule(rx(r"specialist.{0,80}agent|agent.{0,80}specialist"), 0.9, "Specialist Agent"),
    PatternRule(
        rx(r"primary.{0,80}agent|agent.{0,80}resolver|agent.{0,80}select"),
        0.9,
        "Agent Resolution",
    ),
    PatternRule(rx(r"워크플로우\s*(?:자동화|설계|구현)"), 0.9, "Korean: Workflow Automation"),
    PatternRule(rx(r"workflow\s*(?:automat|design|orchestrat)"), 0.9, "Workflow Automation"),
    PatternRule(rx(r"LLM\s*(?:체인|chain|오케스트레이션|orchestrat)"), 0.9, "LLM Orchestration"),
    PatternRule(
        rx(r"AI\s*에이전트\s*(?:설계|개발)|AI\s*agent\s*(?:design|develop)"),
        0.9,
        "AI Agent Design",
    ),
    PatternRule(rx(r"자동화\s*(?:파이프라인|pipeline|시스템)"), 0.85, "Automation Pipeline"),
    PatternRule(rx(r"tool\s*(?:use|calling|호출)|function\s*calling"), 0.85, "Tool Calling"),
    PatternRule(rx(r"멀티\s*에이전트|multi.?agent"), 0.85, "Multi-Agent"),
)
