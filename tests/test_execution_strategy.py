"""Tests for the ACT phase: signal priority, intent categories, context, defaults."""

import logging
from unittest.mock import AsyncMock

import pytest

from agentroute.patterns import INTENT_CATEGORY_CHECKS
from agentroute.resolution import (
    ALL_PRIMARY_AGENTS,
    AgentResolver,
    Phase,
    ProjectConfig,
    ResolutionContext,
    ResolutionSource,
)
from agentroute.resolution.strategies.execution import (
    default_fallback,
    infer_from_category,
    infer_from_context,
)


def _resolver(agents=ALL_PRIMARY_AGENTS, config: ProjectConfig | None = None) -> AgentResolver:
    return AgentResolver(AsyncMock(return_value=config), AsyncMock(return_value=list(agents)))


def _without(*excluded: str) -> list[str]:
    return [a for a in ALL_PRIMARY_AGENTS if a not in excluded]


class TestPriority:
    @pytest.mark.asyncio
    async def test_explicit_beats_recommended_config_and_intent(self):
        resolver = _resolver(config=ProjectConfig(primary_agent="mobile-developer"))
        result = await resolver.resolve(
            Phase.ACT, "backend-developer로 작업해, eslint 설정도", recommended_agent="data-engineer"
        )
        assert result.agent_name == "backend-developer"
        assert result.source == ResolutionSource.EXPLICIT
        assert result.confidence == 1.0

    @pytest.mark.asyncio
    async def test_recommended_beats_config(self):
        resolver = _resolver(config=ProjectConfig(primary_agent="mobile-developer"))
        result = await resolver.resolve(Phase.ACT, "hello", recommended_agent=" Data-Engineer ")
        assert result.agent_name == "data-engineer"
        assert result.source == ResolutionSource.CONFIG
        assert "recommended agent from PLAN" in result.reason

    @pytest.mark.asyncio
    async def test_unavailable_recommendation_is_skipped(self):
        resolver = _resolver(agents=_without("data-engineer"))
        result = await resolver.resolve(Phase.ACT, "hello", recommended_agent="data-engineer")
        assert result.agent_name == "frontend-developer"
        assert result.source == ResolutionSource.DEFAULT

    @pytest.mark.asyncio
    async def test_config_beats_intent(self):
        resolver = _resolver(config=ProjectConfig(primary_agent="Backend Developer"))
        result = await resolver.resolve(Phase.ACT, "eslint 설정 변경해줘")
        assert result.agent_name == "backend-developer"
        assert result.source == ResolutionSource.CONFIG
        assert result.reason == "Configured in project: backend-developer"

    @pytest.mark.asyncio
    async def test_config_accepts_display_name_with_slash(self):
        from agentroute.registry import AgentRegistry

        display_name = AgentRegistry.load().get("ai-ml-engineer").display_name
        resolver = _resolver(config=ProjectConfig(primary_agent=display_name))
        result = await resolver.resolve(Phase.ACT, "hello")
        assert result.agent_name == "ai-ml-engineer"
        assert result.source == ResolutionSource.CONFIG

    @pytest.mark.asyncio
    async def test_unknown_configured_agent_warns_and_continues(self, caplog):
        resolver = _resolver(config=ProjectConfig(primary_agent="wizard"))
        with caplog.at_level(logging.WARNING):
            result = await resolver.resolve(Phase.ACT, "eslint 설정 변경해줘")
        assert result.agent_name == "tooling-engineer"
        assert "wizard" in caplog.text

    @pytest.mark.asyncio
    async def test_config_failure_degrades_to_intent(self, list_agents):
        resolver = AgentResolver(AsyncMock(side_effect=OSError("disk")), list_agents)
        result = await resolver.resolve(Phase.ACT, "terraform 모듈 작성")
        assert result.agent_name == "platform-engineer"
        assert result.source == ResolutionSource.INTENT


class TestIntent:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "prompt,agent,confidence",
        [
            ("MCP 서버 만들어줘", "agent-architect", 0.95),
            ("eslint 설정 변경해줘", "tooling-engineer", 0.95),
            ("terraform 모듈 작성", "platform-engineer", 0.95),
            ("PostgreSQL database 스키마 설계", "data-engineer", 0.9),
            ("pytorch로 분류 모델 학습", "ai-ml-engineer", 0.95),
            ("NestJS로 REST API 만들어줘", "backend-developer", 0.95),
            ("React Native 앱 화면 구현", "mobile-developer", 0.95),
        ],
    )
    async def test_categories(self, resolver, prompt, agent, confidence):
        result = await resolver.resolve(Phase.ACT, prompt)
        assert result.agent_name == agent
        assert result.source == ResolutionSource.INTENT
        assert result.confidence == confidence

    @pytest.mark.asyncio
    async def test_own_config_file_is_tooling(self, resolver):
        result = await resolver.resolve(Phase.ACT, "agentroute.config.ts 수정해줘")
        assert result.agent_name == "tooling-engineer"
        assert result.confidence == 0.98
        assert result.reason == "Tooling pattern detected: agentroute config"

    @pytest.mark.asyncio
    async def test_earlier_category_wins(self, resolver):
        result = await resolver.resolve(Phase.ACT, "eslint 설정 for NestJS")
        assert result.agent_name == "tooling-engineer"

    @pytest.mark.asyncio
    async def test_unavailable_category_is_skipped(self):
        resolver = _resolver(agents=_without("tooling-engineer"))
        result = await resolver.resolve(Phase.ACT, "eslint 설정 for NestJS")
        assert result.agent_name == "backend-developer"
        assert result.source == ResolutionSource.INTENT

    @pytest.mark.asyncio
    async def test_reason_names_category_and_rule(self, resolver):
        result = await resolver.resolve(Phase.ACT, "eslint 설정 변경해줘")
        assert result.reason == "Tooling pattern detected: ESLint config"

    @pytest.mark.asyncio
    async def test_meta_discussion_skips_intent(self, resolver):
        result = await resolver.resolve(Phase.ACT, "Mobile Developer가 매칭되었어")
        assert result.agent_name == "frontend-developer"
        assert result.source == ResolutionSource.DEFAULT

    @pytest.mark.asyncio
    async def test_meta_discussion_still_uses_context(self, resolver):
        result = await resolver.resolve(
            Phase.ACT,
            "Mobile Developer가 매칭되었어",
            ResolutionContext(file_path="infra/main.tf"),
        )
        assert result.agent_name == "platform-engineer"
        assert result.source == ResolutionSource.CONTEXT

    @pytest.mark.unit
    def test_infer_from_category_requires_available_agent(self):
        tooling = next(c for c in INTENT_CATEGORY_CHECKS if c.agent == "tooling-engineer")
        assert infer_from_category("eslint", ["backend-developer"], tooling) is None
        result = infer_from_category("eslint", ["tooling-engineer"], tooling)
        assert result is not None
        assert result.confidence == 0.95


class TestContext:
    @pytest.mark.asyncio
    async def test_file_path_match(self, resolver):
        result = await resolver.resolve(
            Phase.ACT, "이 파일 수정해", ResolutionContext(file_path="db/schema.prisma")
        )
        assert result.agent_name == "data-engineer"
        assert result.source == ResolutionSource.CONTEXT
        assert result.confidence == 0.95
        assert result.reason == "Inferred from file path: db/schema.prisma"

    @pytest.mark.asyncio
    async def test_low_confidence_path_falls_through_to_default(self, resolver):
        result = await resolver.resolve(
            Phase.ACT, "이 파일 수정해", ResolutionContext(file_path="/x/Component.tsx")
        )
        assert result.agent_name == "frontend-developer"
        assert result.source == ResolutionSource.DEFAULT
        assert result.confidence == 1.0

    @pytest.mark.unit
    def test_low_confidence_path_then_project_type(self):
        context = ResolutionContext(file_path="deploy/values.yaml", project_type="infrastructure")
        result = infer_from_context(context, ALL_PRIMARY_AGENTS)
        assert result is not None
        assert result.agent_name == "devops-engineer"
        assert result.confidence == 0.85

    @pytest.mark.unit
    def test_project_type_requires_devops_available(self):
        context = ResolutionContext(project_type="infrastructure")
        assert infer_from_context(context, _without("devops-engineer")) is None

    @pytest.mark.unit
    def test_windows_separators(self):
        context = ResolutionContext(file_path="charts\\api\\templates\\deploy.yaml")
        result = infer_from_context(context, ALL_PRIMARY_AGENTS)
        assert result is not None
        assert result.agent_name == "platform-engineer"
        assert result.reason == "Inferred from file path: charts\\api\\templates\\deploy.yaml"

    @pytest.mark.unit
    def test_rule_for_unavailable_agent_is_skipped(self):
        context = ResolutionContext(file_path="infra/main.tf")
        assert infer_from_context(context, _without("platform-engineer")) is None

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        context = ResolutionContext.model_validate(
            {"filePath": "Dockerfile", "projectType": "web"}
        )
        assert context.file_path == "Dockerfile"
        assert context.project_type == "web"


class TestDefault:
    @pytest.mark.unit
    def test_default_agent(self):
        result = default_fallback(ALL_PRIMARY_AGENTS)
        assert result.agent_name == "frontend-developer"
        assert result.confidence == 1.0

    @pytest.mark.unit
    def test_first_available_when_default_excluded(self):
        result = default_fallback(["data-engineer", "backend-developer"])
        assert result.agent_name == "data-engineer"
        assert result.source == ResolutionSource.DEFAULT
        assert result.confidence == 0.8

    @pytest.mark.unit
    def test_empty_catalog(self):
        result = default_fallback([])
        assert result.agent_name == "frontend-developer"
        assert result.confidence == 0.5

    @pytest.mark.asyncio
    async def test_everything_excluded(self):
        resolver = _resolver(
            agents=["frontend-developer"],
            config=ProjectConfig(exclude_agents=["frontend-developer"]),
        )
        result = await resolver.resolve(Phase.ACT, "hello")
        assert result.agent_name == "frontend-developer"
        assert result.source == ResolutionSource.DEFAULT
        assert result.confidence == 0.5
