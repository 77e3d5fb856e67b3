"""End-to-end tests for AgentResolver across phases."""

import logging
import time
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from agentroute.resolution import (
    ALL_PRIMARY_AGENTS,
    AgentResolver,
    Phase,
    ProjectConfig,
    ResolutionContext,
    ResolutionResult,
    ResolutionSource,
)

ADVERSARIAL_PROMPTS = [
    "a" * 50_000,
    "a-" * 25_000,
    "-" * 50_000,
    " " * 50_000,
    "agent " * 8_334,
    "primary " * 6_250,
    "use " * 12_500,
    "에이전트 " * 10_000,
    "tsconfig" + "." * 50_000,
    "k8s " * 12_500,
]


class TestScenarios:
    @pytest.mark.asyncio
    async def test_planning_architecture(self, resolver):
        result = await resolver.resolve(Phase.PLAN, "시스템 아키텍처 설계해줘")
        assert result.agent_name == "solution-architect"
        assert result.source == ResolutionSource.INTENT
        assert result.confidence == pytest.approx(0.9)

    @pytest.mark.asyncio
    async def test_execution_tooling_override(self):
        resolver = AgentResolver(
            AsyncMock(return_value=None),
            AsyncMock(return_value=["tooling-engineer", "backend-developer"]),
        )
        result = await resolver.resolve(Phase.ACT, "eslint 설정 변경해줘")
        assert result.agent_name == "tooling-engineer"
        assert result.source == ResolutionSource.INTENT

    @pytest.mark.asyncio
    async def test_context_below_threshold(self, resolver):
        result = await resolver.resolve(
            Phase.ACT, "이 파일 수정해", ResolutionContext(file_path="/x/Component.tsx")
        )
        assert result.source == ResolutionSource.DEFAULT
        assert result.source != ResolutionSource.CONTEXT


class TestTotality:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("phase", list(Phase))
    @pytest.mark.parametrize("prompt", ["", "   ", "\n\t", "?", "안녕"])
    async def test_trivial_prompts(self, resolver, phase, prompt):
        result = await resolver.resolve(phase, prompt)
        assert result.agent_name
        assert 0.0 <= result.confidence <= 1.0

    @pytest.mark.asyncio
    async def test_none_prompt_treated_as_empty(self, resolver):
        result = await resolver.resolve(Phase.ACT, None)  # type: ignore[arg-type]
        assert result.agent_name == "frontend-developer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("phase", list(Phase))
    @pytest.mark.parametrize("prompt", ADVERSARIAL_PROMPTS)
    async def test_adversarial_prompts_finish_quickly(self, resolver, phase, prompt):
        start = time.perf_counter()
        result = await resolver.resolve(
            phase, prompt, ResolutionContext(file_path=prompt[:10_000])
        )
        elapsed = time.perf_counter() - start
        assert result.agent_name
        assert elapsed < 2.0

    @pytest.mark.asyncio
    async def test_listing_and_config_both_failing(self):
        resolver = AgentResolver(
            AsyncMock(side_effect=RuntimeError("config")),
            AsyncMock(side_effect=RuntimeError("registry")),
        )
        for phase in Phase:
            result = await resolver.resolve(phase, "eslint 설정 변경해줘")
            assert result.agent_name in ALL_PRIMARY_AGENTS


class TestInvariants:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "prompt",
        [
            "eslint 설정 변경해줘",
            "terraform 모듈 작성",
            "use data-engineer",
            "NestJS로 REST API 만들어줘",
            "hello",
        ],
    )
    async def test_excluded_agent_never_returned(self, list_agents, prompt):
        excluded = ["tooling-engineer", "platform-engineer", "data-engineer", "backend-developer"]
        resolver = AgentResolver(
            AsyncMock(return_value=ProjectConfig(exclude_agents=excluded)), list_agents
        )
        for phase in Phase:
            result = await resolver.resolve(
                phase, prompt, ResolutionContext(file_path="infra/main.tf")
            )
            assert result.agent_name not in excluded

    @pytest.mark.asyncio
    async def test_resolution_is_deterministic(self, resolver):
        prompt = "eslint 설정 for NestJS with terraform"
        results = {(await resolver.resolve(Phase.ACT, prompt)).agent_name for _ in range(5)}
        assert results == {"tooling-engineer"}

    @pytest.mark.asyncio
    async def test_catalog_listed_once_per_resolution(self, resolver, list_agents):
        await resolver.resolve(Phase.ACT, "hello")
        assert list_agents.await_count == 1

    @pytest.mark.asyncio
    async def test_resolution_logged_at_debug(self, resolver, caplog):
        with caplog.at_level(logging.DEBUG, logger="agentroute"):
            await resolver.resolve(Phase.ACT, "eslint 설정 변경해줘")
        assert "[ACT] Resolved agent: tooling-engineer" in caplog.text


class TestModels:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,phase",
        [
            ("plan", Phase.PLAN),
            ("PLAN", Phase.PLAN),
            ("planning", Phase.PLAN),
            (" act ", Phase.ACT),
            ("execution", Phase.ACT),
            ("Eval", Phase.EVAL),
            ("evaluation", Phase.EVAL),
        ],
    )
    def test_phase_parse(self, value, phase):
        assert Phase.parse(value) is phase

    @pytest.mark.unit
    def test_phase_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown phase"):
            Phase.parse("deploy")

    @pytest.mark.unit
    @pytest.mark.parametrize("confidence", [-0.01, 1.5])
    def test_result_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            ResolutionResult(
                agent_name="x", source=ResolutionSource.DEFAULT, confidence=confidence, reason=""
            )

    @pytest.mark.unit
    def test_result_is_frozen(self):
        result = ResolutionResult(
            agent_name="x", source=ResolutionSource.DEFAULT, confidence=1.0, reason="r"
        )
        with pytest.raises(ValidationError):
            result.agent_name = "y"  # type: ignore[misc]

    @pytest.mark.unit
    def test_project_config_aliases_and_blank_primary(self):
        config = ProjectConfig.model_validate({"primaryAgent": "  ", "excludeAgents": ["a"]})
        assert config.primary_agent is None
        assert config.exclude_agents == ["a"]
