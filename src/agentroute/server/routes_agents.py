"""Agent routes: list the catalog, resolve a prompt to a primary agent."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from agentroute.registry import AgentRegistry
from agentroute.resolution import Phase, ResolutionContext

logger = logging.getLogger(__name__)


async def list_agents(request: Request) -> JSONResponse:
    """GET /api/agents: list registry agents, optionally ?phase=plan|act|eval."""
    registry = AgentRegistry.load_merged(request.app.state.project_root)
    phase_param = request.query_params.get("phase")
    if phase_param:
        try:
            phase = Phase.parse(phase_param)
        except ValueError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        agents = registry.filter_by_phase(phase.value)
    else:
        agents = registry.all_agents()

    return JSONResponse(
        {
            "agents": [a.model_dump() for a in agents],
            "count": len(agents),
        }
    )


async def resolve(request: Request) -> JSONResponse:
    """POST /api/resolve: resolve the primary agent for a prompt.

    Body: {"phase": "act", "prompt": "...", "context": {"file_path": ...},
    "recommended_agent": "..."}
    """
    try:
        body = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"error": "Invalid JSON body"}, status_code=400)
    if not isinstance(body, dict):
        return JSONResponse({"error": "Body must be a JSON object"}, status_code=400)

    phase_raw = body.get("phase")
    if not isinstance(phase_raw, str):
        return JSONResponse({"error": "phase is required"}, status_code=400)
    try:
        phase = Phase.parse(phase_raw)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    prompt = body.get("prompt") or ""
    if not isinstance(prompt, str):
        return JSONResponse({"error": "prompt must be a string"}, status_code=400)

    context = None
    if body.get("context") is not None:
        try:
            context = ResolutionContext.model_validate(body["context"])
        except ValidationError as e:
            return JSONResponse({"error": f"Invalid context: {e}"}, status_code=400)

    recommended = body.get("recommended_agent", body.get("recommendedAgent"))
    if recommended is not None and not isinstance(recommended, str):
        return JSONResponse({"error": "recommended_agent must be a string"}, status_code=400)

    resolver = request.app.state.resolver
    result = await resolver.resolve(phase, prompt, context, recommended)
    logger.debug(f"POST /api/resolve [{phase.name}] -> {result.agent_name}")
    return JSONResponse(result.model_dump(mode="json"))


routes = [
    Route("/api/agents", list_agents),
    Route("/api/resolve", resolve, methods=["POST"]),
]
