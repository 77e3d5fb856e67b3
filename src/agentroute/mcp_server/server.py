"""MCP stdio server exposing agent resolution as tools."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import anyio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from agentroute import __version__
from agentroute.factory import create_resolver
from agentroute.registry import AgentRegistry
from agentroute.resolution import AgentResolver, Phase, ResolutionContext

logger = logging.getLogger(__name__)

PHASE_ENUM = [p.value for p in Phase]

RESOLVE_AGENT_SCHEMA = {
    "type": "object",
    "properties": {
        "phase": {
            "type": "string",
            "enum": PHASE_ENUM,
            "description": "Workflow phase: plan, act or eval",
        },
        "prompt": {"type": "string", "description": "User request text"},
        "file_path": {"type": "string", "description": "File the user is working on"},
        "project_type": {"type": "string", "description": "Project type hint, e.g. infrastructure"},
        "recommended_agent": {
            "type": "string",
            "description": "ACT agent recommended by a previous PLAN resolution",
        },
    },
    "required": ["phase", "prompt"],
}

LIST_AGENTS_SCHEMA = {
    "type": "object",
    "properties": {
        "phase": {"type": "string", "enum": PHASE_ENUM, "description": "Filter by phase"},
    },
}


def _error(message: str) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=json.dumps({"error": message}))]


def create_mcp_server(
    resolver: AgentResolver | None = None,
    project_root: Path | None = None,
) -> Server:
    """Create and configure the MCP server with the resolve/list tool handlers."""
    root = project_root if project_root is not None else Path.cwd()
    if resolver is None:
        resolver = create_resolver(root)
    server = Server("agentroute", __version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name="resolve_agent",
                description=(
                    "Pick the primary agent for a request. "
                    "Returns agent_name, source, confidence and reason."
                ),
                inputSchema=RESOLVE_AGENT_SCHEMA,
            ),
            types.Tool(
                name="list_agents",
                description="List known agents with display names, descriptions and phases.",
                inputSchema=LIST_AGENTS_SCHEMA,
            ),
        ]

    @server.call_tool()
    async def call_tool(
        name: str,
        arguments: dict | None,
    ) -> list[types.TextContent]:
        args = arguments or {}

        if name == "resolve_agent":
            try:
                phase = Phase.parse(str(args.get("phase", "")))
            except ValueError as e:
                return _error(str(e))

            context = None
            if args.get("file_path") or args.get("project_type"):
                try:
                    context = ResolutionContext(
                        file_path=args.get("file_path"),
                        project_type=args.get("project_type"),
                    )
                except ValidationError as e:
                    return _error(f"Invalid context: {e}")

            recommended = args.get("recommended_agent")
            if recommended is not None and not isinstance(recommended, str):
                return _error("recommended_agent must be a string")

            resolved = await resolver.resolve(
                phase,
                str(args.get("prompt") or ""),
                context,
                recommended,
            )
            result: object = resolved.model_dump(mode="json")
        elif name == "list_agents":
            registry = AgentRegistry.load_merged(root)
            phase_arg = args.get("phase")
            if phase_arg:
                try:
                    agents = registry.filter_by_phase(Phase.parse(str(phase_arg)).value)
                except ValueError as e:
                    return _error(str(e))
            else:
                agents = registry.all_agents()
            result = {"agents": [a.model_dump() for a in agents], "count": len(agents)}
        else:
            return [types.TextContent(type="text", text=f"Unknown tool: {name}")]

        return [types.TextContent(type="text", text=json.dumps(result, indent=2))]

    return server


async def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    server = create_mcp_server()
    async with stdio_server() as (read_stream, write_stream):
        init_options = server.create_initialization_options(
            notification_options=NotificationOptions(),
        )
        await server.run(read_stream, write_stream, init_options)


def main() -> None:
    anyio.run(run_mcp_server)
