"""CLI entry point for agentroute."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import cast

from agentroute import __version__
from agentroute.config import ServerConfig, load_server_config
from agentroute.factory import create_resolver
from agentroute.mcp_server.server import main as mcp_main
from agentroute.registry import AgentRegistry
from agentroute.resolution import Phase, ResolutionContext
from agentroute.server.runner import run_server


def _project_root(args: argparse.Namespace) -> Path:
    root = cast(Path | None, args.project_root)
    return root if root is not None else Path.cwd()


def _cmd_resolve(args: argparse.Namespace) -> None:
    try:
        phase = Phase.parse(cast(str, args.phase))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    file_path = cast(str | None, args.file_path)
    project_type = cast(str | None, args.project_type)
    context = None
    if file_path or project_type:
        context = ResolutionContext(file_path=file_path, project_type=project_type)

    resolver = create_resolver(_project_root(args))
    result = asyncio.run(
        resolver.resolve(phase, cast(str, args.prompt), context, cast(str | None, args.recommended))
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    print(f"Agent:      {result.agent_name}")
    print(f"Source:     {result.source}")
    print(f"Confidence: {result.confidence:.2f}")
    print(f"Reason:     {result.reason}")


def _cmd_agents(args: argparse.Namespace) -> None:
    registry = AgentRegistry.load_merged(_project_root(args))
    phase_arg = cast(str | None, args.phase)
    if phase_arg:
        try:
            agents = registry.filter_by_phase(Phase.parse(phase_arg).value)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
    else:
        agents = registry.all_agents()

    if not agents:
        print("No agents found.")
        return

    width = max(len(a.name) for a in agents)
    for agent in agents:
        phases = ",".join(agent.phases)
        print(f"{agent.name:<{width}}  [{phases}]  {agent.display_name}")


def _cmd_serve(args: argparse.Namespace) -> None:
    config = load_server_config()
    port = cast(int | None, args.port)
    if port is not None:
        config = ServerConfig(port=port, host=config.host)
    run_server(config)


def _cmd_mcp_serve(_args: argparse.Namespace) -> None:
    mcp_main()


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="agentroute",
        description="Resolve which primary agent should handle a request",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"agentroute {__version__}"
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log resolution decisions to stderr"
    )
    subparsers = parser.add_subparsers(dest="command")

    # resolve subcommand
    resolve_p = subparsers.add_parser("resolve", help="Resolve the agent for a prompt")
    _ = resolve_p.add_argument("phase", help="Workflow phase: plan, act or eval")
    _ = resolve_p.add_argument("prompt", help="User request text")
    _ = resolve_p.add_argument("--file-path", dest="file_path", default=None)
    _ = resolve_p.add_argument("--project-type", dest="project_type", default=None)
    _ = resolve_p.add_argument(
        "--recommended", default=None, help="Agent recommended by a previous PLAN resolution"
    )
    _ = resolve_p.add_argument("--project-root", dest="project_root", type=Path, default=None)
    _ = resolve_p.add_argument("--json", action="store_true", help="Print the result as JSON")

    # agents subcommand
    agents_p = subparsers.add_parser("agents", help="List known agents")
    _ = agents_p.add_argument("--phase", default=None, help="Only agents for this phase")
    _ = agents_p.add_argument("--project-root", dest="project_root", type=Path, default=None)

    # serve subcommand
    serve_p = subparsers.add_parser("serve", help="Start the HTTP API server")
    _ = serve_p.add_argument("--port", type=int, default=None)

    # mcp-serve subcommand
    _ = subparsers.add_parser("mcp-serve", help="Start the MCP stdio server")

    args = parser.parse_args(sys.argv[1:])
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    dispatch = {
        "resolve": _cmd_resolve,
        "agents": _cmd_agents,
        "serve": _cmd_serve,
        "mcp-serve": _cmd_mcp_serve,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)
