"""Starlette app factory."""

from __future__ import annotations

from pathlib import Path

from starlette.applications import Starlette

from agentroute.factory import create_resolver
from agentroute.server.routes_agents import routes as agent_routes
from agentroute.server.routes_system import routes as system_routes


def create_app(project_root: Path | None = None) -> Starlette:
    """Create a Starlette app resolving against ``project_root`` (default: cwd)."""
    root = project_root if project_root is not None else Path.cwd()

    app = Starlette(routes=system_routes + agent_routes)
    app.state.project_root = root
    app.state.resolver = create_resolver(root)
    return app
