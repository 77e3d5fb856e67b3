"""Uvicorn launcher."""

from __future__ import annotations

import logging

from agentroute.config import ServerConfig, load_server_config

logger = logging.getLogger(__name__)


def run_server(config: ServerConfig | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    if config is None:
        config = load_server_config()

    logger.info(f"Starting agentroute API on {config.host}:{config.port}")
    uvicorn.run(
        "agentroute.server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
    )
