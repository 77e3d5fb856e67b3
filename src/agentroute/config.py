"""Project config file loading, server settings, and environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from agentroute.resolution.models import ProjectConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".agentroute.json"
CONFIG_SECTION = "ai"

DEFAULT_PORT = 41787
DEFAULT_HOST = "127.0.0.1"

ENV_PRIMARY_AGENT = "AGENTROUTE_PRIMARY_AGENT"
ENV_EXCLUDE_AGENTS = "AGENTROUTE_EXCLUDE_AGENTS"
ENV_PORT = "AGENTROUTE_PORT"


class ProjectConfigError(Exception):
    """Raised when the project config file exists but cannot be used."""


def _safe_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default


def _read_section(path: Path) -> dict[str, object]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ProjectConfigError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{path}: top level must be an object")

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ProjectConfigError(f"{path}: '{CONFIG_SECTION}' must be an object")
    return dict(section)


def load_project_config(path: Path | None = None) -> ProjectConfig | None:
    """Load the ``ai`` section of the project config file with env var overrides.

    Returns None when there is no file and no override, so callers can tell
    "not configured" apart from "configured with defaults".

    Raises:
        ProjectConfigError: the file is malformed or a field has the wrong type.
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME

    section: dict[str, object] = {}
    found = path.exists()
    if found:
        section = _read_section(path)

    # Env var overrides
    primary_env = os.environ.get(ENV_PRIMARY_AGENT)
    if primary_env:
        section.pop("primaryAgent", None)
        section["primary_agent"] = primary_env
        found = True

    exclude_env = os.environ.get(ENV_EXCLUDE_AGENTS)
    if exclude_env:
        section.pop("excludeAgents", None)
        section["exclude_agents"] = [a.strip() for a in exclude_env.split(",") if a.strip()]
        found = True

    if not found:
        return None

    try:
        return ProjectConfig.model_validate(section)
    except ValidationError as e:
        raise ProjectConfigError(f"Invalid '{CONFIG_SECTION}' section in {path}: {e}") from e


@dataclass
class ServerConfig:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST

    @classmethod
    def from_env(cls) -> ServerConfig:
        return cls(port=_safe_int(os.environ.get(ENV_PORT, str(DEFAULT_PORT)), DEFAULT_PORT))

    @classmethod
    def from_file(cls, path: Path) -> ServerConfig:
        config = cls()

        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                server = data.get("server", {})
                if "port" in server:
                    config.port = int(server["port"])
                if "host" in server:
                    config.host = str(server["host"])
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Failed to load server config from {path}: {e}")

        port_env = os.environ.get(ENV_PORT)
        if port_env:
            config.port = _safe_int(port_env, config.port)

        return config


def load_server_config(path: Path | None = None) -> ServerConfig:
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    return ServerConfig.from_file(path)
