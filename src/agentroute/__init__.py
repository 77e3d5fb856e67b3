"""agentroute: deterministic primary-agent resolution for phase-based coding workflows."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("agentroute")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
