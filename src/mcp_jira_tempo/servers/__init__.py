"""Server implementations for MCP Jira Tempo."""

from .main import main_mcp
from .tempo import tempo_mcp

__all__ = ["main_mcp", "tempo_mcp"]
