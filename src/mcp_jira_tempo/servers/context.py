from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira_tempo.jira.config import JiraConfig
    from mcp_jira_tempo.tempo.config import TempoConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Jira and Tempo configurations loaded from environment
    variables at server startup, plus the caller's resolved account ID.
    """

    jira_config: JiraConfig | None = None
    tempo_config: TempoConfig | None = None
    account_id: str | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
