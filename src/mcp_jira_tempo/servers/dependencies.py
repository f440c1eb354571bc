"""Dependency providers for JiraFetcher and TempoFetcher.

Provides get_jira_fetcher, get_tempo_fetcher and get_account_id for use in
tool functions. Fetchers are built per invocation from the configuration
loaded at startup; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import Context

from mcp_jira_tempo.exceptions import NotFoundError
from mcp_jira_tempo.jira import JiraFetcher
from mcp_jira_tempo.servers.context import MainAppContext
from mcp_jira_tempo.tempo import TempoFetcher

logger = logging.getLogger("mcp-jira-tempo.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext:
    """Return the MainAppContext stored in the server lifespan.

    Raises:
        ValueError: If the lifespan context is not available
    """
    lifespan_ctx_dict: Any = ctx.request_context.lifespan_context
    app_lifespan_ctx: MainAppContext | None = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if app_lifespan_ctx is None:
        logger.error("Application lifespan context is not available.")
        raise ValueError("Application context is not available.")
    return app_lifespan_ctx


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Create a JiraFetcher from the startup configuration.

    Raises:
        ValueError: If Jira is not configured
    """
    app_ctx = get_app_context(ctx)
    if app_ctx.jira_config is None:
        raise ValueError("Jira client is not configured or available.")
    logger.debug("get_jira_fetcher: creating JiraFetcher from startup config")
    return JiraFetcher(config=app_ctx.jira_config)


async def get_tempo_fetcher(ctx: Context) -> TempoFetcher:
    """Create a TempoFetcher from the startup configuration.

    Raises:
        ValueError: If Tempo is not configured
    """
    app_ctx = get_app_context(ctx)
    if app_ctx.tempo_config is None:
        raise ValueError("Tempo client is not configured or available.")
    logger.debug("get_tempo_fetcher: creating TempoFetcher from startup config")
    return TempoFetcher(config=app_ctx.tempo_config)


def get_account_id(ctx: Context, override: str | None = None) -> str:
    """Return ``override`` if given, else the caller's own account ID.

    Raises:
        NotFoundError: If no account ID is known
    """
    if override and override.strip():
        return override.strip()
    account_id = get_app_context(ctx).account_id
    if not account_id:
        raise NotFoundError(
            "Could not determine your Jira account ID. Set JIRA_ACCOUNT_ID "
            "or pass an explicit account ID."
        )
    return account_id
