"""Main FastMCP server setup for the Jira Tempo integration."""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import mcp.types
from fastmcp import Context, FastMCP
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool as FastMCPTool
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira_tempo.jira import JiraFetcher
from mcp_jira_tempo.jira.config import JiraConfig
from mcp_jira_tempo.tempo.config import TempoConfig
from mcp_jira_tempo.utils.io import is_read_only_mode
from mcp_jira_tempo.utils.logging import log_config_param
from mcp_jira_tempo.utils.tools import get_enabled_tools, should_include_tool

from .context import MainAppContext
from .tempo import tempo_mcp

logger = logging.getLogger("mcp-jira-tempo.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def resolve_own_account_id(jira_config: JiraConfig) -> str | None:
    """Resolve the caller's account ID through Jira's /myself.

    Failure is not fatal: tools that need an identity accept an explicit
    account ID instead.
    """
    try:
        user = await asyncio.to_thread(JiraFetcher(config=jira_config).get_myself)
    except Exception as e:
        logger.warning(
            f"Could not resolve your Jira account ID: {e}. "
            "Set JIRA_ACCOUNT_ID or pass account IDs to the tools."
        )
        return None
    logger.info(f"Resolved Jira account ID for {user.display_name}")
    return user.account_id


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira Tempo MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    loaded_jira_config: JiraConfig | None = None
    loaded_tempo_config: TempoConfig | None = None

    try:
        jira_config = JiraConfig.from_env()
        if jira_config.is_auth_configured():
            loaded_jira_config = jira_config
            log_config_param(logger, "Jira", "URL", jira_config.url)
            log_config_param(logger, "Jira", "Email", jira_config.username)
            log_config_param(
                logger, "Jira", "API Token", jira_config.api_token, sensitive=True
            )
        else:
            logger.warning(
                "Jira URL found, but authentication is not fully configured. Tools will be unavailable."
            )
    except Exception as e:
        logger.error(f"Failed to load Jira configuration: {e}", exc_info=True)

    try:
        tempo_config = TempoConfig.from_env()
        loaded_tempo_config = tempo_config
        log_config_param(logger, "Tempo", "URL", tempo_config.url)
        log_config_param(
            logger, "Tempo", "API Token", tempo_config.api_token, sensitive=True
        )
    except Exception as e:
        logger.error(f"Failed to load Tempo configuration: {e}", exc_info=True)

    account_id: str | None = None
    if loaded_jira_config:
        account_id = loaded_jira_config.account_id or await resolve_own_account_id(
            loaded_jira_config
        )

    app_context = MainAppContext(
        jira_config=loaded_jira_config,
        tempo_config=loaded_tempo_config,
        account_id=account_id,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main Jira Tempo MCP server lifespan shutting down.")


def lifespan_app_context(fastmcp_context: Context | None) -> MainAppContext | None:
    """The MainAppContext of the request being served, if there is one."""
    request_context = fastmcp_context.request_context if fastmcp_context else None
    lifespan_state = getattr(request_context, "lifespan_context", None)
    if not isinstance(lifespan_state, dict):
        logger.warning("Lifespan context not available while listing tools.")
        return None
    return lifespan_state.get("app_lifespan_context")


def tool_exclusion_reason(
    name: str, tags: set[str], app_context: MainAppContext | None
) -> str | None:
    """Why a tool is hidden from the tool list, or None when it is listed."""
    if app_context is None:
        return "application context is unavailable"
    if not should_include_tool(name, app_context.enabled_tools):
        return "not enabled"
    if app_context.read_only and "write" in tags:
        return "read-only mode"
    # Every tool needs Jira; the Tempo tools need Tempo as well
    if not app_context.jira_config:
        return "Jira configuration is incomplete"
    if "tempo" in tags and not app_context.tempo_config:
        return "Tempo configuration is incomplete"
    return None


class ToolFilterMiddleware(Middleware):
    """Drops tools from tools/list that the current configuration does not support."""

    async def on_list_tools(
        self,
        context: MiddlewareContext[mcp.types.ListToolsRequest],
        call_next: CallNext[mcp.types.ListToolsRequest, Sequence[FastMCPTool]],
    ) -> Sequence[FastMCPTool]:
        tools = await call_next(context)
        app_context = lifespan_app_context(context.fastmcp_context)

        listed: list[FastMCPTool] = []
        for tool in tools:
            reason = tool_exclusion_reason(tool.name, tool.tags, app_context)
            if reason:
                logger.debug(f"Excluding tool '{tool.name}': {reason}")
                continue
            listed.append(tool)

        logger.debug(f"Listing {len(listed)} tools: {[t.name for t in listed]}")
        return listed


class TempoMCP(FastMCP[MainAppContext]):
    """FastMCP server that lists only the tools the current configuration supports."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.add_middleware(ToolFilterMiddleware())


main_mcp = TempoMCP(name="Jira Tempo MCP", lifespan=main_lifespan)
main_mcp.mount(tempo_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for Kubernetes probes")
