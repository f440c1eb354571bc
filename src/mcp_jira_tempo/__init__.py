import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from mcp_jira_tempo.utils.environment import ensure_required_env
from mcp_jira_tempo.utils.logging import setup_logging

__version__ = "0.1.0"

TRANSPORTS = ("stdio", "sse", "streamable-http")
TRUTHY = ("true", "1", "yes")

# CLI option name -> environment variable read by the config loaders
ENV_OVERRIDES = {
    "enabled_tools": "ENABLED_TOOLS",
    "jira_url": "JIRA_BASE_URL",
    "jira_email": "JIRA_EMAIL",
    "jira_token": "JIRA_API_TOKEN",
    "jira_account_id": "JIRA_ACCOUNT_ID",
    "jira_ssl_verify": "JIRA_SSL_VERIFY",
    "tempo_token": "TEMPO_API_TOKEN",
    "tempo_url": "TEMPO_BASE_URL",
    "read_only": "READ_ONLY_MODE",
}

logger = setup_logging(
    logging.DEBUG
    if os.getenv("MCP_VERBOSE", "").lower() in TRUTHY
    else logging.WARNING
)


def _logging_level(verbose: int) -> int:
    """-v gives INFO, -vv and up DEBUG; otherwise MCP_VERY_VERBOSE / MCP_VERBOSE decide."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    if os.getenv("MCP_VERY_VERBOSE", "false").lower() in TRUTHY:
        return logging.DEBUG
    if os.getenv("MCP_VERBOSE", "false").lower() in TRUTHY:
        return logging.INFO
    return logging.WARNING


def _was_option_provided(ctx: click.Context | None, param_name: str) -> bool:
    if ctx is None:
        return False
    return ctx.get_parameter_source(param_name) not in (
        click.core.ParameterSource.DEFAULT,
        click.core.ParameterSource.DEFAULT_MAP,
    )


def _export_overrides(ctx: click.Context | None, params: dict) -> None:
    """Copy explicitly given CLI options into the environment for the config loaders."""
    for param_name, env_name in ENV_OVERRIDES.items():
        if not _was_option_provided(ctx, param_name):
            continue
        value = params[param_name]
        os.environ[env_name] = str(value).lower() if isinstance(value, bool) else value


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    default="stdio",
    help="Transport type (stdio, sse, or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for SSE or Streamable HTTP transport (default: 0.0.0.0)",
)
@click.option(
    "--path",
    default="/mcp",
    help="Path for Streamable HTTP transport (e.g., /mcp).",
)
@click.option(
    "--jira-url",
    help="Jira Cloud URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-account-id",
    help="Your Jira account ID (skips the lookup of the current user at startup)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira (default: verify)",
)
@click.option("--tempo-token", help="Tempo API token")
@click.option(
    "--tempo-url",
    help="Tempo API base URL (default: https://api.tempo.io)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables the time logging tools)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    path: str | None,
    **credentials: str | bool | None,
) -> None:
    """MCP Jira Tempo Server - log and report time with Jira and Tempo over MCP

    Authenticates to Jira Cloud with an account email and API token, and to
    the Tempo Cloud REST API with a Tempo API token.
    """
    global logger
    level = _logging_level(verbose)
    logger = setup_logging(level)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Explicit options beat the environment, which beats the defaults
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if _was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in TRANSPORTS:
        logger.warning(f"Invalid transport '{final_transport}', using 'stdio'.")
        final_transport = "stdio"

    env_port = os.getenv("PORT", "")
    final_port = int(env_port) if env_port.isdigit() else 8000
    if _was_option_provided(click_ctx, "port"):
        final_port = port

    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if _was_option_provided(click_ctx, "host"):
        final_host = host

    final_path: str | None = os.getenv("STREAMABLE_HTTP_PATH", None)
    if _was_option_provided(click_ctx, "path"):
        final_path = path

    _export_overrides(click_ctx, credentials)

    try:
        ensure_required_env()
    except ValueError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    from mcp_jira_tempo.servers import main_mcp

    run_kwargs: dict = {"transport": final_transport}
    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    else:
        run_kwargs.update(
            host=final_host,
            port=final_port,
            log_level=logging.getLevelName(level).lower(),
        )
        if final_path is not None:
            run_kwargs["path"] = final_path
        logger.info(
            f"Starting server with {final_transport.upper()} transport on "
            f"http://{final_host}:{final_port}{final_path or ''}"
        )

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
