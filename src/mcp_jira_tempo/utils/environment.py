"""Utility functions related to environment checking."""

import logging
import os

logger = logging.getLogger("mcp-jira-tempo.utils.environment")

REQUIRED_ENV_VARS = (
    "JIRA_BASE_URL",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "TEMPO_API_TOKEN",
)
OPTIONAL_ENV_VARS = (
    "JIRA_ACCOUNT_ID",
    "JIRA_SSL_VERIFY",
    "TEMPO_BASE_URL",
    "TEMPO_ACCOUNT_ATTRIBUTE_KEY",
    "READ_ONLY_MODE",
    "ENABLED_TOOLS",
)


def get_missing_env_vars() -> list[str]:
    """Return the names of required environment variables that are unset or empty."""
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name, "").strip()]
    if missing:
        logger.debug(f"Missing required environment variables: {missing}")
    return missing


def ensure_required_env() -> None:
    """Fail with one message naming every missing required variable.

    Raises:
        ValueError: If any required variable is missing
    """
    missing = get_missing_env_vars()
    if missing:
        raise ValueError(
            f"Missing environment variables: {', '.join(missing)}. "
            "Set them in your MCP client config or in a .env file."
        )
