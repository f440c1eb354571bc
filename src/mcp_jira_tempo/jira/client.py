"""Base client module for Jira API interactions."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from atlassian import Jira
from requests.exceptions import HTTPError

from ..exceptions import UpstreamError
from ..utils.logging import mask_sensitive
from .config import JiraConfig

logger = logging.getLogger("mcp-jira-tempo.jira")

R = TypeVar("R")


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        logger.debug(
            f"Creating Jira client for {self.config.url} as {self.config.username} "
            f"(token {mask_sensitive(self.config.api_token)})"
        )
        self.jira = Jira(
            url=self.config.url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
        )

    def _call(self, operation: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Run one Jira API call, translating HTTP failures into UpstreamError."""
        try:
            return operation(*args, **kwargs)
        except HTTPError as http_err:
            error = UpstreamError.from_http_error("Jira", http_err)
            logger.debug(f"Jira call failed: {error}")
            raise error from http_err
