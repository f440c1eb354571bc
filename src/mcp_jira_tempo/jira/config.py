"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("mcp-jira-tempo.jira.config")


@dataclass
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is HTTP Basic with the account email and an API token.
    """

    url: str  # Base URL for Jira, e.g. https://your-domain.atlassian.net
    username: str  # Account email
    api_token: str  # Jira API token
    account_id: str | None = None  # Pre-resolved account ID of the caller
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        url = os.getenv("JIRA_BASE_URL", "").strip()
        username = os.getenv("JIRA_EMAIL", "").strip()
        api_token = os.getenv("JIRA_API_TOKEN", "").strip()

        missing = [
            name
            for name, value in (
                ("JIRA_BASE_URL", url),
                ("JIRA_EMAIL", username),
                ("JIRA_API_TOKEN", api_token),
            )
            if not value
        ]
        if missing:
            error_msg = f"Missing required Jira environment variables: {', '.join(missing)}"
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        return cls(
            url=url.rstrip("/"),
            username=username,
            api_token=api_token,
            account_id=os.getenv("JIRA_ACCOUNT_ID", "").strip() or None,
            ssl_verify=ssl_verify,
        )

    def is_auth_configured(self) -> bool:
        """Check whether URL, email and token are all present."""
        return bool(self.url and self.username and self.api_token)
