"""Configuration module for Tempo API interactions."""

import os
from dataclasses import dataclass

DEFAULT_TEMPO_URL = "https://api.tempo.io"
DEFAULT_ACCOUNT_ATTRIBUTE_KEY = "_CSMProject_"


@dataclass
class TempoConfig:
    """Tempo Cloud REST API v4 configuration (Bearer token auth)."""

    api_token: str  # Tempo API token
    url: str = DEFAULT_TEMPO_URL  # Tempo API base URL
    account_attribute_key: str = DEFAULT_ACCOUNT_ATTRIBUTE_KEY  # Work attribute holding the billing account
    page_limit: int = 1000  # Page size requested from list endpoints

    @classmethod
    def from_env(cls) -> "TempoConfig":
        """Create configuration from environment variables.

        Raises:
            ValueError: If TEMPO_API_TOKEN is missing
        """
        api_token = os.getenv("TEMPO_API_TOKEN", "").strip()
        if not api_token:
            error_msg = "Missing required TEMPO_API_TOKEN environment variable"
            raise ValueError(error_msg)

        return cls(
            api_token=api_token,
            url=(os.getenv("TEMPO_BASE_URL", "").strip() or DEFAULT_TEMPO_URL).rstrip("/"),
            account_attribute_key=os.getenv("TEMPO_ACCOUNT_ATTRIBUTE_KEY", "").strip()
            or DEFAULT_ACCOUNT_ATTRIBUTE_KEY,
        )

    def is_auth_configured(self) -> bool:
        return bool(self.api_token)
