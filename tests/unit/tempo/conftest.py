"""Test fixtures for Tempo unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira_tempo.tempo.config import TempoConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(os.environ, {"TEMPO_API_TOKEN": "tempo_token"}, clear=True):
        yield


@pytest.fixture
def mock_config():
    """Create a TempoConfig instance."""
    return TempoConfig(api_token="tempo_token")


@pytest.fixture
def mock_rest_api():
    """Mock the Atlassian REST client used for Tempo."""
    return MagicMock()


@pytest.fixture
def tempo_fetcher(mock_config, mock_rest_api):
    """Create a TempoFetcher instance with mocked dependencies."""
    from mcp_jira_tempo.tempo import TempoFetcher

    with patch("mcp_jira_tempo.tempo.client.AtlassianRestAPI") as mock_api_class:
        mock_api_class.return_value = mock_rest_api
        fetcher = TempoFetcher(config=mock_config)
        yield fetcher
