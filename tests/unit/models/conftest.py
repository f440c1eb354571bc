"""
Test fixtures for model testing.
"""

from typing import Any

import pytest

from tests.fixtures.tempo_mocks import (
    MOCK_ACCOUNT_LINKS_RESPONSE,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_USER_RESPONSE,
    MOCK_PLANS_RESPONSE,
    MOCK_WORKLOG_RESPONSE,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return mock Jira issue data."""
    return MOCK_JIRA_ISSUE_RESPONSE


@pytest.fixture
def jira_user_data() -> dict[str, Any]:
    """Return mock Jira user data."""
    return MOCK_JIRA_USER_RESPONSE


@pytest.fixture
def tempo_worklog_data() -> dict[str, Any]:
    """Return mock Tempo worklog data."""
    return MOCK_WORKLOG_RESPONSE


@pytest.fixture
def tempo_plan_data() -> dict[str, Any]:
    """Return the first mock Tempo plan."""
    return MOCK_PLANS_RESPONSE["results"][0]


@pytest.fixture
def tempo_account_links_data() -> list[dict[str, Any]]:
    """Return mock Tempo account links."""
    return MOCK_ACCOUNT_LINKS_RESPONSE["results"]
