"""Test fixtures for the report engine."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from mcp_jira_tempo.models.jira import JiraIssue, JiraProject, JiraUser
from mcp_jira_tempo.utils.dates import DateRange

NAMES = {"acc-ada": "Ada Lovelace", "acc-bob": "Bob Stone"}


@pytest.fixture
def week():
    return DateRange(date(2026, 2, 9), date(2026, 2, 13))


@pytest.fixture
def single_day():
    return DateRange(date(2026, 2, 9), date(2026, 2, 9))


@pytest.fixture
def mock_jira():
    """A JiraFetcher stand-in answering user, issue and project lookups."""
    jira = MagicMock()
    jira.get_user.side_effect = lambda account_id: JiraUser(
        account_id=account_id, display_name=NAMES.get(account_id, "")
    )
    jira.get_issue_by_id.side_effect = lambda issue_id: JiraIssue(
        id=int(issue_id), key=f"PROJ-{issue_id}", summary=f"Summary {issue_id}"
    )
    jira.get_project_by_id.side_effect = lambda project_id: JiraProject(
        id=int(project_id), key="PROJ", name="Project"
    )
    return jira


@pytest.fixture
def mock_tempo():
    """A TempoFetcher stand-in with no worklogs and no schedule."""
    tempo = MagicMock()
    tempo.get_worklogs.return_value = []
    tempo.get_user_schedule.return_value = []
    return tempo
