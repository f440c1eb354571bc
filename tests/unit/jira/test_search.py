"""Tests for the Jira search operations."""

import pytest

from mcp_jira_tempo.exceptions import ParseError
from mcp_jira_tempo.jira.search import build_project_jql
from tests.fixtures.tempo_mocks import MOCK_JIRA_SEARCH_RESPONSE


def test_build_project_jql():
    assert (
        build_project_jql(" proj ")
        == "project = PROJ AND status != Done ORDER BY updated DESC"
    )


@pytest.mark.parametrize("key", ["", "P", "PROJ OR 1=1", "PROJ\"", "1ABC"])
def test_build_project_jql_rejects_invalid_keys(key):
    with pytest.raises(ParseError):
        build_project_jql(key)


class TestSearchMixin:
    def test_search_issues(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = MOCK_JIRA_SEARCH_RESPONSE

        issues = jira_fetcher.search_issues("assignee = currentUser()", 10)

        assert [issue.key for issue in issues] == ["PROJ-123", "PROJ-124"]
        assert issues[1].issue_type == "Story"
        jira_fetcher.jira.get.assert_called_once_with(
            "rest/api/3/search/jql",
            params={
                "jql": "assignee = currentUser()",
                "maxResults": 10,
                "fields": "summary,status,project,issuetype,assignee",
            },
        )

    def test_search_issues_empty(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {"issues": []}
        assert jira_fetcher.search_issues("x") == []

        jira_fetcher.jira.get.return_value = None
        assert jira_fetcher.search_issues("x") == []

    def test_my_open_issues(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {"issues": []}

        jira_fetcher.my_open_issues(20)

        params = jira_fetcher.jira.get.call_args.kwargs["params"]
        assert params["jql"] == (
            "assignee = currentUser() AND status != Done ORDER BY updated DESC"
        )

    def test_recent_issues(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {"issues": []}

        jira_fetcher.recent_issues(5)

        params = jira_fetcher.jira.get.call_args.kwargs["params"]
        assert params["jql"] == "assignee = currentUser() ORDER BY updated DESC"
        assert params["maxResults"] == 5

    def test_project_issues(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {"issues": []}

        jira_fetcher.project_issues("core", 15)

        params = jira_fetcher.jira.get.call_args.kwargs["params"]
        assert params["jql"] == (
            "project = CORE AND status != Done ORDER BY updated DESC"
        )

    def test_project_issues_invalid_key_never_queries(self, jira_fetcher):
        with pytest.raises(ParseError):
            jira_fetcher.project_issues("CORE; DROP")
        jira_fetcher.jira.get.assert_not_called()
