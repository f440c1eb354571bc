"""Module for Jira search operations."""

import logging
import re

from ..exceptions import ParseError
from ..models.jira import JiraIssue
from .client import JiraClient

logger = logging.getLogger("mcp-jira-tempo.jira")

SEARCH_FIELDS = "summary,status,project,issuetype,assignee"
DEFAULT_MAX_RESULTS = 20

_PROJECT_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]+$")


def build_project_jql(project_key: str) -> str:
    """Build the open-issues JQL for a project.

    The key is validated so that only a bare project key ever reaches the
    query language.

    Raises:
        ParseError: If the key is not a valid Jira project key
    """
    key = project_key.strip().upper()
    if not _PROJECT_KEY_PATTERN.match(key):
        raise ParseError(f"Invalid project key '{project_key}'. Use a key like PROJ.")
    return f"project = {key} AND status != Done ORDER BY updated DESC"


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> list[JiraIssue]:
        """
        Execute a JQL query and return the matching issues.

        Args:
            jql: JQL query string built from trusted fragments
            max_results: Maximum number of issues to return

        Returns:
            List of JiraIssue in the order returned by Jira
        """
        logger.debug(f"Searching issues with JQL: {jql}")
        data = self._call(
            self.jira.get,
            self.jira.resource_url("search/jql", api_version=3),
            params={
                "jql": jql,
                "maxResults": max_results,
                "fields": SEARCH_FIELDS,
            },
        )
        issues = data.get("issues", []) if isinstance(data, dict) else []
        return [JiraIssue.from_api_response(item) for item in issues or []]

    def my_open_issues(self, max_results: int = DEFAULT_MAX_RESULTS) -> list[JiraIssue]:
        """Open issues assigned to the current user."""
        return self.search_issues(
            "assignee = currentUser() AND status != Done ORDER BY updated DESC",
            max_results,
        )

    def recent_issues(self, max_results: int = DEFAULT_MAX_RESULTS) -> list[JiraIssue]:
        """Recently updated issues assigned to the current user."""
        return self.search_issues(
            "assignee = currentUser() ORDER BY updated DESC", max_results
        )

    def project_issues(
        self, project_key: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> list[JiraIssue]:
        """Open issues in a specific project."""
        return self.search_issues(build_project_jql(project_key), max_results)
