"""Module for Jira issue lookups."""

import logging

from ..exceptions import NotFoundError, UpstreamError
from ..models.jira import JiraIssue
from .client import JiraClient

logger = logging.getLogger("mcp-jira-tempo.jira")


class IssuesMixin(JiraClient):
    """Mixin for resolving Jira issues."""

    def get_issue_ids(self, issue_key: str) -> tuple[int, int]:
        """
        Resolve an issue key to its numeric issue ID and project ID.

        The key is used as given; callers normalize its casing.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Tuple of (issue_id, project_id); project_id is 0 when unknown

        Raises:
            NotFoundError: If Jira does not know the issue
            UpstreamError: For any other non-2xx response
        """
        try:
            data = self._call(self.jira.get_issue, issue_key, fields="project")
        except UpstreamError as e:
            if e.status_code == 404:
                raise NotFoundError(
                    f"Issue {issue_key} was not found. Check the key or your permissions."
                ) from e
            raise

        issue = JiraIssue.from_api_response(data)
        if not issue.id:
            raise NotFoundError(f"Issue {issue_key} was not found.")
        logger.debug(f"Resolved {issue_key} -> issue {issue.id}, project {issue.project_id}")
        return issue.id, issue.project_id

    def get_issue_by_id(self, issue_id: str | int) -> JiraIssue:
        """Fetch an issue by numeric ID with its key and summary."""
        data = self._call(
            self.jira.get_issue, str(issue_id), fields="summary,status,issuetype,project"
        )
        return JiraIssue.from_api_response(data)
