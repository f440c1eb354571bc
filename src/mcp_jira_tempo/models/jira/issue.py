"""
Jira issue model.

Issues are read-only projections built from the search and issue endpoints.
"""

import logging
from typing import Any

from ..base import ApiModel, as_int, as_str, nested
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue as seen by the time tracking tools.
    """

    id: int = 0
    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    status: str = EMPTY_STRING
    issue_type: str = EMPTY_STRING
    project_id: int = 0
    project_key: str = EMPTY_STRING
    assignee: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields") or {}
        return cls(
            id=as_int(data.get("id")),
            key=as_str(data.get("key")),
            summary=as_str(fields.get("summary")),
            status=as_str(nested(fields, "status", "name")),
            issue_type=as_str(nested(fields, "issuetype", "name")),
            project_id=as_int(nested(fields, "project", "id")),
            project_key=as_str(nested(fields, "project", "key")),
            assignee=as_str(nested(fields, "assignee", "displayName")),
        )
