"""
Common Jira entity models: users and projects.
"""

import logging
from typing import Any

from ..base import ApiModel, as_int, as_str
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class JiraUser(ApiModel):
    """
    Model representing a Jira user.
    """

    account_id: str = EMPTY_STRING
    display_name: str = EMPTY_STRING
    email: str | None = None
    active: bool = True

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary user data")
            return cls()

        account_id = as_str(data.get("accountId"))
        return cls(
            account_id=account_id,
            # Never leave the name empty: fall back to the identifier
            display_name=as_str(data.get("displayName")) or account_id,
            email=data.get("emailAddress"),
            active=bool(data.get("active", True)),
        )


class JiraProject(ApiModel):
    """
    Model representing a Jira project.
    """

    id: int = 0
    key: str = EMPTY_STRING
    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            id=as_int(data.get("id")),
            key=as_str(data.get("key")),
            name=as_str(data.get("name")),
        )
