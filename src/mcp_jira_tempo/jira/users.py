"""Module for Jira user operations."""

import logging

from ..exceptions import NotFoundError
from ..models.jira import JiraUser
from .client import JiraClient

logger = logging.getLogger("mcp-jira-tempo.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_myself(self) -> JiraUser:
        """
        Get the authenticated user's profile.

        Returns:
            JiraUser for the owner of the configured API token

        Raises:
            NotFoundError: If the response carries no account ID
        """
        data = self._call(self.jira.myself)
        user = JiraUser.from_api_response(data)
        if not user.account_id:
            raise NotFoundError(
                f"Could not find accountId in user data: {str(data)[:200]}"
            )
        return user

    def get_user(self, account_id: str) -> JiraUser:
        """Retrieve a user's profile by account ID."""
        data = self._call(self.jira.user, account_id=account_id)
        return JiraUser.from_api_response(data)

    def search_users(self, query: str, max_results: int = 5) -> list[JiraUser]:
        """
        Search users by a display name or email fragment.

        Args:
            query: Name fragment to search for
            max_results: Maximum number of users to return

        Returns:
            Matching users in the order returned by Jira
        """
        response = self._call(
            self.jira.user_find_by_user_string,
            query=query,
            start=0,
            limit=max_results,
        )
        if not isinstance(response, list):
            logger.error(
                f"Unexpected return value type from user search: {type(response)}"
            )
            return []
        return [JiraUser.from_api_response(item) for item in response]
