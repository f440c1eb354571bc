"""Module for Tempo billing account lookups."""

import logging

from ..models.base import as_str
from ..models.tempo import TempoAccountLink
from .client import TempoClient

logger = logging.getLogger("mcp-jira-tempo.tempo")


class AccountsMixin(TempoClient):
    """Mixin for Tempo account operations."""

    def get_default_account_for_project(
        self, project_id: int
    ) -> TempoAccountLink | None:
        """
        Find the billing account linked to a Jira project.

        The link flagged as default wins; otherwise the first link in the
        order Tempo returns them. When the link only carries ``account.self``
        the account is fetched to obtain its key.

        Args:
            project_id: Numeric Jira project ID

        Returns:
            The account link, or None when the project has no usable link or
            the lookup fails
        """
        try:
            data = self.get_json(
                f"account-links/project/{project_id}", params={"limit": 100}
            )
            links = [
                TempoAccountLink.from_api_response(item)
                for item in data.get("results") or []
            ]
            if not links:
                logger.debug(f"Project {project_id} has no Tempo account links")
                return None

            link = next((item for item in links if item.is_default), links[0])
            if not link.account_id:
                return None

            if not link.account_key:
                account = self.get_json(f"accounts/{link.account_id}")
                link = link.model_copy(
                    update={"account_key": as_str(account.get("key"))}
                )
            return link
        except Exception as e:  # noqa: BLE001 - billing account is best effort
            logger.debug(
                f"Default account lookup failed for project {project_id}: {e}"
            )
            return None
