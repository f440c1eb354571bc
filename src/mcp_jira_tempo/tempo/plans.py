"""Module for Tempo plan (resource allocation) operations."""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from ..models.tempo import TempoPlan
from ..utils.dates import format_date
from .client import TempoClient

logger = logging.getLogger("mcp-jira-tempo.tempo")

PLANS_PAGE_LIMIT = 5000


def _join_ids(values: Iterable[Any] | None) -> str | None:
    joined = ",".join(str(v) for v in values or [])
    return joined or None


class PlansMixin(TempoClient):
    """Mixin for Tempo plan operations."""

    def get_plans_for_user(
        self, account_id: str, from_date: date, to_date: date
    ) -> list[TempoPlan]:
        """
        Retrieve the plans assigned to one user.

        Args:
            account_id: The assignee's account ID
            from_date: First day (inclusive)
            to_date: Last day (inclusive)

        Returns:
            Plans overlapping the range, with daily breakdown requested
        """
        items = self.get_paged(
            f"plans/user/{account_id}",
            params={
                "from": format_date(from_date),
                "to": format_date(to_date),
                "plannedTimeBreakdown": "DAILY",
            },
        )
        return [TempoPlan.from_api_response(item) for item in items]

    def get_plans(
        self,
        from_date: date,
        to_date: date,
        account_ids: list[str] | None = None,
        project_ids: list[int] | None = None,
        issue_ids: list[int] | None = None,
    ) -> list[TempoPlan]:
        """
        Search plans with optional assignee, project and issue filters.

        Filters are sent as comma-separated ID lists; empty filters are omitted.
        """
        params: dict[str, Any] = {
            "from": format_date(from_date),
            "to": format_date(to_date),
            "limit": PLANS_PAGE_LIMIT,
            "plannedTimeBreakdown": "DAILY",
        }
        for name, values in (
            ("accountIds", account_ids),
            ("projectIds", project_ids),
            ("issueIds", issue_ids),
        ):
            joined = _join_ids(values)
            if joined:
                params[name] = joined

        logger.debug(f"Searching plans with {params}")
        items = self.get_paged("plans", params=params)
        return [TempoPlan.from_api_response(item) for item in items]
