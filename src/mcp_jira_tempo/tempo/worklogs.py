"""Module for Tempo worklog operations."""

import logging
from datetime import date
from typing import Any

from ..models.tempo import TempoWorklog, WorklogAttribute
from ..utils.dates import format_date
from .client import TempoClient

logger = logging.getLogger("mcp-jira-tempo.tempo")


class WorklogsMixin(TempoClient):
    """Mixin for Tempo worklog operations."""

    def create_worklog(
        self,
        issue_id: int,
        time_spent_seconds: int,
        start_date: str,
        start_time: str,
        author_account_id: str,
        description: str | None = None,
        attributes: list[WorklogAttribute] | None = None,
        issue_key: str | None = None,
    ) -> TempoWorklog:
        """
        Create a worklog in Tempo.

        Args:
            issue_id: Numeric Jira issue ID
            time_spent_seconds: Duration in seconds
            start_date: Date of the work (YYYY-MM-DD)
            start_time: Start time (HH:MM:SS)
            author_account_id: Account ID of the worker
            description: Optional worklog description
            attributes: Optional work attributes (e.g. billing account)
            issue_key: Issue key used when the response does not echo one

        Returns:
            The created worklog as confirmed by Tempo

        Raises:
            UpstreamError: If Tempo rejects the worklog
        """
        body: dict[str, Any] = {
            "issueId": issue_id,
            "timeSpentSeconds": time_spent_seconds,
            "startDate": start_date,
            "startTime": start_time,
            "authorAccountId": author_account_id,
        }
        if description:
            body["description"] = description
        if attributes:
            body["attributes"] = [attr.model_dump() for attr in attributes]

        data = self.post_json("worklogs", body)
        worklog = TempoWorklog.from_api_response(
            data,
            fallback_issue_key=issue_key,
            fallback_account_id=author_account_id,
        )
        logger.info(
            f"Created Tempo worklog {worklog.tempo_worklog_id} for issue {issue_key or issue_id}"
        )
        return worklog

    def get_worklogs(
        self,
        from_date: date,
        to_date: date,
        account_id: str | None = None,
        limit: int | None = None,
    ) -> list[TempoWorklog]:
        """
        Retrieve all worklogs in a date range, optionally for one author.

        Args:
            from_date: First day (inclusive)
            to_date: Last day (inclusive)
            account_id: Restrict to this author; all visible worklogs otherwise
            limit: Page size (defaults to the configured page limit)

        Returns:
            Every worklog across all pages, in server order
        """
        params = {
            "from": format_date(from_date),
            "to": format_date(to_date),
            "offset": 0,
            "limit": limit or self.config.page_limit,
        }
        resource = f"worklogs/user/{account_id}" if account_id else "worklogs"
        items = self.get_paged(resource, params=params)
        return [
            TempoWorklog.from_api_response(item, fallback_account_id=account_id)
            for item in items
        ]
