"""
Tempo worklog models.
"""

import logging
from typing import Any

from pydantic import BaseModel

from ..base import ApiModel, as_int, as_str, nested
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class WorklogAttribute(BaseModel):
    """A Tempo work attribute value attached to a worklog."""

    key: str
    value: str


class TempoWorklog(ApiModel):
    """
    Model representing a Tempo worklog.

    ``billable_seconds`` never exceeds ``time_spent_seconds``.
    """

    tempo_worklog_id: int = 0
    issue_key: str = EMPTY_STRING
    issue_id: int = 0
    author_account_id: str = EMPTY_STRING
    start_date: str = EMPTY_STRING
    start_time: str = EMPTY_STRING
    time_spent_seconds: int = 0
    billable_seconds: int = 0
    description: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "TempoWorklog":
        """
        Create a TempoWorklog from a Tempo API response.

        Args:
            data: The worklog data from the Tempo API
            **kwargs:
                fallback_account_id: author to use when the payload has none
                fallback_issue_key: issue key to use when the payload has none

        Returns:
            A TempoWorklog instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary worklog data")
            return cls()

        time_spent = max(as_int(data.get("timeSpentSeconds")), 0)
        billable = min(max(as_int(data.get("billableSeconds")), 0), time_spent)
        return cls(
            tempo_worklog_id=as_int(data.get("tempoWorklogId")),
            issue_key=as_str(nested(data, "issue", "key"))
            or as_str(kwargs.get("fallback_issue_key")),
            issue_id=as_int(nested(data, "issue", "id")),
            author_account_id=as_str(nested(data, "author", "accountId"))
            or as_str(kwargs.get("fallback_account_id")),
            start_date=as_str(data.get("startDate")),
            start_time=as_str(data.get("startTime")),
            time_spent_seconds=time_spent,
            billable_seconds=billable,
            description=as_str(data.get("description")),
        )

    @property
    def non_billable_seconds(self) -> int:
        return self.time_spent_seconds - self.billable_seconds
