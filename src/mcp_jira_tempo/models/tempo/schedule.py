"""
Tempo user schedule model.
"""

from typing import Any

from ..base import ApiModel, as_int, as_str
from ..constants import DEFAULT_SCHEDULE_DAY_TYPE, EMPTY_STRING


class UserScheduleDay(ApiModel):
    """Required working time of one user on one date."""

    date: str = EMPTY_STRING
    required_seconds: int = 0
    type: str = DEFAULT_SCHEDULE_DAY_TYPE

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "UserScheduleDay":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            date=as_str(data.get("date")),
            required_seconds=max(as_int(data.get("requiredSeconds")), 0),
            type=as_str(data.get("type")) or DEFAULT_SCHEDULE_DAY_TYPE,
        )
