"""Module for Tempo user schedule operations."""

from datetime import date

from ..models.tempo import UserScheduleDay
from ..utils.dates import format_date
from .client import TempoClient


class SchedulesMixin(TempoClient):
    """Mixin for Tempo user schedules."""

    def get_user_schedule(
        self, account_id: str, from_date: date, to_date: date
    ) -> list[UserScheduleDay]:
        """
        Retrieve the required working time per day for a user.

        Args:
            account_id: The user's account ID
            from_date: First day (inclusive)
            to_date: Last day (inclusive)

        Returns:
            One entry per day in the range
        """
        items = self.get_paged(
            f"user-schedule/{account_id}",
            params={"from": format_date(from_date), "to": format_date(to_date)},
        )
        return [UserScheduleDay.from_api_response(item) for item in items]
