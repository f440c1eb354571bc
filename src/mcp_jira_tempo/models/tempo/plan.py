"""
Tempo plan (resource allocation) models.
"""

from typing import Any

from pydantic import BaseModel

from ..base import ApiModel, as_int, as_str
from ..constants import DEFAULT_ASSIGNEE_TYPE, DEFAULT_PLAN_ITEM_TYPE, EMPTY_STRING


class PlanReference(BaseModel):
    """Polymorphic reference used for plan assignees and plan items."""

    id: str = EMPTY_STRING
    type: str = EMPTY_STRING

    @property
    def cache_key(self) -> str:
        return f"{self.type}:{self.id}"

    @property
    def fallback_label(self) -> str:
        return f"{self.type} #{self.id}"


class TempoPlan(ApiModel):
    """A planned allocation of time to an issue or project."""

    id: int = 0
    start_date: str = EMPTY_STRING
    end_date: str = EMPTY_STRING
    planned_seconds_per_day: int = 0
    total_planned_seconds: int = 0
    total_planned_seconds_in_scope: int = 0
    description: str = EMPTY_STRING
    assignee: PlanReference = PlanReference(type=DEFAULT_ASSIGNEE_TYPE)
    plan_item: PlanReference = PlanReference(type=DEFAULT_PLAN_ITEM_TYPE)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "TempoPlan":
        if not data or not isinstance(data, dict):
            return cls()

        assignee = data.get("assignee") or {}
        plan_item = data.get("planItem") or {}
        return cls(
            id=as_int(data.get("id")),
            start_date=as_str(data.get("startDate")),
            end_date=as_str(data.get("endDate")),
            planned_seconds_per_day=as_int(data.get("plannedSecondsPerDay")),
            total_planned_seconds=as_int(data.get("totalPlannedSeconds")),
            total_planned_seconds_in_scope=as_int(
                data.get("totalPlannedSecondsInScope")
            ),
            description=as_str(data.get("description")),
            assignee=PlanReference(
                id=as_str(assignee.get("id")),
                type=as_str(assignee.get("type")) or DEFAULT_ASSIGNEE_TYPE,
            ),
            plan_item=PlanReference(
                id=as_str(plan_item.get("id")),
                type=as_str(plan_item.get("type")) or DEFAULT_PLAN_ITEM_TYPE,
            ),
        )

    @property
    def effective_planned_seconds(self) -> int:
        """Planned seconds inside the queried window, else for the whole plan."""
        return self.total_planned_seconds_in_scope or self.total_planned_seconds
