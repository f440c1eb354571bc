"""
Pydantic models for Jira and Tempo API responses.
"""

from .base import ApiModel
from .jira import JiraIssue, JiraProject, JiraUser
from .tempo import (
    PlanReference,
    TempoAccountLink,
    TempoPlan,
    TempoTeam,
    TempoTeamMember,
    TempoWorklog,
    UserScheduleDay,
    WorklogAttribute,
)

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraProject",
    "JiraUser",
    "PlanReference",
    "TempoAccountLink",
    "TempoPlan",
    "TempoTeam",
    "TempoTeamMember",
    "TempoWorklog",
    "UserScheduleDay",
    "WorklogAttribute",
]
