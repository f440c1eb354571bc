"""
Tempo data models.
"""

from .account import TempoAccountLink
from .plan import PlanReference, TempoPlan
from .schedule import UserScheduleDay
from .team import TempoTeam, TempoTeamMember
from .worklog import TempoWorklog, WorklogAttribute

__all__ = [
    "PlanReference",
    "TempoAccountLink",
    "TempoPlan",
    "TempoTeam",
    "TempoTeamMember",
    "TempoWorklog",
    "UserScheduleDay",
    "WorklogAttribute",
]
