"""Tempo API module for mcp_jira_tempo.

This module provides the Tempo Cloud REST API v4 client.
"""

from .accounts import AccountsMixin
from .client import TempoClient
from .config import TempoConfig
from .plans import PlansMixin
from .schedules import SchedulesMixin
from .teams import TeamsMixin
from .worklogs import WorklogsMixin


class TempoFetcher(
    WorklogsMixin,
    AccountsMixin,
    TeamsMixin,
    SchedulesMixin,
    PlansMixin,
):
    """
    The main Tempo client class providing access to all Tempo operations.

    This class inherits from multiple mixins that provide specific functionality:
    - WorklogsMixin: Creating and listing worklogs
    - AccountsMixin: Billing account links per project
    - TeamsMixin: Teams and team members
    - SchedulesMixin: Required working time per user
    - PlansMixin: Plans (resource allocations)
    """

    pass


__all__ = ["TempoFetcher", "TempoConfig", "TempoClient"]
