"""Jira API module for mcp_jira_tempo.

Only the read operations the time tracking tools need: issue and project
lookups, JQL search and user resolution.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .users import UsersMixin


class JiraFetcher(IssuesMixin, ProjectsMixin, SearchMixin, UsersMixin):
    """
    The Jira client used by the tools.

    - IssuesMixin: issue key/ID resolution
    - ProjectsMixin: project lookups
    - SearchMixin: JQL search for issue lists
    - UsersMixin: current user, user lookups and user search
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
