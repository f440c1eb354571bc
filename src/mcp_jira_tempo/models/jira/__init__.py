"""
Jira data models used by the time tracking tools.
"""

from .common import JiraProject, JiraUser
from .issue import JiraIssue

__all__ = ["JiraIssue", "JiraProject", "JiraUser"]
