"""Module for Jira project lookups."""

from ..models.jira import JiraProject
from .client import JiraClient


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_project_by_id(self, project_id: str | int) -> JiraProject:
        """
        Get a project by numeric ID (or key).

        Args:
            project_id: The project ID

        Returns:
            JiraProject with id, key and name
        """
        data = self._call(self.jira.get_project, str(project_id))
        return JiraProject.from_api_response(data)
