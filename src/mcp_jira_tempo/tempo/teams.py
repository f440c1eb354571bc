"""Module for Tempo team operations."""

from ..models.tempo import TempoTeam, TempoTeamMember
from .client import TempoClient


class TeamsMixin(TempoClient):
    """Mixin for Tempo team operations."""

    def get_teams(self) -> list[TempoTeam]:
        """Retrieve all Tempo teams visible to the token."""
        items = self.get_paged("teams", params={"limit": self.config.page_limit})
        return [TempoTeam.from_api_response(item) for item in items]

    def get_team_members(self, team_id: int) -> list[TempoTeamMember]:
        """Retrieve the members of a Tempo team."""
        items = self.get_paged(
            f"teams/{team_id}/members", params={"limit": self.config.page_limit}
        )
        return [TempoTeamMember.from_api_response(item) for item in items]
