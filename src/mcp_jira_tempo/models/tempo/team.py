"""
Tempo team models.
"""

from typing import Any

from ..base import ApiModel, as_int, as_str, nested
from ..constants import EMPTY_STRING


class TempoTeam(ApiModel):
    """A Tempo team and its lead."""

    id: int = 0
    name: str = EMPTY_STRING
    lead_account_id: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "TempoTeam":
        if not data or not isinstance(data, dict):
            return cls()
        team_id = as_int(data.get("id"))
        return cls(
            id=team_id,
            name=as_str(data.get("name")) or f"Team {team_id}",
            lead_account_id=as_str(nested(data, "lead", "accountId")),
        )


class TempoTeamMember(ApiModel):
    """A member of a Tempo team."""

    account_id: str = EMPTY_STRING
    role_id: int = 0

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "TempoTeamMember":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            account_id=as_str(nested(data, "member", "accountId")),
            role_id=as_int(nested(data, "role", "id")),
        )
