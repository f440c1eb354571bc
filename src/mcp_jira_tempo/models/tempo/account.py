"""
Tempo account link model (project → billing account).
"""

import re
from typing import Any

from ..base import ApiModel, as_int, as_str, nested
from ..constants import EMPTY_STRING

_ACCOUNT_SELF_PATTERN = re.compile(r"/accounts/(\d+)")


class TempoAccountLink(ApiModel):
    """
    Link between a Jira project and a Tempo account.

    The account-links endpoint may only return ``account.self`` (a URL); in
    that case the numeric account id is parsed out of it and ``account_key``
    stays empty until the account itself is fetched.
    """

    id: int = 0
    account_id: int = 0
    account_key: str = EMPTY_STRING
    is_default: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "TempoAccountLink":
        if not data or not isinstance(data, dict):
            return cls()

        account_id = as_int(nested(data, "account", "id"))
        if not account_id:
            self_url = as_str(nested(data, "account", "self"))
            match = _ACCOUNT_SELF_PATTERN.search(self_url)
            if match:
                account_id = int(match.group(1))

        return cls(
            id=as_int(data.get("id")),
            account_id=account_id,
            account_key=as_str(nested(data, "account", "key")),
            is_default=bool(data.get("default", False)),
        )
