"""Resolution of the workers a timesheet report covers."""

import asyncio
import logging

from ..exceptions import NotFoundError
from ..jira import JiraFetcher

logger = logging.getLogger("mcp-jira-tempo.reports")

USER_SEARCH_LIMIT = 5


async def resolve_workers(
    jira: JiraFetcher,
    account_ids: list[str] | None,
    names: list[str] | None,
    default_account_id: str | None,
) -> list[str]:
    """
    Turn the report's worker options into a list of account IDs.

    Explicit account IDs win. Otherwise each name is searched in Jira and an
    exact, case-insensitive display-name match is preferred over the first
    search result. With neither option the caller's own account is used.
    Duplicates are dropped, first occurrence kept.

    Args:
        jira: Jira fetcher used for the user search
        account_ids: Explicit worker account IDs
        names: Display-name fragments to search for
        default_account_id: The caller's own account ID

    Returns:
        Ordered, de-duplicated account IDs

    Raises:
        NotFoundError: If a name matches nobody, or no account can be determined
    """
    resolved = [account_id.strip() for account_id in account_ids or [] if account_id.strip()]

    if not resolved and names:
        for name in names:
            users = await asyncio.to_thread(
                jira.search_users, name, USER_SEARCH_LIMIT
            )
            candidates = [user for user in users if user.account_id]
            if not candidates:
                raise NotFoundError(
                    f'Could not find Jira user matching "{name}". '
                    "Try providing worker_account_ids directly."
                )
            exact = next(
                (
                    user
                    for user in candidates
                    if user.display_name.lower() == name.strip().lower()
                ),
                None,
            )
            chosen = exact or candidates[0]
            logger.debug(f"Worker name '{name}' resolved to {chosen.account_id}")
            resolved.append(chosen.account_id)

    if not resolved:
        if not default_account_id:
            raise NotFoundError(
                "Could not determine your Jira account ID. Set JIRA_ACCOUNT_ID "
                "or provide worker_account_ids."
            )
        resolved = [default_account_id]

    return list(dict.fromkeys(resolved))
