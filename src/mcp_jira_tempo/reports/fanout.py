"""
Concurrent, fault-tolerant lookups behind the report tools.

The Jira and Tempo clients are blocking, so each lookup runs in a worker
thread. A fan-out starts one task per worker, member or plan item and joins
them all before any result is read. Every lookup is wrapped in ``attempt``,
which turns a failure into an ``Outcome`` carrying the documented fallback
value, so one broken lookup never aborts its siblings.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..jira import JiraFetcher
from ..models.constants import PLAN_ITEM_ISSUE, PLAN_ITEM_PROJECT
from ..models.tempo import PlanReference, TempoPlan, TempoWorklog, UserScheduleDay
from ..tempo import TempoFetcher
from ..utils.dates import DateRange

logger = logging.getLogger("mcp-jira-tempo.reports")

T = TypeVar("T")


@dataclass
class Outcome(Generic[T]):
    """Result of one best-effort lookup: a value, degraded when ``reason`` is set."""

    value: T
    reason: str | None = None

    @property
    def degraded(self) -> bool:
        return self.reason is not None


async def attempt(
    fn: Callable[..., T], *args: Any, fallback: T, label: str = ""
) -> Outcome[T]:
    """
    Run a blocking lookup in a worker thread, degrading to ``fallback`` on failure.

    Args:
        fn: The blocking callable
        *args: Positional arguments for ``fn``
        fallback: Value used when ``fn`` raises
        label: Description used in the debug log

    Returns:
        Outcome with the lookup's value, or the fallback and the failure reason
    """
    try:
        return Outcome(await asyncio.to_thread(fn, *args))
    except Exception as e:  # noqa: BLE001 - degradation is the contract here
        logger.debug(f"Lookup {label or getattr(fn, '__name__', fn)} degraded: {e}")
        return Outcome(fallback, reason=str(e))


@dataclass
class WorkerData:
    """Everything a report needs about one worker."""

    account_id: str
    display_name: str
    worklogs: list[TempoWorklog] = field(default_factory=list)
    schedule: list[UserScheduleDay] = field(default_factory=list)
    degraded: dict[str, str] = field(default_factory=dict)


def lookup_display_name(jira: JiraFetcher, account_id: str) -> str:
    return jira.get_user(account_id).display_name or account_id


def lookup_plan_label(jira: JiraFetcher, item: PlanReference) -> str:
    """Human label for a plan item: "KEY — summary" or "KEY — name"."""
    if item.type == PLAN_ITEM_ISSUE:
        issue = jira.get_issue_by_id(item.id)
        if issue.key:
            return f"{issue.key} — {issue.summary}"
    elif item.type == PLAN_ITEM_PROJECT:
        project = jira.get_project_by_id(item.id)
        if project.key:
            return f"{project.key} — {project.name}"
    return item.fallback_label


def lookup_issue_key(jira: JiraFetcher, issue_id: int) -> str:
    return jira.get_issue_by_id(issue_id).key or f"{PLAN_ITEM_ISSUE} #{issue_id}"


async def fetch_worker_data(
    jira: JiraFetcher, tempo: TempoFetcher, account_id: str, date_range: DateRange
) -> WorkerData:
    """Fetch worklogs, display name and schedule of one worker concurrently."""
    worklogs, name, schedule = await asyncio.gather(
        attempt(
            tempo.get_worklogs,
            date_range.from_date,
            date_range.to_date,
            account_id,
            fallback=[],
            label=f"worklogs of {account_id}",
        ),
        attempt(
            lookup_display_name,
            jira,
            account_id,
            fallback=account_id,
            label=f"display name of {account_id}",
        ),
        attempt(
            tempo.get_user_schedule,
            account_id,
            date_range.from_date,
            date_range.to_date,
            fallback=[],
            label=f"schedule of {account_id}",
        ),
    )
    data = WorkerData(
        account_id=account_id,
        display_name=name.value,
        worklogs=worklogs.value,
        schedule=schedule.value,
    )
    for kind, outcome in (("worklogs", worklogs), ("name", name), ("schedule", schedule)):
        if outcome.reason is not None:
            data.degraded[kind] = outcome.reason
    return data


async def gather_worker_data(
    jira: JiraFetcher,
    tempo: TempoFetcher,
    account_ids: list[str],
    date_range: DateRange,
) -> dict[str, WorkerData]:
    """
    Fetch the data of every worker in parallel.

    Returns:
        WorkerData keyed by account ID, in the order of ``account_ids``
    """
    results = await asyncio.gather(
        *(fetch_worker_data(jira, tempo, account_id, date_range) for account_id in account_ids)
    )
    return {data.account_id: data for data in results}


async def resolve_display_names(
    jira: JiraFetcher, account_ids: Iterable[str]
) -> dict[str, str]:
    """Display name per account ID; unresolvable users keep their ID."""
    unique_ids = list(dict.fromkeys(account_ids))
    outcomes = await asyncio.gather(
        *(
            attempt(lookup_display_name, jira, account_id, fallback=account_id)
            for account_id in unique_ids
        )
    )
    return {account_id: outcome.value for account_id, outcome in zip(unique_ids, outcomes)}


async def fetch_member_worklogs(
    tempo: TempoFetcher, account_ids: Iterable[str], date_range: DateRange
) -> dict[str, list[TempoWorklog]]:
    """Worklogs per account ID; a failed fetch yields an empty list.

    Blank IDs are skipped; the unscoped endpoint would return every user's worklogs.
    """
    unique_ids = list(dict.fromkeys(a for a in account_ids if a))
    outcomes = await asyncio.gather(
        *(
            attempt(
                tempo.get_worklogs,
                date_range.from_date,
                date_range.to_date,
                account_id,
                fallback=[],
            )
            for account_id in unique_ids
        )
    )
    return {account_id: outcome.value for account_id, outcome in zip(unique_ids, outcomes)}


async def resolve_plan_labels(
    jira: JiraFetcher, plans: Iterable[TempoPlan]
) -> dict[str, str]:
    """
    Label every distinct plan item once.

    Returns:
        Label keyed by ``PlanReference.cache_key``; failures fall back to
        "<TYPE> #<id>"
    """
    items: dict[str, PlanReference] = {}
    for plan in plans:
        items.setdefault(plan.plan_item.cache_key, plan.plan_item)

    outcomes = await asyncio.gather(
        *(
            attempt(lookup_plan_label, jira, item, fallback=item.fallback_label)
            for item in items.values()
        )
    )
    return {key: outcome.value for key, outcome in zip(items, outcomes)}


async def resolve_issue_keys(
    jira: JiraFetcher, worklogs: Iterable[TempoWorklog]
) -> dict[int, str]:
    """
    Look up issue keys for worklogs that only carry the numeric issue ID.

    Tempo v4 references issues by ID; each distinct ID is looked up once and
    an unresolvable issue is labelled "ISSUE #<id>".

    Returns:
        Issue key keyed by issue ID, only for the IDs that needed a lookup
    """
    missing = list(
        dict.fromkeys(w.issue_id for w in worklogs if not w.issue_key and w.issue_id)
    )
    if not missing:
        return {}

    outcomes = await asyncio.gather(
        *(
            attempt(
                lookup_issue_key,
                jira,
                issue_id,
                fallback=f"{PLAN_ITEM_ISSUE} #{issue_id}",
            )
            for issue_id in missing
        )
    )
    return {issue_id: outcome.value for issue_id, outcome in zip(missing, outcomes)}


def apply_issue_keys(
    worklogs: list[TempoWorklog], keys: dict[int, str]
) -> list[TempoWorklog]:
    """Copy of ``worklogs`` with missing issue keys filled from ``keys``."""
    if not keys:
        return worklogs
    return [
        w.model_copy(update={"issue_key": keys[w.issue_id]})
        if not w.issue_key and w.issue_id in keys
        else w
        for w in worklogs
    ]
