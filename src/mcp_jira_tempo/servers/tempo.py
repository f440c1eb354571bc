"""Tempo FastMCP server instance and tool definitions."""

import logging
from itertools import chain
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from mcp_jira_tempo.exceptions import NotFoundError, ParseError
from mcp_jira_tempo.jira import JiraFetcher
from mcp_jira_tempo.models.tempo import TempoTeam, TempoWorklog, WorklogAttribute
from mcp_jira_tempo.reports import (
    apply_issue_keys,
    attempt,
    fetch_member_worklogs,
    gather_worker_data,
    lookup_display_name,
    period_title,
    render_plans,
    render_team,
    render_time_summary,
    render_timesheet,
    resolve_display_names,
    resolve_issue_keys,
    resolve_plan_labels,
    resolve_workers,
)
from mcp_jira_tempo.tempo import TempoFetcher
from mcp_jira_tempo.utils.dates import (
    DateRange,
    format_date,
    format_seconds,
    normalize_start_time,
    parse_date,
    parse_duration,
    resolve_period,
    today,
)
from mcp_jira_tempo.utils.decorators import check_write_access

from .dependencies import (
    get_account_id,
    get_app_context,
    get_jira_fetcher,
    get_tempo_fetcher,
)

logger = logging.getLogger("mcp-jira-tempo.servers.tempo")

tempo_mcp = FastMCP(
    name="Tempo MCP Service",
    instructions="Provides tools for logging and reporting time with Jira and Tempo.",
)

DEFAULT_START_TIME = "09:00"

DateOption = Annotated[
    str | None,
    Field(
        description='Specific date (YYYY-MM-DD) when period is "custom". Shows that single day.',
        default=None,
    ),
]
WeekStartOption = Annotated[
    str | None,
    Field(
        description='Monday date (YYYY-MM-DD) when period is "custom". Shows that full week.',
        default=None,
    ),
]


class WorklogEntry(BaseModel):
    """One entry of a bulk time logging request."""

    issue_key: str = Field(description='Jira issue key, e.g. "PROJ-123"')
    duration: str = Field(description='Time spent, e.g. "2h", "30m", "1h30m"')
    date: str | None = Field(
        default=None, description="Date in ISO format (YYYY-MM-DD). Defaults to today."
    )
    description: str | None = Field(
        default=None, description="Optional description for the worklog."
    )
    start_time: str | None = Field(
        default=None,
        description='Start time (HH:MM or HH:MM:SS). Defaults to "09:00".',
    )


def _resolve_range(
    period: str, date: str | None = None, week_start: str | None = None
) -> DateRange:
    try:
        return resolve_period(period, date_str=date, week_start=week_start)
    except ParseError as e:
        raise ToolError(str(e)) from e


def _resolve_log_date(date: str | None) -> str:
    return format_date(parse_date(date)) if date and date.strip() else format_date(today())


def _submit_worklog(
    jira: JiraFetcher,
    tempo: TempoFetcher,
    issue_key: str,
    seconds: int,
    start_date: str,
    start_time: str,
    author_account_id: str,
    description: str | None,
) -> TempoWorklog:
    """Resolve the issue, attach the project's billing account and create the worklog."""
    issue_id, project_id = jira.get_issue_ids(issue_key)

    attributes: list[WorklogAttribute] = []
    if project_id:
        account_link = tempo.get_default_account_for_project(project_id)
        if account_link and account_link.account_key:
            attributes.append(
                WorklogAttribute(
                    key=tempo.config.account_attribute_key,
                    value=account_link.account_key,
                )
            )

    return tempo.create_worklog(
        issue_id=issue_id,
        time_spent_seconds=seconds,
        start_date=start_date,
        start_time=start_time,
        author_account_id=author_account_id,
        description=description,
        attributes=attributes,
        issue_key=issue_key,
    )


@tempo_mcp.tool(tags={"tempo", "write"})
@check_write_access
async def log_time(
    ctx: Context,
    issue_key: Annotated[str, Field(description='Jira issue key, e.g. "PROJ-123"')],
    duration: Annotated[
        str, Field(description='Time spent, e.g. "2h", "30m", "1h30m", "1.5h"')
    ],
    date: Annotated[
        str | None,
        Field(
            description="Date for the worklog in ISO format (YYYY-MM-DD). Defaults to today.",
            default=None,
        ),
    ] = None,
    description: Annotated[
        str | None,
        Field(description="Optional description / comment for the worklog.", default=None),
    ] = None,
    start_time: Annotated[
        str,
        Field(
            description="Start time of the work (HH:MM or HH:MM:SS).",
            default=DEFAULT_START_TIME,
        ),
    ] = DEFAULT_START_TIME,
) -> str:
    """Log time to a single Jira issue via the Tempo API.

    Duration supports formats like "2h", "30m", "1h30m", "1.5h".

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        duration: Time spent.
        date: Date of the work, defaults to today.
        description: Optional worklog description.
        start_time: Start time of the work.

    Returns:
        Confirmation with the Tempo worklog ID.

    Raises:
        ToolError: If the time could not be logged.
    """
    key = issue_key.strip().upper()
    try:
        seconds = parse_duration(duration)
        start_date = _resolve_log_date(date)
        start = normalize_start_time(start_time)
        author = get_account_id(ctx)
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)
        worklog = _submit_worklog(
            jira, tempo, key, seconds, start_date, start, author, description
        )
    except Exception as e:
        logger.error(f"Error logging time to {key}: {e}", exc_info=True)
        raise ToolError(f"Failed to log time: {e}") from e

    return (
        f"Successfully logged {format_seconds(seconds)} to {key} on {start_date}.\n"
        f"Tempo worklog ID: {worklog.tempo_worklog_id}"
    )


@tempo_mcp.tool(tags={"tempo", "write"})
@check_write_access
async def bulk_log_time(
    ctx: Context,
    entries: Annotated[
        list[WorklogEntry],
        Field(description="Array of worklog entries to submit."),
    ],
) -> str:
    """Log time to multiple Jira issues at once via the Tempo API.

    Each entry is submitted independently; a failing entry is reported and
    the remaining entries are still logged. Date defaults to today.

    Args:
        ctx: The FastMCP context.
        entries: Worklog entries (issue_key, duration, optional date,
            description and start_time).

    Returns:
        One line per entry followed by the succeeded/failed counts.

    Raises:
        ToolError: If the tools are not configured or no author is known.
    """
    try:
        author = get_account_id(ctx)
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)
    except Exception as e:
        logger.error(f"Error preparing bulk time logging: {e}", exc_info=True)
        raise ToolError(f"Failed to bulk log time: {e}") from e

    default_date = format_date(today())
    lines: list[str] = []
    succeeded = 0
    failed = 0

    for entry in entries:
        key = entry.issue_key.strip().upper()
        try:
            seconds = parse_duration(entry.duration)
            start_date = _resolve_log_date(entry.date) if entry.date else default_date
            start = normalize_start_time(entry.start_time or DEFAULT_START_TIME)
            worklog = _submit_worklog(
                jira, tempo, key, seconds, start_date, start, author, entry.description
            )
        except Exception as e:
            logger.debug(f"Bulk entry for {key} failed: {e}")
            lines.append(f"✗ {key} — {e}")
            failed += 1
            continue

        lines.append(
            f"✓ {key} — {format_seconds(seconds)} on {start_date} "
            f"(ID: {worklog.tempo_worklog_id})"
        )
        succeeded += 1

    logger.info(f"Bulk log finished: {succeeded} succeeded, {failed} failed")
    summary = (
        f"\nBulk log complete: {succeeded} succeeded, {failed} failed "
        f"out of {len(entries)} entries."
    )
    return "\n".join(lines) + summary


@tempo_mcp.tool(tags={"jira", "read"})
async def list_issues(
    ctx: Context,
    filter: Annotated[
        Literal["assigned", "recent", "project"],
        Field(
            description='Filter type: "assigned" (default), "recent", or "project".',
            default="assigned",
        ),
    ] = "assigned",
    project_key: Annotated[
        str | None,
        Field(
            description='Required when filter is "project". The Jira project key, e.g. "PROJ".',
            default=None,
        ),
    ] = None,
    limit: Annotated[
        int,
        Field(description="Maximum number of issues (1-100)", default=20, ge=1, le=100),
    ] = 20,
) -> str:
    """List Jira issues.

    By default shows open issues assigned to you. Use filter "project" with a
    project_key to filter by project, or "recent" to show recently updated
    issues.

    Args:
        ctx: The FastMCP context.
        filter: Which issues to list.
        project_key: Project key for the "project" filter.
        limit: Maximum number of issues.

    Returns:
        Markdown table of issues.

    Raises:
        ToolError: If the filter options are inconsistent or Jira fails.
    """
    if filter == "project" and not (project_key and project_key.strip()):
        raise ToolError('project_key is required when filter is "project".')

    try:
        jira = await get_jira_fetcher(ctx)
        if filter == "project":
            issues = jira.project_issues(project_key.strip().upper(), limit)
        elif filter == "recent":
            issues = jira.recent_issues(limit)
        else:
            issues = jira.my_open_issues(limit)
    except Exception as e:
        logger.error(f"Error listing issues ({filter}): {e}", exc_info=True)
        raise ToolError(f"Failed to list issues: {e}") from e

    if not issues:
        return "No issues found."

    lines = ["| Key | Type | Status | Summary |", "|-----|------|--------|---------|"]
    lines.extend(
        f"| {issue.key} | {issue.issue_type} | {issue.status} | {issue.summary} |"
        for issue in issues
    )
    return "\n".join(lines)


@tempo_mcp.tool(tags={"tempo", "read"})
async def time_summary(
    ctx: Context,
    period: Annotated[
        Literal["today", "week", "custom"],
        Field(
            description='Period: "today", "week" (default), or "custom".',
            default="week",
        ),
    ] = "week",
    date: DateOption = None,
    week_start: WeekStartOption = None,
    account_id: Annotated[
        str | None,
        Field(
            description="Optional Jira account ID to summarize another user's time. Defaults to your own.",
            default=None,
        ),
    ] = None,
) -> str:
    """View logged time for a period.

    "today" shows today's worklogs, "week" shows the current week (Mon-Fri),
    "custom" uses the provided date or week_start.

    Args:
        ctx: The FastMCP context.
        period: Period to summarize.
        date: Single day for the "custom" period.
        week_start: Week for the "custom" period.
        account_id: Whose time to summarize.

    Returns:
        Markdown tables of worklogs, daily totals and the grand total.

    Raises:
        ToolError: If the period is incomplete or the lookup fails.
    """
    date_range = _resolve_range(period, date, week_start)
    try:
        target = get_account_id(ctx, account_id)
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)
        worklogs = tempo.get_worklogs(date_range.from_date, date_range.to_date, target)
        keys = await resolve_issue_keys(jira, worklogs)
    except Exception as e:
        logger.error(f"Error getting time summary: {e}", exc_info=True)
        raise ToolError(f"Failed to get summary: {e}") from e

    return render_time_summary(
        period_title("Worklogs", date_range), apply_issue_keys(worklogs, keys)
    )


@tempo_mcp.tool(tags={"tempo", "read"})
async def team_worklogs(
    ctx: Context,
    period: Annotated[
        Literal["today", "week", "custom"],
        Field(
            description='Period: "today", "week" (default), or "custom".',
            default="week",
        ),
    ] = "week",
    date: DateOption = None,
    week_start: WeekStartOption = None,
    team_id: Annotated[
        int | None,
        Field(
            description="Optional Tempo team ID. If omitted, auto-detects teams you lead.",
            default=None,
        ),
    ] = None,
) -> str:
    """Show worklogs for your subordinates (members of Tempo teams you lead).

    Auto-detects teams where you are the lead, or specify a team_id. Returns
    a per-member breakdown with daily totals for the given period.

    Args:
        ctx: The FastMCP context.
        period: Period to show.
        date: Single day for the "custom" period.
        week_start: Week for the "custom" period.
        team_id: Team to show instead of the teams you lead.

    Returns:
        Markdown sections per team and member.

    Raises:
        ToolError: If the period is incomplete or the lookup fails.
    """
    date_range = _resolve_range(period, date, week_start)
    try:
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)
        all_teams = tempo.get_teams()

        if team_id is not None:
            match = next((team for team in all_teams if team.id == team_id), None)
            teams = [
                match
                or TempoTeam(
                    id=team_id,
                    name=f"Team {team_id}",
                    lead_account_id=get_app_context(ctx).account_id or "",
                )
            ]
        else:
            my_account_id = get_account_id(ctx)
            teams = [team for team in all_teams if team.lead_account_id == my_account_id]
            if not teams:
                return (
                    "You are not the lead of any Tempo teams. "
                    "Specify a team_id to view a specific team's worklogs."
                )

        parts: list[str] = []
        for team in teams:
            members = [m for m in tempo.get_team_members(team.id) if m.account_id]
            member_ids = [member.account_id for member in members]
            names = await resolve_display_names(jira, member_ids)
            worklogs = await fetch_member_worklogs(tempo, member_ids, date_range)
            keys = await resolve_issue_keys(jira, chain.from_iterable(worklogs.values()))
            worklogs = {
                account_id: apply_issue_keys(member_worklogs, keys)
                for account_id, member_worklogs in worklogs.items()
            }
            parts.extend(render_team(team, date_range, members, names, worklogs))
    except Exception as e:
        logger.error(f"Error getting team worklogs: {e}", exc_info=True)
        raise ToolError(f"Failed to get team worklogs: {e}") from e

    return "\n".join(parts)


@tempo_mcp.tool(tags={"tempo", "read"})
async def plans(
    ctx: Context,
    period: Annotated[
        Literal["today", "week", "custom"],
        Field(
            description='Period: "today", "week" (default), or "custom".',
            default="week",
        ),
    ] = "week",
    date: DateOption = None,
    week_start: WeekStartOption = None,
    account_id: Annotated[
        str | None,
        Field(
            description="Optional Jira account ID to view another user's plans. Defaults to your own.",
            default=None,
        ),
    ] = None,
    issue_key: Annotated[
        str | None,
        Field(
            description='Optional Jira issue key to only show plans for that issue, e.g. "PROJ-123".',
            default=None,
        ),
    ] = None,
) -> str:
    """View resource allocation plans from Tempo Capacity Planner.

    Shows planned time per issue/project for a given period. "today" shows
    plans active today, "week" shows the current week, "custom" uses the
    provided date or week_start.

    Args:
        ctx: The FastMCP context.
        period: Period to show.
        date: Single day for the "custom" period.
        week_start: Week for the "custom" period.
        account_id: Whose plans to show.
        issue_key: Restrict to plans for one issue.

    Returns:
        Markdown table of plans with the total planned time.

    Raises:
        ToolError: If the period is incomplete or the lookup fails.
    """
    date_range = _resolve_range(period, date, week_start)
    try:
        target = get_account_id(ctx, account_id)
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)

        if issue_key and issue_key.strip():
            issue_id, _ = jira.get_issue_ids(issue_key.strip().upper())
            found = tempo.get_plans(
                date_range.from_date,
                date_range.to_date,
                account_ids=[target],
                issue_ids=[issue_id],
            )
        else:
            found = tempo.get_plans_for_user(
                target, date_range.from_date, date_range.to_date
            )

        labels = await resolve_plan_labels(jira, found) if found else {}
        name = (
            await attempt(lookup_display_name, jira, target, fallback=target)
        ).value
    except Exception as e:
        logger.error(f"Error getting plans: {e}", exc_info=True)
        raise ToolError(f"Failed to get plans: {e}") from e

    return render_plans(
        period_title("Plans", date_range), name, found, labels, date_range
    )


@tempo_mcp.tool(tags={"tempo", "read"})
async def team_report(
    ctx: Context,
    period: Annotated[
        Literal["today", "week", "month", "custom"],
        Field(
            description=(
                'Period: "today", "week" (current week), "month" (current month), '
                'or "custom". Defaults to current month.'
            ),
            default="month",
        ),
    ] = "month",
    from_date: Annotated[
        str | None,
        Field(
            alias="from",
            description='Start date (YYYY-MM-DD) when period is "custom".',
            default=None,
        ),
    ] = None,
    to_date: Annotated[
        str | None,
        Field(
            alias="to",
            description='End date (YYYY-MM-DD) when period is "custom".',
            default=None,
        ),
    ] = None,
    worker_account_ids: Annotated[
        list[str] | None,
        Field(
            description=(
                "Array of Jira account IDs to include in the report. "
                "If omitted, searches by worker_names instead."
            ),
            default=None,
        ),
    ] = None,
    worker_names: Annotated[
        list[str] | None,
        Field(
            description=(
                "Array of display names to search for in Jira. "
                'Used when worker_account_ids is not provided. E.g. ["John Smith"].'
            ),
            default=None,
        ),
    ] = None,
    group_by: Annotated[
        Literal["worker", "issue"],
        Field(
            description='Group results by "worker" (default) or "issue".',
            default="worker",
        ),
    ] = "worker",
    include_details: Annotated[
        bool,
        Field(
            description="Include per-issue detail rows for each worker. Defaults to true.",
            default=True,
        ),
    ] = True,
) -> str:
    """Generate a Tempo-style timesheet report for one or more users.

    Provide worker account IDs directly, or search by display name. Returns
    per-worker breakdown with logged vs required hours, daily totals, and
    issue-level detail, or totals per issue with group_by "issue".

    Args:
        ctx: The FastMCP context.
        period: Reported period.
        from_date: Start date for the "custom" period.
        to_date: End date for the "custom" period.
        worker_account_ids: Workers by account ID.
        worker_names: Workers by display name.
        group_by: Report layout.
        include_details: Add issue and activity breakdowns per worker.

    Returns:
        Markdown timesheet report.

    Raises:
        ToolError: If the period is incomplete, a worker cannot be found or
            the lookup fails.
    """
    if period == "custom" and not (from_date and to_date):
        raise ToolError(
            'When period is "custom", both "from" and "to" dates are required.'
        )
    try:
        date_range = resolve_period(period, from_str=from_date, to_str=to_date)
    except ParseError as e:
        raise ToolError(str(e)) from e

    try:
        jira = await get_jira_fetcher(ctx)
        tempo = await get_tempo_fetcher(ctx)
        account_ids = await resolve_workers(
            jira,
            worker_account_ids,
            worker_names,
            get_app_context(ctx).account_id,
        )
    except NotFoundError as e:
        raise ToolError(str(e)) from e
    except Exception as e:
        logger.error(f"Error resolving report workers: {e}", exc_info=True)
        raise ToolError(f"Failed to generate team report: {e}") from e

    try:
        worker_data = await gather_worker_data(jira, tempo, account_ids, date_range)
        keys = await resolve_issue_keys(
            jira, chain.from_iterable(data.worklogs for data in worker_data.values())
        )
        workers = []
        for account_id in account_ids:
            data = worker_data[account_id]
            data.worklogs = apply_issue_keys(data.worklogs, keys)
            workers.append(data)
        return render_timesheet(date_range, workers, group_by, include_details)
    except Exception as e:
        logger.error(f"Error generating team report: {e}", exc_info=True)
        raise ToolError(f"Failed to generate team report: {e}") from e
