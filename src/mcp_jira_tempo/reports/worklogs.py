"""Worklog listings: personal time summary and team worklogs."""

from collections import defaultdict

from ..models.constants import PLAN_ITEM_ISSUE
from ..models.tempo import TempoTeam, TempoTeamMember, TempoWorklog
from ..utils.dates import DateRange, format_date, format_seconds
from .markdown import or_empty, render_table, seconds_or_empty, table_row, truncate

NO_WORKLOGS_MESSAGE = "No worklogs found for this period."
DESCRIPTION_LIMIT = 80
DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def period_title(subject: str, date_range: DateRange) -> str:
    """Heading such as "Worklogs for 2026-02-09" or "Worklogs for week A → B"."""
    if date_range.is_single_day:
        return f"{subject} for {date_range.from_str}"
    return f"{subject} for week {date_range.from_str} → {date_range.to_str}"


def sort_worklogs(worklogs: list[TempoWorklog]) -> list[TempoWorklog]:
    """Order by date, then issue key."""
    return sorted(worklogs, key=lambda w: (w.start_date, w.issue_key))


def issue_label(worklog: TempoWorklog) -> str:
    """The issue key, "ISSUE #<id>" when only the ID is known, else the empty-cell marker."""
    if worklog.issue_key:
        return worklog.issue_key
    if worklog.issue_id:
        return f"{PLAN_ITEM_ISSUE} #{worklog.issue_id}"
    return or_empty(None)


def render_time_summary(title: str, worklogs: list[TempoWorklog]) -> str:
    """
    Render one person's worklogs with daily totals and a grand total.

    Returns the "no worklogs" message when the list is empty.
    """
    if not worklogs:
        return NO_WORKLOGS_MESSAGE

    ordered = sort_worklogs(worklogs)
    details = render_table(
        ["Date", "Issue", "Duration", "Description"],
        [
            [
                w.start_date,
                issue_label(w),
                format_seconds(w.time_spent_seconds),
                or_empty(w.description),
            ]
            for w in ordered
        ],
    )

    daily: dict[str, int] = defaultdict(int)
    for w in ordered:
        daily[w.start_date] += w.time_spent_seconds
    grand_total = sum(daily.values())

    lines = [
        f"### {title}",
        "",
        details,
        "",
        "### Daily Totals",
        "\n| Date | Total |",
        "|------|-------|",
    ]
    lines.extend(table_row([day, format_seconds(daily[day])]) for day in sorted(daily))
    lines.append(f"| **Grand Total** | **{format_seconds(grand_total)}** |")
    return "\n".join(lines)


def render_member(name: str, worklogs: list[TempoWorklog]) -> list[str]:
    total = sum(w.time_spent_seconds for w in worklogs)
    parts = [f"### {name} ({format_seconds(total)} total)\n"]
    if not worklogs:
        parts.append("No worklogs for this period.\n")
        return parts

    parts.append(
        render_table(
            ["Date", "Duration", "Issue", "Description"],
            [
                [
                    w.start_date,
                    format_seconds(w.time_spent_seconds),
                    issue_label(w),
                    or_empty(truncate(w.description, DESCRIPTION_LIMIT)),
                ]
                for w in sort_worklogs(worklogs)
            ],
        )
        + "\n"
    )
    return parts


def render_weekly_summary(
    date_range: DateRange,
    members: list[TempoTeamMember],
    names: dict[str, str],
    worklogs: dict[str, list[TempoWorklog]],
) -> list[str]:
    """Member x day grid; empty when the range is a single day."""
    days = date_range.days()
    if len(days) <= 1:
        return []

    header = (
        "| Member | "
        + " | ".join(DAY_LABELS[day.weekday()] for day in days)
        + " | Total |"
    )
    separator = "|--------|" + "|".join("----" for _ in days) + "|-------|"
    rows = [header, separator]
    for member in members:
        daily: dict[str, int] = defaultdict(int)
        for w in worklogs.get(member.account_id, []):
            daily[w.start_date] += w.time_spent_seconds
        cells = [seconds_or_empty(daily.get(format_date(day), 0)) for day in days]
        member_total = sum(daily.get(format_date(day), 0) for day in days)
        name = names.get(member.account_id, member.account_id)
        rows.append(
            f"| {name} | {' | '.join(cells)} | **{format_seconds(member_total)}** |"
        )
    return ["### Summary\n", "\n".join(rows) + "\n"]


def render_team(
    team: TempoTeam,
    date_range: DateRange,
    members: list[TempoTeamMember],
    names: dict[str, str],
    worklogs: dict[str, list[TempoWorklog]],
) -> list[str]:
    """Render one team: a section per member plus the weekly summary grid."""
    if not members:
        return [f"## {team.name}\nNo members found.\n"]

    parts = [f"## {team.name} ({date_range.from_str} → {date_range.to_str})\n"]
    for member in members:
        parts.extend(
            render_member(
                names.get(member.account_id, member.account_id),
                worklogs.get(member.account_id, []),
            )
        )
    parts.extend(render_weekly_summary(date_range, members, names, worklogs))
    return parts
