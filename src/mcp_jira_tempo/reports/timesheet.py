"""
Timesheet report: logged vs required time for one or more workers.

Two layouts are rendered from the same fetched data:

- by worker: totals per worker (logged, billable, non-billable, required,
  difference), an optional daily grid and per-issue / per-activity
  breakdowns, followed by grand totals across all workers
- by issue: issue -> worker -> time, issues ordered by total time

The by-issue layout intentionally has no billable or activity breakdowns.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Literal

from ..models.constants import EMPTY_CELL, NO_DESCRIPTION_LABEL, NO_ISSUE_LABEL
from ..models.tempo import TempoWorklog, UserScheduleDay
from ..utils.dates import DateRange, format_date, format_seconds, format_signed_seconds
from .fanout import WorkerData
from .markdown import percent, render_table, seconds_or_empty, truncate

GroupBy = Literal["worker", "issue"]

MAX_GRID_DAYS = 31
ACTIVITY_TEXT_LIMIT = 80


@dataclass
class TimesheetTotals:
    logged_seconds: int = 0
    billable_seconds: int = 0
    required_seconds: int = 0

    @property
    def non_billable_seconds(self) -> int:
        return self.logged_seconds - self.billable_seconds

    @property
    def difference_seconds(self) -> int:
        return self.logged_seconds - self.required_seconds

    @property
    def billable_percent(self) -> int:
        return percent(self.billable_seconds, self.logged_seconds)

    def add(self, other: "TimesheetTotals") -> None:
        self.logged_seconds += other.logged_seconds
        self.billable_seconds += other.billable_seconds
        self.required_seconds += other.required_seconds


@dataclass
class DailyRow:
    day: str
    logged_seconds: int
    billable_seconds: int
    required_seconds: int

    @property
    def difference_seconds(self) -> int:
        return self.logged_seconds - self.required_seconds


def worker_totals(
    worklogs: list[TempoWorklog], schedule: list[UserScheduleDay]
) -> TimesheetTotals:
    return TimesheetTotals(
        logged_seconds=sum(w.time_spent_seconds for w in worklogs),
        billable_seconds=sum(w.billable_seconds for w in worklogs),
        required_seconds=sum(d.required_seconds for d in schedule),
    )


def daily_rows(
    worklogs: list[TempoWorklog], schedule: list[UserScheduleDay], days: list[date]
) -> list[DailyRow]:
    """
    One row per day of ``days`` that has logged or required time.

    A day is skipped only when both logged and required time are zero.
    """
    logged: dict[str, int] = defaultdict(int)
    billable: dict[str, int] = defaultdict(int)
    for worklog in worklogs:
        logged[worklog.start_date] += worklog.time_spent_seconds
        billable[worklog.start_date] += worklog.billable_seconds
    required = {entry.date: entry.required_seconds for entry in schedule}

    rows = []
    for day in days:
        key = format_date(day)
        row = DailyRow(
            day=key,
            logged_seconds=logged.get(key, 0),
            billable_seconds=billable.get(key, 0),
            required_seconds=required.get(key, 0),
        )
        if row.logged_seconds == 0 and row.required_seconds == 0:
            continue
        rows.append(row)
    return rows


def issue_breakdown(worklogs: list[TempoWorklog]) -> list[tuple[str, int]]:
    """Total seconds per issue key, largest first."""
    totals: dict[str, int] = {}
    for worklog in worklogs:
        key = worklog.issue_key or NO_ISSUE_LABEL
        totals[key] = totals.get(key, 0) + worklog.time_spent_seconds
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def activity_breakdown(
    worklogs: list[TempoWorklog],
) -> list[tuple[str, TimesheetTotals]]:
    """Total and billable seconds per description, largest total first."""
    totals: dict[str, TimesheetTotals] = {}
    for worklog in worklogs:
        activity = worklog.description.strip() or NO_DESCRIPTION_LABEL
        entry = totals.setdefault(activity, TimesheetTotals())
        entry.logged_seconds += worklog.time_spent_seconds
        entry.billable_seconds += worklog.billable_seconds
    return sorted(totals.items(), key=lambda item: item[1].logged_seconds, reverse=True)


def render_totals(title: str, totals: TimesheetTotals) -> str:
    billable_pct = totals.billable_percent
    return (
        f"### {title}\n"
        f"**Logged:** {format_seconds(totals.logged_seconds)} | "
        f"**Required:** {format_seconds(totals.required_seconds)} | "
        f"**Difference:** {format_signed_seconds(totals.difference_seconds)}\n"
        f"**Billable:** {format_seconds(totals.billable_seconds)} ({billable_pct}%) | "
        f"**Non-billable:** {format_seconds(totals.non_billable_seconds)} "
        f"({100 - billable_pct}%)\n"
    )


def render_daily_grid(rows: list[DailyRow]) -> str:
    return (
        render_table(
            ["Date", "Logged", "Billable", "Required", "Diff"],
            [
                [
                    row.day,
                    seconds_or_empty(row.logged_seconds),
                    seconds_or_empty(row.billable_seconds),
                    seconds_or_empty(row.required_seconds),
                    format_signed_seconds(row.difference_seconds, zero=EMPTY_CELL),
                ]
                for row in rows
            ],
        )
        + "\n"
    )


def render_by_worker(
    date_range: DateRange, workers: list[WorkerData], include_details: bool = True
) -> list[str]:
    days = date_range.days()
    show_grid = 1 < len(days) <= MAX_GRID_DAYS
    grand = TimesheetTotals()
    parts: list[str] = []

    for worker in workers:
        totals = worker_totals(worker.worklogs, worker.schedule)
        grand.add(totals)
        parts.append(render_totals(worker.display_name, totals))

        if show_grid:
            rows = daily_rows(worker.worklogs, worker.schedule, days)
            if rows:
                parts.append(render_daily_grid(rows))

        if include_details and worker.worklogs:
            parts.append("**Breakdown by issue:**\n")
            parts.append(
                render_table(
                    ["Issue", "Total Time"],
                    [
                        [key, format_seconds(seconds)]
                        for key, seconds in issue_breakdown(worker.worklogs)
                    ],
                )
                + "\n"
            )

            parts.append("**Breakdown by activity:**\n")
            parts.append(
                render_table(
                    ["Activity / Description", "Total", "Billable", "% of Total"],
                    [
                        [
                            truncate(activity, ACTIVITY_TEXT_LIMIT),
                            format_seconds(entry.logged_seconds),
                            seconds_or_empty(entry.billable_seconds),
                            f"{percent(entry.logged_seconds, totals.logged_seconds)}%",
                        ]
                        for activity, entry in activity_breakdown(worker.worklogs)
                    ],
                )
                + "\n"
            )

    parts.append("---\n" + render_totals(f"Grand Total ({len(workers)} workers)", grand))
    return parts


def render_by_issue(workers: list[WorkerData]) -> list[str]:
    names = {worker.account_id: worker.display_name for worker in workers}
    per_issue: dict[str, dict[str, int]] = {}
    grand_total = 0

    for worker in workers:
        for worklog in worker.worklogs:
            issue_key = worklog.issue_key or NO_ISSUE_LABEL
            per_worker = per_issue.setdefault(issue_key, {})
            author = worklog.author_account_id
            per_worker[author] = per_worker.get(author, 0) + worklog.time_spent_seconds
            grand_total += worklog.time_spent_seconds

    ordered = sorted(
        per_issue.items(), key=lambda item: sum(item[1].values()), reverse=True
    )
    lines = ["| Issue | Worker | Time |", "|-------|--------|------|"]
    for issue_key, per_worker in ordered:
        lines.append(
            f"| **{issue_key}** | | **{format_seconds(sum(per_worker.values()))}** |"
        )
        for author, seconds in per_worker.items():
            lines.append(f"| | {names.get(author, author)} | {format_seconds(seconds)} |")

    return ["\n".join(lines), f"\n**Grand total: {format_seconds(grand_total)}**"]


def render_timesheet(
    date_range: DateRange,
    workers: list[WorkerData],
    group_by: GroupBy = "worker",
    include_details: bool = True,
) -> str:
    """
    Render the timesheet report.

    Args:
        date_range: Reported period
        workers: Fetched data per worker, in report order
        group_by: "worker" or "issue"
        include_details: Add issue and activity breakdowns per worker

    Returns:
        The report as Markdown
    """
    parts = [f"## Timesheet Report: {date_range.from_str} → {date_range.to_str}\n"]
    if group_by == "issue":
        parts.extend(render_by_issue(workers))
    else:
        parts.extend(render_by_worker(date_range, workers, include_details))
    return "\n".join(parts)
